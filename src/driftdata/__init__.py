"""
Bundled market metadata and account addresses for the drift program.

`ProgramData.new(context, lookup_table)` builds the market registry for a
network from the dumps shipped in `driftdata.constants`.
"""

from driftdata.accounts import (
    derive_drift_signer,
    derive_perp_market_account,
    derive_spot_market_account,
    derive_spot_market_vault,
    market_lookup_table,
    state_account,
    token_program_id,
)
from driftdata.errors import InvalidContextError, MalformedConfigError
from driftdata.program_data import ProgramData
from driftdata.types import Context, PerpMarketAccount, SpotMarketAccount

__all__ = [
    "Context",
    "InvalidContextError",
    "MalformedConfigError",
    "PerpMarketAccount",
    "ProgramData",
    "SpotMarketAccount",
    "derive_drift_signer",
    "derive_perp_market_account",
    "derive_spot_market_account",
    "derive_spot_market_vault",
    "market_lookup_table",
    "state_account",
    "token_program_id",
]
