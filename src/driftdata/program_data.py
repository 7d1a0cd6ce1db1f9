import logging
from typing import Optional, Sequence

from solana.rpc.async_api import AsyncClient
from solders.address_lookup_table_account import AddressLookupTableAccount  # type: ignore
from solders.pubkey import Pubkey

from driftdata.accounts import market_lookup_table
from driftdata.address_lookup_table import (
    empty_lookup_table,
    get_address_lookup_table,
)
from driftdata.constants.bundles import raw_perp_markets, raw_spot_markets
from driftdata.decode.markets import decode_perp_markets, decode_spot_markets
from driftdata.decode.normalize import normalize
from driftdata.types import (
    Context,
    PerpMarketAccount,
    SpotMarketAccount,
    context_to_env,
)

logger = logging.getLogger(__name__)


class ProgramData:
    """
    Static-ish metadata of the drift program: the known spot and perp markets
    and the market address lookup table.

    Markets are indexed by position, `spot_markets[i].market_index == i`.
    Instances are never mutated after construction.
    """

    def __init__(
        self,
        spot_markets: Sequence[SpotMarketAccount],
        perp_markets: Sequence[PerpMarketAccount],
        lookup_table: AddressLookupTableAccount,
    ):
        self._spot_markets = tuple(spot_markets)
        self._perp_markets = tuple(perp_markets)
        self.lookup_table = lookup_table

    @classmethod
    def uninitialized(cls) -> "ProgramData":
        """Placeholder for bootstrapping, holds no markets"""
        return cls([], [], empty_lookup_table())

    @classmethod
    def from_bundles(
        cls,
        spot_markets_json: str,
        perp_markets_json: str,
        lookup_table: AddressLookupTableAccount,
    ) -> "ProgramData":
        spot_markets = decode_spot_markets(normalize(spot_markets_json))
        perp_markets = decode_perp_markets(normalize(perp_markets_json))
        return cls(spot_markets, perp_markets, lookup_table)

    @classmethod
    def new(
        cls, context: Context, lookup_table: AddressLookupTableAccount
    ) -> "ProgramData":
        program_data = cls.from_bundles(
            raw_spot_markets(context), raw_perp_markets(context), lookup_table
        )
        logger.info(
            f"loaded {len(program_data._spot_markets)} spot markets and "
            f"{len(program_data._perp_markets)} perp markets for {context_to_env(context)}"
        )
        return program_data

    @classmethod
    async def load(cls, connection: AsyncClient, context: Context) -> "ProgramData":
        lookup_table_key = market_lookup_table(context)
        lookup_table = await get_address_lookup_table(connection, lookup_table_key)
        if lookup_table is None:
            raise ValueError(f"market lookup table {lookup_table_key} not found")
        return cls.new(context, lookup_table)

    def is_initialized(self) -> bool:
        return not (
            self.lookup_table.key == Pubkey.default()
            and not self._spot_markets
            and not self._perp_markets
        )

    def spot_market_configs(self) -> Sequence[SpotMarketAccount]:
        return self._spot_markets

    def perp_market_configs(self) -> Sequence[PerpMarketAccount]:
        return self._perp_markets

    def spot_market_config_by_index(
        self, market_index: int
    ) -> Optional[SpotMarketAccount]:
        if 0 <= market_index < len(self._spot_markets):
            return self._spot_markets[market_index]
        return None

    def perp_market_config_by_index(
        self, market_index: int
    ) -> Optional[PerpMarketAccount]:
        if 0 <= market_index < len(self._perp_markets):
            return self._perp_markets[market_index]
        return None
