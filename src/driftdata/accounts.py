from solders.pubkey import Pubkey

from driftdata.addresses import (
    get_drift_client_signer_public_key,
    get_perp_market_public_key,
    get_spot_market_public_key,
    get_spot_market_vault_public_key,
    get_state_public_key,
)
from driftdata.constants.config import (
    DRIFT_PROGRAM_ID,
    TOKEN_PROGRAM_ID_STR,
    configs,
)
from driftdata.errors import InvalidContextError
from driftdata.once_cell import OnceCell
from driftdata.types import Context, is_variant

# process lifetime, never reset
_STATE_ACCOUNT: OnceCell[Pubkey] = OnceCell()
_TOKEN_PROGRAM_ID: OnceCell[Pubkey] = OnceCell()


def market_lookup_table(context: Context) -> Pubkey:
    if is_variant(context, "DevNet"):
        return configs["devnet"].market_lookup_table
    if is_variant(context, "MainNet"):
        return configs["mainnet"].market_lookup_table
    raise InvalidContextError(f"no market lookup table for context: {context}")


def state_account() -> Pubkey:
    return _STATE_ACCOUNT.get_or_init(lambda: get_state_public_key(DRIFT_PROGRAM_ID))


def token_program_id() -> Pubkey:
    return _TOKEN_PROGRAM_ID.get_or_init(
        lambda: Pubkey.from_string(TOKEN_PROGRAM_ID_STR)
    )


def derive_spot_market_account(market_index: int) -> Pubkey:
    return get_spot_market_public_key(DRIFT_PROGRAM_ID, market_index)


def derive_spot_market_vault(market_index: int) -> Pubkey:
    return get_spot_market_vault_public_key(DRIFT_PROGRAM_ID, market_index)


def derive_perp_market_account(market_index: int) -> Pubkey:
    return get_perp_market_public_key(DRIFT_PROGRAM_ID, market_index)


def derive_drift_signer() -> Pubkey:
    return get_drift_client_signer_public_key(DRIFT_PROGRAM_ID)
