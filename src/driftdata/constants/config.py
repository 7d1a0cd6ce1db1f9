import os
from dataclasses import dataclass, replace
from typing import Optional

import dotenv
from solders.pubkey import Pubkey

from driftdata.errors import InvalidContextError
from driftdata.types import Context, DriftEnv

DRIFT_PROGRAM_ID = Pubkey.from_string("dRiftyHA39MWEi3m9aunc5MzRF1JYuBsbn6VPcn33UH")
TOKEN_PROGRAM_ID_STR = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


@dataclass
class Config:
    env: DriftEnv
    context: Context
    default_http: str
    default_ws: str
    market_lookup_table: Pubkey


configs = {
    "devnet": Config(
        env="devnet",
        context=Context.DevNet(),  # type: ignore
        default_http="https://api.devnet.solana.com",
        default_ws="wss://api.devnet.solana.com",
        market_lookup_table=Pubkey.from_string(
            "FaMS3U4uBojvGn5FSDEPimddcXsCfwkKsFgMVVnDdxGb"
        ),
    ),
    "mainnet": Config(
        env="mainnet",
        context=Context.MainNet(),  # type: ignore
        default_http="https://api.mainnet-beta.solana.com",
        default_ws="wss://api.mainnet-beta.solana.com",
        market_lookup_table=Pubkey.from_string(
            "D9cnvzswDikQDf53k4HpQ3KJ9y1Fv3HGGDFYMXnK5T6c"
        ),
    ),
}


def get_config(env: Optional[str] = None) -> Config:
    """
    Resolve the network config.

    `env` falls back to the DRIFT_ENV environment variable (a .env file is
    honored) and then to mainnet. RPC_URL, when set, overrides the default
    http endpoint.
    """
    dotenv.load_dotenv()
    env = env or os.environ.get("DRIFT_ENV", "mainnet")
    if env not in configs:
        raise InvalidContextError(f"no config for drift env: {env}")

    config = configs[env]
    rpc_url = os.environ.get("RPC_URL")
    if rpc_url:
        return replace(config, default_http=rpc_url)
    return config
