"""
Market account dumps shipped with the package.

Each file is an array of `{"account": ...}` wrappers, with an optional
`publicKey` next to `account`. They are in the loose JSON flavor produced by
the account dumper: big numbers as hex strings, addresses as base58 strings
and unit enum variants as `{"variant": {}}`.
They are read as-is and handed to `driftdata.decode.normalize`.
"""

from importlib.resources import files

from driftdata.types import Context, context_to_env

SPOT_MARKETS_FILE = "{env}_spot_markets.json"
PERP_MARKETS_FILE = "{env}_perp_markets.json"


def _read_bundle(file_name: str) -> str:
    return files("driftdata.constants").joinpath(file_name).read_text(encoding="utf-8")


def raw_spot_markets(context: Context) -> str:
    return _read_bundle(SPOT_MARKETS_FILE.format(env=context_to_env(context)))


def raw_perp_markets(context: Context) -> str:
    return _read_bundle(PERP_MARKETS_FILE.format(env=context_to_env(context)))
