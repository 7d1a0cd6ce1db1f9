import json
import re
import typing
from dataclasses import MISSING, fields, is_dataclass
from typing import Annotated, Any, Callable, Optional, TypeVar, Union

from solders.pubkey import Pubkey

from driftdata.accounts import derive_perp_market_account, derive_spot_market_account
from driftdata.errors import MalformedConfigError
from driftdata.types import ENUM_TYPES, PerpMarketAccount, SpotMarketAccount

T = TypeVar("T", SpotMarketAccount, PerpMarketAccount)

WRAPPER_ACCOUNT_KEY = "account"
WRAPPER_PUBKEY_KEY = "publicKey"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_VARIANT_NAME = re.compile(r"[a-zA-Z][a-zA-Z0-9]*")
_CAMEL_KEY = re.compile(r"[a-z][a-zA-Z0-9]*")


def camel_to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _reject_constant(name: str):
    raise ValueError(f"non-standard json constant {name}")


def _fail(path: str, message: str) -> MalformedConfigError:
    return MalformedConfigError(f"{path}: {message}")


def _decode_int(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _fail(path, f"expected an integer, got {value!r}")
    return value


def _decode_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise _fail(path, f"expected a bool, got {value!r}")
    return value


def _decode_bytes(value: Any, path: str, length: Optional[int] = None) -> list[int]:
    if not isinstance(value, list):
        raise _fail(path, f"expected a byte array, got {value!r}")
    out = [_decode_int(v, f"{path}[{i}]") for i, v in enumerate(value)]
    if any(not 0 <= v <= 255 for v in out):
        raise _fail(path, "byte out of range")
    if length is not None and len(out) != length:
        raise _fail(path, f"expected {length} bytes, got {len(out)}")
    return out


def _decode_pubkey(value: Any, path: str) -> Pubkey:
    raw = _decode_bytes(value, path)
    if len(raw) != 32:
        raise _fail(path, f"expected 32 bytes for an address, got {len(raw)}")
    return Pubkey.from_bytes(bytes(raw))


def _decode_enum(enum_type, value: Any, path: str):
    if not isinstance(value, str) or not _VARIANT_NAME.fullmatch(value):
        raise _fail(path, f"expected a {enum_type.__name__} variant, got {value!r}")
    name = value[0].upper() + value[1:]
    if name not in enum_type._sumtype_constructor_names:
        raise _fail(path, f"unknown {enum_type.__name__} variant {value!r}")
    return getattr(enum_type, name)()


def _decode_value(field_type: Any, value: Any, path: str) -> Any:
    origin = typing.get_origin(field_type)
    if origin is Annotated:
        base, length = typing.get_args(field_type)
        if typing.get_origin(base) is not list:
            raise _fail(path, f"unsupported field type {field_type}")
        return _decode_bytes(value, path, length)
    if origin is Union:
        args = [a for a in typing.get_args(field_type) if a is not type(None)]
        if value is None:
            return None
        return _decode_value(args[0], value, path)
    if origin is list:
        return _decode_bytes(value, path)
    if field_type is bool:
        return _decode_bool(value, path)
    if field_type is int:
        return _decode_int(value, path)
    if field_type is Pubkey:
        return _decode_pubkey(value, path)
    if field_type in ENUM_TYPES:
        return _decode_enum(field_type, value, path)
    if is_dataclass(field_type):
        return decode_struct(field_type, value, path)
    raise _fail(path, f"unsupported field type {field_type}")


def decode_struct(cls, obj: Any, path: str, **injected):
    """
    Build the dataclass `cls` from a camelCase json object.

    Every field not passed in `injected` must be present in `obj` unless it
    has a default, and `obj` may not carry keys the dataclass does not know.
    """
    if not isinstance(obj, dict):
        raise _fail(path, f"expected an object, got {type(obj).__name__}")

    not_camel = sorted(key for key in obj if not _CAMEL_KEY.fullmatch(key))
    if not_camel:
        raise _fail(path, f"field names must be camelCase, got {not_camel}")

    values = {camel_to_snake(key): value for key, value in obj.items()}
    hints = typing.get_type_hints(cls, include_extras=True)
    expected = {f.name: f for f in fields(cls) if f.name not in injected}

    unknown = sorted(set(values) - set(expected))
    if unknown:
        raise _fail(path, f"unknown fields {unknown}")

    kwargs = dict(injected)
    for name, f in expected.items():
        if name not in values:
            if f.default is MISSING and f.default_factory is MISSING:
                raise _fail(path, f"missing field {name}")
            continue
        kwargs[name] = _decode_value(hints[name], values[name], f"{path}.{name}")
    return cls(**kwargs)


def _unwrap(
    account_cls,
    wrapper: Any,
    market_index: int,
    derive_pubkey: Callable[[int], Pubkey],
):
    path = f"{account_cls.__name__}[{market_index}]"
    if not isinstance(wrapper, dict) or WRAPPER_ACCOUNT_KEY not in wrapper:
        raise _fail(path, f"expected a wrapper with an {WRAPPER_ACCOUNT_KEY!r} field")
    unknown = sorted(set(wrapper) - {WRAPPER_ACCOUNT_KEY, WRAPPER_PUBKEY_KEY})
    if unknown:
        raise _fail(path, f"unknown wrapper fields {unknown}")

    if WRAPPER_PUBKEY_KEY in wrapper:
        pubkey = _decode_pubkey(wrapper[WRAPPER_PUBKEY_KEY], f"{path}.pubkey")
    else:
        pubkey = derive_pubkey(market_index)

    return decode_struct(
        account_cls,
        wrapper[WRAPPER_ACCOUNT_KEY],
        path,
        market_index=market_index,
        pubkey=pubkey,
    )


def decode_market_accounts(
    normalized: str,
    account_cls: type[T],
    derive_pubkey: Callable[[int], Pubkey],
) -> list[T]:
    try:
        wrappers = json.loads(normalized, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedConfigError(f"market bundle is not valid json: {e}") from e

    if not isinstance(wrappers, list):
        raise MalformedConfigError(
            f"market bundle must be an array, got {type(wrappers).__name__}"
        )

    return [
        _unwrap(account_cls, wrapper, market_index, derive_pubkey)
        for market_index, wrapper in enumerate(wrappers)
    ]


def decode_spot_markets(normalized: str) -> list[SpotMarketAccount]:
    return decode_market_accounts(
        normalized, SpotMarketAccount, derive_spot_market_account
    )


def decode_perp_markets(normalized: str) -> list[PerpMarketAccount]:
    return decode_market_accounts(
        normalized, PerpMarketAccount, derive_perp_market_account
    )
