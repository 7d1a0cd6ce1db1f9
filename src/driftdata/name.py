from struct import pack_into

from driftdata.errors import MalformedConfigError

MAX_LENGTH = 32


def encode_name(name: str) -> list[int]:
    encoded = name.encode("utf-8")
    if len(encoded) > MAX_LENGTH:
        raise Exception("name too long")

    name_bytes = bytearray(b" " * MAX_LENGTH)
    pack_into(f"{len(encoded)}s", name_bytes, 0, encoded)
    return list(name_bytes)


def decode_name(name: list[int]) -> str:
    """Decode a fixed size name buffer, dropping the trailing space padding."""
    try:
        return bytes(name).decode("utf-8").rstrip()
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedConfigError(f"name is not valid utf-8: {e}") from e
