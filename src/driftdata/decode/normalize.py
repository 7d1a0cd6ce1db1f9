"""
Rewrites the bundled market dumps into strict JSON.

The dumps are almost JSON. Two things need fixing before `json.loads` and the
typed decoder can handle them:

- unit enum variants are written as `{"active": {}}`; these collapse to the
  bare `"active"` string;
- every quoted literal is reinterpreted: hex strings become integers,
  base58 addresses become 32 element byte arrays, anything else stays a
  string with the `5Min` / `24H` casing fixed.

The text is tokenized first, so each rewrite only ever sees whole string
literals and the document structure around them.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

import base58
from solders.pubkey import Pubkey

from driftdata.errors import MalformedConfigError

logger = logging.getLogger(__name__)

STRING = "string"
WHITESPACE = "whitespace"
PUNCTUATION = "punctuation"
BARE = "bare"

_TOKEN_PATTERNS = (
    (STRING, re.compile(r'"[^"]*"')),
    (WHITESPACE, re.compile(r"\s+")),
    (PUNCTUATION, re.compile(r"[{}\[\]:,]")),
    (BARE, re.compile(r'[^"\s{}\[\]:,]+')),
)

# `{ "<variant>" : { } }`
_UNIT_VARIANT_SHAPE = ("{", STRING, ":", "{", "}", "}")

_HEX_DIGITS = re.compile(r"(?:[0-9a-fA-F]{2})*")
_SIGNED_HEX_INT = re.compile(r"-?[0-9a-fA-F]+")

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1

MAX_BASE58_LEN = 44
PUBKEY_BYTES = 32

CASING_FIXES = (
    ("5Min", "5min"),
    ("24H", "24h"),
)


class Token(NamedTuple):
    kind: str
    text: str


@dataclass(frozen=True)
class IntegerLiteral:
    value: int

    def to_json(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class KeyLiteral:
    key: Pubkey

    def to_json(self) -> str:
        return json.dumps(list(bytes(self.key)), separators=(",", ":"))


@dataclass(frozen=True)
class TextLiteral:
    text: str

    def to_json(self) -> str:
        return f'"{self.text}"'


NormalizedLiteral = Union[IntegerLiteral, KeyLiteral, TextLiteral]


def tokenize(raw: str) -> list[Token]:
    tokens: list[Token] = []
    pos = 0
    while pos < len(raw):
        for kind, pattern in _TOKEN_PATTERNS:
            match = pattern.match(raw, pos)
            if match:
                tokens.append(Token(kind, match.group()))
                pos = match.end()
                break
        else:
            raise MalformedConfigError(f"unterminated string literal at offset {pos}")
    return tokens


def _skip_whitespace(tokens: list[Token], i: int) -> int:
    while i < len(tokens) and tokens[i].kind == WHITESPACE:
        i += 1
    return i


def _match_unit_variant(tokens: list[Token], start: int) -> Optional[tuple[Token, int]]:
    i = start
    variant = None
    for n, expected in enumerate(_UNIT_VARIANT_SHAPE):
        if n:
            i = _skip_whitespace(tokens, i)
        if i >= len(tokens):
            return None
        token = tokens[i]
        if expected == STRING:
            if token.kind != STRING:
                return None
            variant = token
        elif token.kind != PUNCTUATION or token.text != expected:
            return None
        i += 1
    return variant, i


def collapse_unit_variants(tokens: list[Token]) -> tuple[list[Token], int]:
    """Replace every `{"variant": {}}` run with the `"variant"` token."""
    out: list[Token] = []
    collapsed = 0
    i = 0
    while i < len(tokens):
        match = _match_unit_variant(tokens, i)
        if match is None:
            out.append(tokens[i])
            i += 1
            continue
        variant, i = match
        out.append(variant)
        collapsed += 1
    return out, collapsed


def _parse_int(content: str) -> Optional[int]:
    if not _SIGNED_HEX_INT.fullmatch(content):
        return None
    value = int(content, 16)
    if not I128_MIN <= value <= I128_MAX:
        return None
    return value


def _parse_pubkey(content: str) -> Optional[Pubkey]:
    if len(content) > MAX_BASE58_LEN:
        return None
    try:
        raw = base58.b58decode(content)
    except ValueError:
        return None
    if len(raw) != PUBKEY_BYTES:
        return None
    return Pubkey.from_bytes(raw)


def classify_literal(content: str) -> NormalizedLiteral:
    """
    Pick the representation of a quoted literal, in order of precedence:

    1. a leading `-` or an even run of hex digits is tried as a signed
       128-bit integer in base 16;
    2. a base58 string of exactly 32 bytes is an address;
    3. anything else is kept as text, with the casing fixes applied.

    Text that happens to be valid hex is converted in step 1; the bundled
    data depends on that order.
    """
    if content.startswith("-") or _HEX_DIGITS.fullmatch(content):
        value = _parse_int(content)
        if value is not None:
            return IntegerLiteral(value)

    key = _parse_pubkey(content)
    if key is not None:
        return KeyLiteral(key)

    text = content
    for old, new in CASING_FIXES:
        text = text.replace(old, new)
    return TextLiteral(text)


def reinterpret_literals(tokens: list[Token]) -> tuple[list[Token], int]:
    out: list[Token] = []
    converted = 0
    for token in tokens:
        if token.kind != STRING:
            out.append(token)
            continue
        literal = classify_literal(token.text[1:-1])
        if not isinstance(literal, TextLiteral):
            converted += 1
            out.append(Token(BARE, literal.to_json()))
        else:
            out.append(Token(STRING, literal.to_json()))
    return out, converted


def normalize(raw: str) -> str:
    tokens, collapsed = collapse_unit_variants(tokenize(raw))
    tokens, converted = reinterpret_literals(tokens)
    logger.debug(
        f"normalized market bundle: {collapsed} enum variants collapsed, "
        f"{converted} literals reinterpreted"
    )
    return "".join(token.text for token in tokens)
