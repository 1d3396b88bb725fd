"""Input documents and base-encoded point decoding.

A document is a JSON object with a reserved ``keys`` entry holding ``n`` and
``k``; every other top-level key is an x-coordinate whose ``value`` is a
digit string in radix ``base``:

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}}
"""

import json
import logging
import re
from dataclasses import dataclass

from polysecret.errors import InputReadError, MalformedInputError

logger = logging.getLogger(__name__)

RESERVED_KEY = 'keys'
MIN_BASE = 2
MAX_BASE = 36
DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

_DECIMAL = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class PointRecord:
    """One sample (x, y) of the unknown polynomial."""
    x: int
    y: int


@dataclass(frozen=True)
class PointEntry:
    """A raw point entry: y-value as a digit string in radix ``base``."""
    base: int
    value: str


@dataclass(frozen=True)
class InputDocument:
    """Validated input document. ``entries`` keeps source enumeration order."""
    n: int
    k: int
    entries: dict


def _strict_int(raw, field: str) -> int:
    """Accept a JSON integer, rejecting booleans and floats."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise MalformedInputError(f"{field} must be an integer, got {raw!r}")
    return raw


def _parse_base(raw, key: str) -> int:
    if isinstance(raw, str):
        if not raw.isascii() or not raw.isdigit():
            raise MalformedInputError(
                f"Entry {key!r}: base must be a decimal integer, got {raw!r}")
        base = int(raw)
    else:
        base = _strict_int(raw, f"Entry {key!r}: base")
    if not (MIN_BASE <= base <= MAX_BASE):
        raise MalformedInputError(
            f"Entry {key!r}: base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


def parse_document(data) -> InputDocument:
    """Validate a loaded JSON object into an InputDocument.

    Args:
        data: Mapping as produced by json.load.

    Returns:
        InputDocument with typed entries in source order.

    Raises:
        MalformedInputError: on any structural problem. Nothing is coerced.
    """
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"Document must be a JSON object, got {type(data).__name__}")
    meta = data.get(RESERVED_KEY)
    if not isinstance(meta, dict):
        raise MalformedInputError(f"Missing or invalid {RESERVED_KEY!r} object")
    if 'n' not in meta or 'k' not in meta:
        raise MalformedInputError(f"{RESERVED_KEY!r} must contain both 'n' and 'k'")

    n = _strict_int(meta['n'], 'keys.n')
    k = _strict_int(meta['k'], 'keys.k')
    if k < 1:
        raise MalformedInputError(f"keys.k must be >= 1, got {k}")
    if n < 0:
        raise MalformedInputError(f"keys.n must be >= 0, got {n}")

    entries = {}
    for key, raw in data.items():
        if key == RESERVED_KEY:
            continue
        if not isinstance(raw, dict):
            raise MalformedInputError(f"Entry {key!r} must be an object")
        if 'base' not in raw or 'value' not in raw:
            raise MalformedInputError(f"Entry {key!r} needs 'base' and 'value'")
        if not isinstance(raw['value'], str):
            raise MalformedInputError(
                f"Entry {key!r}: value must be a string, got {raw['value']!r}")
        entries[key] = PointEntry(_parse_base(raw['base'], key), raw['value'])

    if n != len(entries):
        # n is informational only
        logger.warning("keys.n is %d but the document has %d entries", n, len(entries))

    return InputDocument(n=n, k=k, entries=entries)


def load_document(path: str) -> InputDocument:
    """Read a UTF-8 JSON file and parse it into an InputDocument."""
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise InputReadError(f"Cannot read {path}: {e.strerror or e}") from e
    except ValueError as e:
        raise InputReadError(f"Invalid JSON in {path}: {e}") from e
    logger.debug("Loaded %s", path)
    return parse_document(data)


def decode_value(value: str, base: int) -> int:
    """Convert a digit string in radix ``base`` to an integer.

    Digits are 0-9 then a-z, case-insensitive. Signs, whitespace,
    underscores and radix prefixes are not digits and are rejected.
    """
    if isinstance(base, bool) or not isinstance(base, int) \
            or not (MIN_BASE <= base <= MAX_BASE):
        raise MalformedInputError(
            f"Base must be an integer in [{MIN_BASE}, {MAX_BASE}], got {base!r}")
    if not value:
        raise MalformedInputError("Empty value string")
    allowed = DIGITS[:base]
    for ch in value:
        if ch.lower() not in allowed:
            raise MalformedInputError(f"Invalid digit {ch!r} for base {base} in {value!r}")
    return int(value, base)


def encode_value(number: int, base: int) -> str:
    """Inverse of decode_value for non-negative integers (lowercase digits)."""
    if not (MIN_BASE <= base <= MAX_BASE):
        raise ValueError(f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    if number < 0:
        raise ValueError(f"Cannot encode negative number {number}")
    if number == 0:
        return '0'
    out = []
    while number:
        number, d = divmod(number, base)
        out.append(DIGITS[d])
    return ''.join(reversed(out))


def decode_points(document: InputDocument) -> list:
    """Decode every entry into a PointRecord, in document order."""
    points = []
    for key, entry in document.entries.items():
        if not _DECIMAL.fullmatch(key):
            raise MalformedInputError(f"Key {key!r} is not a base-10 integer")
        points.append(PointRecord(int(key), decode_value(entry.value, entry.base)))
    return points
