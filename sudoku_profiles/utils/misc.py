"""Miscellaneous utility functions."""

import json
import re
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Iterable, Tuple

DIST_NAME = "sudoku-profiles"

# Longest integer literal decoded as a number (counters, seconds played).
# Longer digit runs are puzzle or notes states and stay strings.
MAX_INT_DIGITS = 15

_INT_LITERAL = re.compile(r"-?\d+\Z")


def get_version() -> str:
    """Get the current package version."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"  # fallback for editable/local use


def decode_value(raw: str) -> Any:
    """Decode a raw query/CLI value.

    JSON literals are decoded (``2`` -> 2, ``true`` -> True, ``{"a": 1}``),
    anything else is kept as the raw string. Digit runs longer than
    MAX_INT_DIGITS are kept as strings: an 81-digit Sudoku board is a state,
    not a number.
    """
    stripped = raw.strip()
    if _INT_LITERAL.match(stripped) and len(stripped.lstrip("-")) > MAX_INT_DIGITS:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_kv(pairs: Iterable[str]) -> Dict[str, Any]:
    """Parse key=value tokens into a dict. Values go through decode_value."""
    return parse_items((_split_token(token) for token in pairs))


def parse_items(items: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """Build a dict from (key, raw value) pairs, decoding each value."""
    return {k: decode_value(v) for k, v in items}


def _split_token(token: str) -> Tuple[str, str]:
    if "=" not in token:
        raise ValueError(f"bad field (expected key=value): {token!r}")
    k, v = token.split("=", 1)
    return k, v
