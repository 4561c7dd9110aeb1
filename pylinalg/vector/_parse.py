"""
Parser for bracketed vector literals such as ``"[ -1.2 2.0 3.1 ]"``.

The text is split on arbitrary whitespace. The first token must be
exactly ``[`` and the last exactly ``]``; every token in between must
be an ASCII real-number literal:

    [+-] digits [. digits] [e|E [+-] digits] [d|D|f|F]
    [+-] NaN | Infinity | nan | inf   (any case)

Python-only spellings such as ``1_000`` or non-ASCII digits are
rejected, as are hexadecimal literals.
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import ParseError

OPEN_TOKEN = "["
CLOSE_TOKEN = "]"

_REAL_TOKEN = re.compile(
    r"(?P<number>[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|nan|inf(?:inity)?))"
    r"(?:(?<=[\d.])[dDfF])?",
    re.ASCII | re.IGNORECASE,
)


def parse_vector_literal(text: str) -> NDArray[np.float64]:
    """
    Parse a vector literal into a fresh float64 array.

    Args:
        text: Literal like ``"[ 1.0 2.0 ]"``

    Returns:
        1D array with one entry per interior token

    Raises:
        ParseError: If brackets are missing, a token is not a real
                    number, or the literal has no entries
    """
    if not isinstance(text, str):
        raise ParseError(
            f"Vector literal must be a str, got {type(text).__name__}",
            text=None,
        )

    tokens = text.split()
    if not tokens or tokens[0] != OPEN_TOKEN or tokens[-1] != CLOSE_TOKEN:
        raise ParseError(
            f"Malformed vector literal: missing {OPEN_TOKEN} or {CLOSE_TOKEN} in {text!r}",
            text=text,
        )

    interior = tokens[1:-1]
    if not interior:
        raise ParseError(f"Vector literal {text!r} has no entries", text=text)

    values = np.empty(len(interior), dtype=np.float64)
    for i, token in enumerate(interior):
        try:
            values[i] = _to_float(token)
        except ValueError as e:
            raise ParseError(
                f"Malformed vector literal: could not parse {token!r} in {text!r}",
                text=text,
                token=token,
            ) from e
    return values


def _to_float(token: str) -> float:
    match = _REAL_TOKEN.fullmatch(token)
    if match is None:
        raise ValueError(f"not a real-number literal: {token!r}")
    # Trailing d/f type suffix is accepted and dropped
    return float(match.group("number"))
