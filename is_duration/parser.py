"""Parsing of duration config values into seconds.

Accepted sources:
    None          -> None
    12, 1.5       -> unchanged
    Fraction(1,5) -> 0.2
    "12"          -> 12
    "0.4", ".5"   -> 0.4, 0.5
    "1m 10s"      -> 70
    "1m 10s 500ms"-> 70.5

A compound string yields an int unless it contains a sub-second token
(ms, us, ns), in which case it yields a float.
"""

import logging
import math
import numbers
import re
from collections.abc import Iterator
from decimal import Decimal
from typing import Any

from is_duration.errors import InvalidArgument
from is_duration.units import Unit
from is_duration.util import NANOS_PER_SECOND

logger = logging.getLogger(__name__)

# Longest suffixes first so "ms" is never read as "m" followed by "s"
_SUFFIXES = "|".join(
    sorted((unit.suffix for unit in Unit), key=lambda suffix: -len(suffix))
)

_INTEGER_RE = re.compile(r"\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"\d*\.\d*", re.ASCII)
_COMPOUND_RE = re.compile(rf"(?:\d+(?:{_SUFFIXES})\s*)+", re.ASCII)
_TOKEN_RE = re.compile(rf"(\d+)({_SUFFIXES})", re.ASCII)


def _invalid(source: Any) -> InvalidArgument:
    return InvalidArgument(
        f"Invalid source value: {source!r}\n"
        f"Expected a number, a decimal string such as '0.4', "
        f"or a duration string such as '1m 10s 500ms'"
    )


def _finite(source: Any) -> float:
    """Convert to float, rejecting values a float cannot hold."""
    try:
        value = float(source)
    except OverflowError as e:
        raise _invalid(source) from e
    if not math.isfinite(value):
        raise _invalid(source)
    return value


def tokenize(source: str) -> Iterator[tuple[int, Unit]]:
    """Split a compound duration string into (quantity, unit) pairs.

    Tokens are returned in the order they appear; repeated or out-of-order
    units are allowed.

    Raises:
        InvalidArgument: If the string is not a sequence of
            ``<digits><unit>`` tokens
    """
    if not _COMPOUND_RE.fullmatch(source):
        raise _invalid(source)
    for match in _TOKEN_RE.finditer(source):
        yield int(match.group(1)), Unit.lookup(match.group(2))


def _parse_compound(source: str) -> int | float:
    seconds = 0
    nanos = 0
    has_subseconds = False
    count = 0
    for quantity, unit in tokenize(source):
        count += 1
        if unit.subsecond:
            nanos += quantity * unit.nanos
            has_subseconds = True
        else:
            seconds += quantity * unit.seconds
    logger.debug("Parsed %d duration tokens from %r", count, source)
    if has_subseconds:
        return seconds + nanos / NANOS_PER_SECOND
    return seconds


def parse(source: Any) -> int | float | None:
    """Convert a duration config value into seconds.

    Args:
        source: None, a number, or a string (integer, decimal, or compound
            duration such as "1h 30m")

    Returns:
        None for None; an int for integer literals and for compound strings
        made only of whole units (s, m, h, d, w); a float otherwise

    Raises:
        InvalidArgument: For empty or malformed strings and unsupported types
    """
    if source is None:
        return None
    if isinstance(source, bool):
        raise _invalid(source)
    if isinstance(source, (int, float)):
        return source
    if isinstance(source, numbers.Integral):
        return int(source)
    if isinstance(source, (numbers.Real, Decimal)):
        return _finite(source)
    if not isinstance(source, str):
        raise _invalid(source)

    if _INTEGER_RE.fullmatch(source):
        return int(source)
    if _DECIMAL_RE.fullmatch(source):
        # A bare "." carries no digits and reads as zero
        return _finite(source) if source != "." else 0.0
    return _parse_compound(source)


parse_duration = parse


__all__ = ["parse", "parse_duration", "tokenize"]
