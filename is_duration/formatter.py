"""Rendering of seconds as compact duration strings.

Formatting runs in three steps:

1. ``decompose()`` splits the magnitude into one integer per unit of the
   selected range, carrying seconds up into minutes, hours, days and weeks
   and slicing the fraction into milliseconds, microseconds and nanoseconds.
   Magnitude beyond the range is folded into its outermost unit, never lost.
2. The empty policy drops zero components and the zeros policy pads the rest.
3. The components are joined and the minus policy applies the sign.

Example:
    >>> format(1000)
    '16m40s'
    >>> format(1, units="ms..s", empty="minor", zeros="fill")
    '01s000ms'
"""

import logging
import math
import numbers
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from is_duration.errors import InvalidArgument
from is_duration.minus import Ignore, Sign, sign
from is_duration.units import DEFAULT_UNITS, OnEmpty, OnZero, Unit, UnitRange
from is_duration.util import NANOS_PER_SECOND

logger = logging.getLogger(__name__)

# Each coarser unit and how many of the next finer unit it holds
_CARRIES: tuple[tuple[Unit, Unit, int], ...] = (
    (Unit.S, Unit.M, 60),
    (Unit.M, Unit.H, 60),
    (Unit.H, Unit.D, 24),
    (Unit.D, Unit.W, 7),
)

# Sub-second units ordered coarse to fine, each 1000 of the previous
_FOLDS: tuple[tuple[Unit, Unit], ...] = (
    (Unit.S, Unit.MS),
    (Unit.MS, Unit.US),
    (Unit.US, Unit.NS),
)


def _option(name: str, value: Any, lookup: Any) -> Any:
    try:
        return lookup(value)
    except InvalidArgument as e:
        raise InvalidArgument(f"Invalid option '{name}': {value!r}\n{e}") from e


@dataclass(frozen=True, kw_only=True)
class FormatOptions:
    """Resolved formatting options.

    Attributes:
        units: Range of units that may appear in the output
        empty: Whether zero components are emitted
        zeros: How component digits are padded
        delim: String placed between components
        minus: How negative values are rendered
    """

    units: UnitRange = DEFAULT_UNITS
    empty: OnEmpty = OnEmpty.SKIP
    zeros: OnZero = OnZero.SINGLE
    delim: str = ""
    minus: Sign = field(default_factory=Ignore)

    def __post_init__(self) -> None:
        expected = {
            "units": UnitRange,
            "empty": OnEmpty,
            "zeros": OnZero,
            "delim": str,
            "minus": Sign,
        }
        for name, kind in expected.items():
            value = getattr(self, name)
            if not isinstance(value, kind):
                raise InvalidArgument(
                    f"Invalid option '{name}': {value!r}\n"
                    f"Expected {kind.__name__}; use FormatOptions.build() "
                    f"for string or tuple values"
                )

    @classmethod
    def build(
        cls,
        *,
        units: Any = None,
        empty: Any = None,
        zeros: Any = None,
        delim: Any = None,
        minus: Any = None,
    ) -> "FormatOptions":
        """Resolve loosely typed options, substituting defaults for None.

        Examples:
            FormatOptions.build(units=("s", "w"), delim=" ")
            FormatOptions.build(units="ms..s", empty="minor", zeros="fill")
            FormatOptions.build(minus=lambda v: f"-({v})")
        """
        if delim is not None and not isinstance(delim, str):
            raise InvalidArgument(
                f"Invalid option 'delim': {delim!r}\n"
                f"Expected a string such as '' or ' '"
            )
        options = cls(
            units=DEFAULT_UNITS if units is None else _option("units", units, UnitRange.of),
            empty=OnEmpty.SKIP if empty is None else _option("empty", empty, OnEmpty.lookup),
            zeros=OnZero.SINGLE if zeros is None else _option("zeros", zeros, OnZero.lookup),
            delim="" if delim is None else delim,
            minus=sign(minus),
        )
        logger.debug("Resolved format options: %s", options)
        return options

    def format(self, value: Any) -> str | None:
        """Render ``value`` seconds using these options."""
        if value is None:
            return None
        value = _coerce(value)
        negative = value < 0
        if negative:
            self.minus.check(value)

        components = decompose(abs(value), self.units)
        rendered = self.delim.join(
            f"{self._pad(count, unit)}{unit.suffix}"
            for unit, count in self._visible(components)
        ).strip()

        if negative:
            return self.minus.apply(rendered, self.delim)
        return rendered

    def _visible(self, components: dict[Unit, int]) -> list[tuple[Unit, int]]:
        """Components that survive the empty policy, coarsest first."""
        visible: list[tuple[Unit, int]] = []
        for unit in self.units.descending():
            count = components[unit]
            if count == 0:
                if self.empty is OnEmpty.SKIP:
                    continue
                # Minor: only zeros after the first emitted component
                if self.empty is OnEmpty.MINOR and not visible:
                    continue
            visible.append((unit, count))
        return visible

    def _pad(self, count: int, unit: Unit) -> str:
        if self.zeros is OnZero.FILL:
            return f"{count:0{unit.width}d}" if unit.width else str(count)
        if self.zeros is OnZero.ALIGN:
            return f"{count:>{unit.width}d}" if unit.width else str(count)
        return str(count)


def _coerce(value: Any) -> int | float:
    """Normalize a formattable value to int or float."""
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidArgument(
            f"Invalid source value: {value!r}\n"
            f"Expected a number of seconds (int or float)"
        )
    if isinstance(value, numbers.Integral):
        return int(value)
    try:
        converted = float(value)
    except OverflowError as e:
        raise InvalidArgument(
            f"Invalid source value: {value!r} (too large for a float)"
        ) from e
    if not math.isfinite(converted):
        raise InvalidArgument(f"Invalid source value: {value!r} (must be finite)")
    return converted


def decompose(magnitude: int | float, units: UnitRange) -> dict[Unit, int]:
    """Split a non-negative number of seconds into per-unit components.

    Whole seconds carry into minutes, hours, days and weeks only while the
    coarser unit is inside ``units``, so the highest selected unit absorbs
    whatever remains. The fraction is rounded to the nanosecond and sliced
    into ms/us/ns when ``units`` reaches below seconds. When ``units`` tops
    out below seconds, coarser amounts fold down into its highest unit.

    Units below ``units.low`` are dropped (truncated toward zero).

    Returns:
        Mapping of every Unit to its component; units outside the range
        hold 0.
    """
    magnitude = _coerce(magnitude)
    if magnitude < 0:
        raise InvalidArgument(f"Cannot decompose a negative duration: {magnitude!r}")

    whole = int(magnitude)
    nanos = 0
    if units.low.subsecond and isinstance(magnitude, float):
        nanos = round((magnitude - whole) * NANOS_PER_SECOND)
        if nanos >= NANOS_PER_SECOND:
            whole += 1
            nanos -= NANOS_PER_SECOND

    components = dict.fromkeys(Unit, 0)
    components[Unit.S] = whole

    for finer, coarser, capacity in _CARRIES:
        if coarser > units.high:
            break
        components[coarser], components[finer] = divmod(components[finer], capacity)

    if units.low.subsecond:
        digits = f"{nanos:09d}"
        components[Unit.MS] = int(digits[0:3])
        components[Unit.US] = int(digits[3:6])
        components[Unit.NS] = int(digits[6:9])

    for coarser, finer in _FOLDS:
        if units.high <= finer:
            components[finer] += components[coarser] * 1000
            components[coarser] = 0

    for unit in Unit:
        if unit not in units:
            components[unit] = 0
    return components


def format(
    value: Any,
    *,
    units: Any = None,
    empty: Any = None,
    zeros: Any = None,
    delim: Any = None,
    minus: Any = None,
) -> str | None:
    """Render a number of seconds as a duration string.

    Args:
        value: Seconds as int or float (Fraction and Decimal are converted
            to float), or None
        units: UnitRange, (low, high) pair, "low..high" string or a single
            unit; default seconds through days
        empty: OnEmpty or its name ("force", "minor", "skip"); default skip
        zeros: OnZero or its name ("fill", "align", "single"); default single
        delim: Separator between components; default ""
        minus: "ignore", "error", OnMinus, a prefix string or a callable
            receiving the rendered magnitude; default ignore

    Returns:
        The rendered string (possibly empty), or None when value is None

    Raises:
        InvalidArgument: For non-numeric values, bad options, or negative
            values with minus="error"

    Examples:
        >>> format(1000000, units=("s", "w"))
        '1w4d13h46m40s'
        >>> format(-5555, minus=lambda v: "{" + v + "}")
        '{1h32m35s}'
    """
    if value is None:
        return None
    options = FormatOptions.build(
        units=units, empty=empty, zeros=zeros, delim=delim, minus=minus
    )
    return options.format(value)


format_duration = format


__all__ = ["FormatOptions", "decompose", "format", "format_duration"]
