"""Time units and formatting policies.

Every enumeration here orders its members by declaration, so ``Unit.MS <
Unit.S`` holds and ranges of units can be built and iterated from one bound
to the other. Members are looked up leniently from config-style values
(``"ms"``, ``"MS"``, ``2``) and unknown values fail at lookup time.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from typing_extensions import Self

from is_duration.errors import InvalidArgument, InvalidEnumValue
from is_duration.util import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    NANOSECOND,
    SECOND,
    WEEK,
)


class OrderedEnum(Enum):
    """Enum whose members compare by declaration order."""

    @property
    def position(self) -> int:
        return list(type(self)).index(self)

    @classmethod
    def lookup(cls, value: Any) -> Self:
        """Resolve a member from a member, value, name or position.

        Names are matched case-insensitively. Positions count from zero in
        declaration order.

        Raises:
            InvalidEnumValue: If nothing in this enumeration matches
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        elif isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key == member.value or key.upper() == member.name:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise InvalidEnumValue(
            f"Invalid {cls.__name__} value: {value!r}\n" f"Valid values: {valid}"
        )

    def _check(self, other: Any) -> bool:
        return type(other) is type(self)

    def __lt__(self, other: Any) -> bool:
        if not self._check(other):
            return NotImplemented
        return self.position < other.position

    def __le__(self, other: Any) -> bool:
        if not self._check(other):
            return NotImplemented
        return self.position <= other.position

    def __gt__(self, other: Any) -> bool:
        if not self._check(other):
            return NotImplemented
        return self.position > other.position

    def __ge__(self, other: Any) -> bool:
        if not self._check(other):
            return NotImplemented
        return self.position >= other.position


class Unit(OrderedEnum):
    """Time units from nanoseconds up to weeks.

    The member value is the suffix used in duration strings.

    Examples:
        >>> Unit.lookup("ms").seconds
        0.001

        >>> Unit.M > Unit.S
        True

        >>> list(Unit.S.to(Unit.H))
        [<Unit.S: 's'>, <Unit.M: 'm'>, <Unit.H: 'h'>]
    """

    NS = "ns"
    US = "us"
    MS = "ms"
    S = "s"
    M = "m"
    H = "h"
    D = "d"
    W = "w"

    @property
    def seconds(self) -> int | float:
        """Length of one unit in seconds."""
        return _SECONDS[self]

    @property
    def nanos(self) -> int:
        """Length of one unit in whole nanoseconds."""
        return _NANOS[self]

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def width(self) -> int:
        """Digit width used when padding this unit (0 means never padded)."""
        return _WIDTHS[self]

    @property
    def subsecond(self) -> bool:
        return self < Unit.S

    def to(self, other: "Unit | str | int") -> "UnitRange":
        """Build the inclusive range from this unit up to ``other``."""
        return UnitRange(low=self, high=Unit.lookup(other))


_SECONDS: dict[Unit, int | float] = {
    Unit.NS: NANOSECOND,
    Unit.US: MICROSECOND,
    Unit.MS: MILLISECOND,
    Unit.S: SECOND,
    Unit.M: MINUTE,
    Unit.H: HOUR,
    Unit.D: DAY,
    Unit.W: WEEK,
}

_NANOS: dict[Unit, int] = {
    Unit.NS: 1,
    Unit.US: NANOS_PER_MICROSECOND,
    Unit.MS: NANOS_PER_MILLISECOND,
    Unit.S: NANOS_PER_SECOND,
    Unit.M: MINUTE * NANOS_PER_SECOND,
    Unit.H: HOUR * NANOS_PER_SECOND,
    Unit.D: DAY * NANOS_PER_SECOND,
    Unit.W: WEEK * NANOS_PER_SECOND,
}

_WIDTHS: dict[Unit, int] = {
    Unit.NS: 3,
    Unit.US: 3,
    Unit.MS: 3,
    Unit.S: 2,
    Unit.M: 2,
    Unit.H: 2,
    Unit.D: 0,
    Unit.W: 0,
}


class OnEmpty(OrderedEnum):
    """What to do with a unit whose component is zero."""

    FORCE = "force"
    MINOR = "minor"
    SKIP = "skip"


class OnZero(OrderedEnum):
    """How to pad the digits of each component."""

    FILL = "fill"
    ALIGN = "align"
    SINGLE = "single"


class OnMinus(OrderedEnum):
    """How to treat negative values."""

    IGNORE = "ignore"
    ERROR = "error"


@dataclass(frozen=True, kw_only=True)
class UnitRange:
    """Inclusive range of units, ``low`` being the finest."""

    low: Unit
    high: Unit

    def __post_init__(self) -> None:
        if not isinstance(self.low, Unit) or not isinstance(self.high, Unit):
            raise InvalidArgument(
                f"UnitRange bounds must be Unit members, "
                f"got low={self.low!r}, high={self.high!r}"
            )
        if self.low > self.high:
            raise InvalidArgument(
                f"UnitRange low ({self.low.value}) must be <= high ({self.high.value})"
            )

    def __contains__(self, unit: object) -> bool:
        return isinstance(unit, Unit) and self.low <= unit <= self.high

    def __iter__(self) -> Iterator[Unit]:
        return (unit for unit in Unit if unit in self)

    def __len__(self) -> int:
        return self.high.position - self.low.position + 1

    def __str__(self) -> str:
        return f"{self.low.value}..{self.high.value}"

    def descending(self) -> list[Unit]:
        """Units of this range from coarsest to finest."""
        return list(self)[::-1]

    @classmethod
    def of(cls, value: Any) -> "UnitRange":
        """Coerce a range-like value into a UnitRange.

        Accepts:
        - UnitRange: Passed through as-is
        - str with "..": Bounds on either side, e.g. "ms..s"
        - tuple or list: Exactly two unit-like bounds, e.g. ("s", "w")
        - anything Unit.lookup() accepts: A single-unit range

        Raises:
            InvalidArgument: If the value is not range-like or its bounds are
                out of order
        """
        if isinstance(value, UnitRange):
            return value
        if isinstance(value, str) and ".." in value:
            low, _, high = value.partition("..")
            return cls(low=Unit.lookup(low), high=Unit.lookup(high))
        if isinstance(value, (tuple, list)):
            if len(value) != 2:
                raise InvalidArgument(
                    f"Unit range needs exactly two bounds, got {value!r}\n"
                    f"Example: (Unit.S, Unit.D) or ('ms', 's')"
                )
            return cls(low=Unit.lookup(value[0]), high=Unit.lookup(value[1]))
        unit = Unit.lookup(value)
        return cls(low=unit, high=unit)


DEFAULT_UNITS = UnitRange(low=Unit.S, high=Unit.D)


__all__ = [
    "OrderedEnum",
    "Unit",
    "UnitRange",
    "OnEmpty",
    "OnZero",
    "OnMinus",
    "DEFAULT_UNITS",
]
