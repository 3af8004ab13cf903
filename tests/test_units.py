"""Tests for units, policies and unit ranges."""

import pytest

from is_duration import (
    DEFAULT_UNITS,
    InvalidArgument,
    InvalidEnumValue,
    OnEmpty,
    OnMinus,
    OnZero,
    Unit,
    UnitRange,
)


def test_units_ordered_by_declaration():
    """Test that units compare from nanoseconds up to weeks."""
    assert sorted(Unit, reverse=True) == list(Unit)[::-1]
    assert Unit.NS < Unit.US < Unit.MS < Unit.S < Unit.M < Unit.H < Unit.D < Unit.W
    assert Unit.M > Unit.S
    assert Unit.S >= Unit.S
    assert Unit.S <= Unit.S


def test_unit_multipliers_strictly_increase():
    """Test that each unit is longer than the one before it."""
    seconds = [unit.seconds for unit in Unit]
    nanos = [unit.nanos for unit in Unit]

    assert seconds == sorted(set(seconds))
    assert nanos == sorted(set(nanos))
    assert Unit.W.seconds == 604800
    assert Unit.NS.seconds == 1e-9
    assert Unit.S.nanos == 1_000_000_000


def test_unit_suffixes_and_widths():
    """Test rendered suffixes and padding widths."""
    assert [unit.suffix for unit in Unit] == ["ns", "us", "ms", "s", "m", "h", "d", "w"]
    assert [unit.width for unit in Unit] == [3, 3, 3, 2, 2, 2, 0, 0]
    assert Unit.MS.subsecond
    assert not Unit.S.subsecond


@pytest.mark.parametrize(
    "value,expected",
    [
        ("ms", Unit.MS),
        ("MS", Unit.MS),
        ("m", Unit.M),
        (" h ", Unit.H),
        (0, Unit.NS),
        (7, Unit.W),
        (Unit.D, Unit.D),
    ],
)
def test_unit_lookup(value, expected):
    """Test lookup by value, name, position and member."""
    assert Unit.lookup(value) is expected


@pytest.mark.parametrize("value", ["x", "", "mss", 8, -1, True, None, 1.0])
def test_unit_lookup_rejects_unknown(value):
    """Test that unknown lookups raise InvalidEnumValue."""
    with pytest.raises(InvalidEnumValue, match="Invalid Unit value"):
        Unit.lookup(value)


def test_policy_lookup():
    """Test lookup of the policy enumerations."""
    assert OnEmpty.lookup("minor") is OnEmpty.MINOR
    assert OnEmpty.lookup("Minor") is OnEmpty.MINOR
    assert OnZero.lookup("fill") is OnZero.FILL
    assert OnZero.lookup(2) is OnZero.SINGLE
    assert OnMinus.lookup("error") is OnMinus.ERROR

    with pytest.raises(InvalidEnumValue, match="Valid values: force, minor, skip"):
        OnEmpty.lookup("sometimes")


def test_policies_ordered_by_declaration():
    """Test that policy members also order by declaration."""
    assert OnEmpty.FORCE < OnEmpty.MINOR < OnEmpty.SKIP
    assert OnZero.SINGLE > OnZero.FILL


def test_comparison_across_enums_fails():
    """Test that members of different enumerations are not comparable."""
    with pytest.raises(TypeError):
        Unit.S < OnEmpty.SKIP  # noqa: B015


def test_errors_are_value_errors():
    """Test the error hierarchy."""
    assert issubclass(InvalidEnumValue, InvalidArgument)
    assert issubclass(InvalidArgument, ValueError)


class TestUnitRange:
    """Tests for UnitRange."""

    def test_to_builds_inclusive_range(self):
        """Unit.to() includes both bounds."""
        units = Unit.S.to("d")

        assert list(units) == [Unit.S, Unit.M, Unit.H, Unit.D]
        assert units.descending() == [Unit.D, Unit.H, Unit.M, Unit.S]
        assert len(units) == 4
        assert str(units) == "s..d"

    def test_membership(self):
        """Only units between the bounds are members."""
        units = UnitRange(low=Unit.MS, high=Unit.S)

        assert Unit.MS in units
        assert Unit.S in units
        assert Unit.US not in units
        assert Unit.M not in units
        assert "s" not in units

    def test_single_unit_range(self):
        """A range may start and end on the same unit."""
        units = Unit.NS.to(Unit.NS)

        assert list(units) == [Unit.NS]
        assert len(units) == 1

    def test_default(self):
        """Default range is seconds through days."""
        assert DEFAULT_UNITS == UnitRange(low=Unit.S, high=Unit.D)

    @pytest.mark.parametrize(
        "value,low,high",
        [
            ("ms..s", Unit.MS, Unit.S),
            (" s .. w ", Unit.S, Unit.W),
            (("s", "w"), Unit.S, Unit.W),
            ([Unit.NS, Unit.US], Unit.NS, Unit.US),
            ("h", Unit.H, Unit.H),
            (Unit.D, Unit.D, Unit.D),
            (UnitRange(low=Unit.M, high=Unit.H), Unit.M, Unit.H),
        ],
    )
    def test_of_coerces_range_like_values(self, value, low, high):
        """UnitRange.of() accepts strings, pairs and single units."""
        units = UnitRange.of(value)

        assert units.low is low
        assert units.high is high

    def test_of_rejects_reversed_bounds(self):
        """Bounds must be ordered low to high."""
        with pytest.raises(InvalidArgument, match="must be <= high"):
            UnitRange.of("d..s")

        with pytest.raises(InvalidArgument, match="must be <= high"):
            Unit.W.to(Unit.S)

    def test_of_rejects_wrong_arity(self):
        """Pairs must have exactly two bounds."""
        with pytest.raises(InvalidArgument, match="exactly two bounds"):
            UnitRange.of(("s", "m", "h"))

    def test_of_rejects_unknown_units(self):
        """Unknown bound names fail at lookup."""
        with pytest.raises(InvalidEnumValue):
            UnitRange.of("s..y")

    def test_bounds_must_be_units(self):
        """Direct construction requires Unit members."""
        with pytest.raises(InvalidArgument, match="must be Unit members"):
            UnitRange(low="s", high="d")  # type: ignore[arg-type]
