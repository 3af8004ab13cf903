"""Exceptions raised by is_duration.

Every failure is an InvalidArgument. It subclasses ValueError so callers
that already guard config parsing with ``except ValueError`` keep working.
"""


class InvalidArgument(ValueError):
    """A source value, formatting value or option was not acceptable.

    Examples:
        - A duration string with an unknown unit suffix ("5x")
        - An empty string passed to parse()
        - A negative value formatted with minus="error"
    """

    pass


class InvalidEnumValue(InvalidArgument):
    """Lookup of an enumeration member by an unrecognized name or position."""

    pass


__all__ = ["InvalidArgument", "InvalidEnumValue"]
