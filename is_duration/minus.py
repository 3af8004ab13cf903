"""Sign handling for negative durations.

A Sign decides how the rendered magnitude of a negative value is turned
into the final string. ``sign()`` resolves the loose ``minus=`` option
(an OnMinus member, its name, a literal prefix or a callable) once, before
any formatting happens.
"""

from collections.abc import Callable
from typing import Any

from typing_extensions import override

from is_duration.errors import InvalidArgument
from is_duration.units import OnMinus


class Sign:
    def apply(self, rendered: str, delim: str) -> str:
        raise NotImplementedError

    def check(self, value: int | float) -> None:
        """Validate a negative value before it is formatted."""
        pass


class Ignore(Sign):
    """Drop the sign and render the magnitude only."""

    @override
    def apply(self, rendered: str, delim: str) -> str:
        return rendered

    @override
    def __repr__(self) -> str:
        return "Ignore()"

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ignore)

    @override
    def __hash__(self) -> int:
        return hash(Ignore)


class Reject(Sign):
    """Refuse negative values."""

    @override
    def check(self, value: int | float) -> None:
        raise InvalidArgument(
            f"Negative duration not allowed: {value!r}\n"
            f"Hint: pass minus='ignore', a prefix such as minus='-', "
            f"or a callable to render negative values"
        )

    @override
    def apply(self, rendered: str, delim: str) -> str:
        raise InvalidArgument("Negative duration not allowed")

    @override
    def __repr__(self) -> str:
        return "Reject()"

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Reject)

    @override
    def __hash__(self) -> int:
        return hash(Reject)


class Prefix(Sign):
    """Prepend a literal marker, joined with the component delimiter."""

    def __init__(self, text: str):
        self.text: str = text

    @override
    def apply(self, rendered: str, delim: str) -> str:
        return f"{self.text}{delim}{rendered}"

    @override
    def __repr__(self) -> str:
        return f"Prefix({self.text!r})"

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Prefix) and other.text == self.text

    @override
    def __hash__(self) -> int:
        return hash((Prefix, self.text))


class Transform(Sign):
    """Hand the rendered magnitude to a function for the final string."""

    def __init__(self, func: Callable[[str], str]):
        self.func: Callable[[str], str] = func

    @override
    def apply(self, rendered: str, delim: str) -> str:
        return self.func(rendered)

    @override
    def __repr__(self) -> str:
        return f"Transform({self.func!r})"

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Transform) and other.func is self.func

    @override
    def __hash__(self) -> int:
        return hash((Transform, id(self.func)))


ignore: Ignore = Ignore()
reject: Reject = Reject()

_POLICIES: dict[OnMinus, Sign] = {
    OnMinus.IGNORE: ignore,
    OnMinus.ERROR: reject,
}


def sign(option: Any) -> Sign:
    """Resolve a ``minus=`` option into a Sign.

    Accepts:
    - None: The default, Ignore
    - Sign: Passed through as-is
    - OnMinus, or exactly the strings "ignore" / "error": The enum policy
    - any other str: A literal Prefix
    - callable: A Transform of the rendered string

    Raises:
        InvalidArgument: If the option is none of the above
    """
    if option is None:
        return ignore
    if isinstance(option, Sign):
        return option
    if isinstance(option, OnMinus):
        return _POLICIES[option]
    if isinstance(option, str):
        for policy in OnMinus:
            if option == policy.value:
                return _POLICIES[policy]
        return Prefix(option)
    if callable(option):
        return Transform(option)
    raise InvalidArgument(
        f"Invalid option 'minus': {option!r}\n"
        f"Expected one of: 'ignore', 'error', OnMinus, a prefix string, "
        f"or a callable taking the rendered string"
    )


__all__ = ["Sign", "Ignore", "Reject", "Prefix", "Transform", "sign"]
