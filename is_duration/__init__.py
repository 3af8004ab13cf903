import logging

from .errors import InvalidArgument, InvalidEnumValue
from .formatter import FormatOptions, decompose, format, format_duration
from .minus import Ignore, Prefix, Reject, Sign, Transform
from .parser import parse, parse_duration, tokenize
from .units import DEFAULT_UNITS, OnEmpty, OnMinus, OnZero, Unit, UnitRange

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "parse",
    "format",
    "parse_duration",
    "format_duration",
    "tokenize",
    "decompose",
    "FormatOptions",
    "Unit",
    "UnitRange",
    "OnEmpty",
    "OnZero",
    "OnMinus",
    "DEFAULT_UNITS",
    "Sign",
    "Ignore",
    "Reject",
    "Prefix",
    "Transform",
    "InvalidArgument",
    "InvalidEnumValue",
]
