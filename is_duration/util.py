"""Utility constants for is_duration.

Time unit constants represent durations in seconds, with exact integer
nanosecond counterparts for sub-second arithmetic.
"""

# Time unit constants (all values in seconds)
NANOSECOND = 1e-9
MICROSECOND = 1e-6
MILLISECOND = 1e-3
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Nanoseconds per unit
NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
