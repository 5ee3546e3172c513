"""
Unit conversion helpers for nanosecond durations.
Separated to avoid circular imports.

Conversions use integer arithmetic only, so they stay exact for
arbitrarily large totals.
"""

NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000

MS_PER_S = 1_000
MS_PER_MINUTE = 60 * MS_PER_S
MS_PER_HOUR = 60 * MS_PER_MINUTE


def format_fixed(ns: int, unit_ns: int, decimals: int) -> str:
    """
    Format ``ns / unit_ns`` with a fixed number of decimals, rounding half up.

    Example:
        format_fixed(1_234_567, NS_PER_MS, 3) -> "1.235"
    """
    scale = 10 ** decimals
    negative = ns < 0
    scaled = (abs(ns) * scale * 2 + unit_ns) // (2 * unit_ns)
    whole, fraction = divmod(scaled, scale)

    text = f"{whole}.{fraction:0{decimals}d}" if decimals else str(whole)
    return f"-{text}" if negative and scaled else text


def format_ms(ns: int) -> str:
    """Milliseconds with 3 decimals."""
    return format_fixed(ns, NS_PER_MS, 3)


def format_us(ns: int) -> str:
    """Microseconds with 1 decimal."""
    return format_fixed(ns, NS_PER_US, 1)


def format_seconds(ns: int) -> str:
    """Seconds with 3 decimals."""
    return format_fixed(ns, NS_PER_S, 3)


def format_hms(ns: int) -> str:
    """
    Break a duration into H:MM:SS.mmm, truncated to whole milliseconds.

    Hours are not padded and have no upper bound.

    Example:
        format_hms(3_723_004_000_000) -> "1:02:03.004"
    """
    total_ms = ns // NS_PER_MS
    hours, rest = divmod(total_ms, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds, millis = divmod(rest, MS_PER_S)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"
