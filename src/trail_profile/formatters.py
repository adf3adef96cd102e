"""Formatting utilities for display."""

from datetime import timedelta

from trail_profile.models import ElevationSummary

# Meters per unit
LENGTH_UNITS = {
    "m": 1.0,
    "km": 1000.0,
    "ft": 0.3048,
    "mi": 1609.344,
}


def format_length(meters: float, unit: str) -> str:
    """Format a length in meters as '<value> <unit>' with one decimal.

    Raises:
        ValueError: If the unit is not supported.
    """
    try:
        factor = LENGTH_UNITS[unit]
    except KeyError:
        supported = ", ".join(LENGTH_UNITS)
        raise ValueError(f"Conversion to unit `{unit}` is not implemented (supported: {supported})") from None
    return f"{meters / factor:.1f} {unit}"


def format_duration(seconds: float) -> str:
    """Format seconds as Xh YYm string."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    return f"{hours}h {minutes:02d}m"


def format_summary(
    summary: ElevationSummary,
    short_unit: str = "m",
    long_unit: str = "km",
    travel_time: timedelta | None = None,
) -> str:
    """Build the multi-line text report for an elevation summary."""
    lines = [
        f"Length:            {format_length(summary.length_m, long_unit)}",
        f"Uphill:            {format_length(summary.gain_m, short_unit)}",
        f"Downhill:          {format_length(summary.loss_m, short_unit)}",
        f"Avg. Elevation:    {format_length(summary.avg_elevation, short_unit)}",
        f"Minimum altitude:  {format_length(summary.min_elevation, short_unit)}",
        f"Maximum altitude:  {format_length(summary.max_elevation, short_unit)}",
    ]
    if travel_time is not None:
        lines.append(f"Approximate Time to Complete: {format_duration(travel_time.total_seconds())}")
    lines.append(f"Profile points:    {len(summary.profile)}")
    return "\n".join(lines)
