import argparse
import logging
import sys

import gpxpy.gpx

from trail_profile import __version__
from trail_profile.analyzer import analyze_elevation, estimate_travel_time
from trail_profile.charts import generate_profile_chart
from trail_profile.config import load_config
from trail_profile.errors import TrailProfileError
from trail_profile.formatters import LENGTH_UNITS, format_summary
from trail_profile.models import ProfileParams, ReliefPolicy
from trail_profile.parser import parse_gpx_segments

# Default values for CLI options
DEFAULTS = {
    "grade_threshold": 70.0,
    "elevation_threshold": 7.0,
    "relief_policy": ReliefPolicy.FALLBACK.value,
    "short_unit": "m",
    "long_unit": "km",
    "avg_speed": 4.0,
}


def build_parser(config: dict | None = None) -> argparse.ArgumentParser:
    """Build argument parser with defaults from config file."""
    if config is None:
        config = {}

    def get_default(key: str):
        return config.get(key, DEFAULTS[key])

    parser = argparse.ArgumentParser(
        description="Summarize the length, ascent and elevation profile of a GPX trail."
    )
    parser.add_argument("gpx_file", help="Path to GPX file")
    parser.add_argument(
        "--grade-threshold",
        type=float,
        default=get_default("grade_threshold"),
        help=f"Grade in percent above which a point is treated as noise (default: {DEFAULTS['grade_threshold']})",
    )
    parser.add_argument(
        "--elevation-threshold",
        type=float,
        default=get_default("elevation_threshold"),
        help=f"Minimum deviation in meters for a profile extremum (default: {DEFAULTS['elevation_threshold']})",
    )
    parser.add_argument(
        "--relief-policy",
        choices=[p.value for p in ReliefPolicy],
        default=get_default("relief_policy"),
        help="What to do when filtering leaves too few points: profile the unfiltered track, or fail "
        f"(default: {DEFAULTS['relief_policy']})",
    )
    parser.add_argument(
        "--short-unit",
        choices=list(LENGTH_UNITS),
        default=get_default("short_unit"),
        help=f"Unit for elevations (default: {DEFAULTS['short_unit']})",
    )
    parser.add_argument(
        "--long-unit",
        choices=list(LENGTH_UNITS),
        default=get_default("long_unit"),
        help=f"Unit for trail length (default: {DEFAULTS['long_unit']})",
    )
    parser.add_argument(
        "--avg-speed",
        type=float,
        default=get_default("avg_speed"),
        help=f"Average hiking speed in km/h for the time estimate (default: {DEFAULTS['avg_speed']})",
    )
    parser.add_argument(
        "--chart",
        type=str,
        default=None,
        help="Write the simplified elevation profile as a PNG to this path.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log filter and simplification details")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = ProfileParams.from_config({
            "grade_threshold": args.grade_threshold,
            "elevation_threshold": args.elevation_threshold,
            "relief_policy": args.relief_policy,
            "cumulative_axis": config.get("cumulative_axis"),
        })
        for unit in (args.short_unit, args.long_unit):
            if unit not in LENGTH_UNITS:
                raise ValueError(f"Unknown length unit {unit!r} (supported: {', '.join(LENGTH_UNITS)})")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    gpx_path = args.gpx_file
    try:
        segments = parse_gpx_segments(gpx_path)
    except FileNotFoundError:
        print(f"Error: File not found: {gpx_path}", file=sys.stderr)
        sys.exit(1)
    except (gpxpy.gpx.GPXException, TrailProfileError) as e:
        print(f"Error parsing GPX file: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        summary = analyze_elevation(segments, params)
        travel_time = estimate_travel_time(summary.length_m, args.avg_speed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("=== Trail Elevation Summary ===")
    print(
        f"Config: grade_threshold={params.grade_threshold}% "
        f"elevation_threshold={params.elevation_threshold}m "
        f"relief_policy={params.relief_policy.value} avg_speed={args.avg_speed}km/h"
    )
    print(format_summary(summary, args.short_unit, args.long_unit, travel_time))
    if summary.relief_fallback_stage is not None:
        print(
            f"Note: the {summary.relief_fallback_stage} filter left too few points; "
            "the profile was built from the unfiltered track."
        )

    if args.chart:
        try:
            with open(args.chart, "wb") as f:
                f.write(generate_profile_chart(summary))
        except OSError as e:
            print(f"Error: Could not write chart: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Chart written to {args.chart}")
