"""Elevation profile chart generation."""

import io

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from trail_profile.models import ElevationSummary
from trail_profile.profile import cumulative_distances


def set_fixed_margins(fig, fig_width: float, fig_height: float) -> None:
    """Set fixed margins in inches so the plot area does not depend on content."""
    left = 0.7 / fig_width
    right = 1 - 0.3 / fig_width
    bottom = 0.55 / fig_height
    top = 1 - 0.35 / fig_height

    fig.subplots_adjust(left=left, right=right, bottom=bottom, top=top)


def generate_profile_chart(summary: ElevationSummary, aspect_ratio: float = 3.5) -> bytes:
    """Render the simplified elevation profile as a PNG.

    Args:
        summary: Result of analyze_elevation
        aspect_ratio: Width/height ratio (1.0 = square, 3.5 = wide default)

    Returns PNG image as bytes.
    """
    distances_km = [d / 1000 for d in cumulative_distances(summary.profile)]
    elevations = [pt.elevation for pt in summary.profile]

    fig_height = 4
    fig_width = fig_height * aspect_ratio
    fig, ax = plt.subplots(figsize=(fig_width, fig_height), facecolor='white')

    pad = 0.1 * max(summary.max_elevation - summary.min_elevation, 10.0)
    floor = summary.min_elevation - pad

    ax.fill_between(distances_km, floor, elevations, color='#8acbef', alpha=0.6, linewidth=0)
    ax.plot(distances_km, elevations, color='#333333', linewidth=1.0)
    ax.scatter(distances_km, elevations, color='#e55a00', s=12, zorder=3)

    ax.set_xlim(0, max(distances_km[-1], 0.001))
    ax.set_ylim(floor, summary.max_elevation + pad)
    ax.set_xlabel('Distance (km)', fontsize=10)
    ax.set_ylabel('Elevation (m)', fontsize=10)
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.grid(axis='y', alpha=0.3, linestyle='-', linewidth=0.5)

    set_fixed_margins(fig, fig_width, fig_height)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=100, facecolor='white', edgecolor='none')
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()
