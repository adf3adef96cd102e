"""Trail Profile - noise-robust elevation summaries for GPS tracks."""

__version__ = "0.1.0"
__version_date__ = "2026-10-19"
