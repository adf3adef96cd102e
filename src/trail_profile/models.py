from dataclasses import dataclass
from enum import Enum


class ReliefPolicy(Enum):
    """What to do when a noise filter leaves fewer than two survivors."""
    FALLBACK = "fallback"  # continue on the unfiltered track
    RAISE = "raise"


@dataclass
class TrackPoint:
    lat: float
    lon: float
    elevation: float | None  # meters
    distance: float = 0.0  # meters; cumulative, or from the previous survivor after rebuild
    survived: bool = False
    is_extremum: bool = False


@dataclass
class AnnotatedTrack:
    """Flattened track with cumulative distances and raw elevation statistics."""
    points: list[TrackPoint]
    length_m: float
    min_elevation: float
    max_elevation: float
    avg_elevation: float


@dataclass(frozen=True)
class ProfilePoint:
    distance: float  # meters from the previous profile point
    elevation: float  # meters
    lat: float
    lon: float


@dataclass
class ProfileParams:
    grade_threshold: float = 70.0  # percent; steeper survivors are treated as sensor jitter
    elevation_threshold: float = 7.0  # meters; minimum chord deviation for a new extremum
    relief_policy: ReliefPolicy = ReliefPolicy.FALLBACK
    # Simplify over the running sum of rebuilt segment distances. When False the
    # raw segment distances are used as the horizontal axis.
    cumulative_axis: bool = True

    @classmethod
    def from_config(cls, config: dict) -> "ProfileParams":
        """Build params from a config dict, ignoring unrelated keys.

        Raises:
            ValueError: If relief_policy names an unknown policy, or
                cumulative_axis is not a boolean.
        """
        params = cls()
        if config.get("grade_threshold") is not None:
            params.grade_threshold = float(config["grade_threshold"])
        if config.get("elevation_threshold") is not None:
            params.elevation_threshold = float(config["elevation_threshold"])
        if config.get("relief_policy") is not None:
            policy = config["relief_policy"]
            if not isinstance(policy, ReliefPolicy):
                try:
                    policy = ReliefPolicy(str(policy).lower())
                except ValueError:
                    choices = ", ".join(p.value for p in ReliefPolicy)
                    raise ValueError(f"Unknown relief policy {policy!r} (expected one of: {choices})") from None
            params.relief_policy = policy
        if config.get("cumulative_axis") is not None:
            axis = config["cumulative_axis"]
            if not isinstance(axis, bool):
                raise ValueError(f"cumulative_axis must be true or false, got {axis!r}")
            params.cumulative_axis = axis
        return params


@dataclass(frozen=True)
class ElevationSummary:
    length_m: float  # meters, over the unfiltered track
    gain_m: float  # meters
    loss_m: float  # meters
    min_elevation: float  # meters
    max_elevation: float  # meters
    avg_elevation: float  # meters
    profile: tuple[ProfilePoint, ...]
    relief_fallback_stage: str | None = None  # filter stage that triggered the fallback
