"""Flight path configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DifficultyWaypointPolicy:
    """Intermediate waypoint count policy for one difficulty level.

    chance_of_max biases the count draw toward max_count. It does not
    guarantee max_count even at 1.0.
    """

    level: int = 1
    min_count: int = 1
    max_count: int = 2
    chance_of_max: float = 0.5

    def __post_init__(self) -> None:
        if self.min_count < 0:
            raise ValueError(
                f"min_count ({self.min_count}) must be >= 0 for level {self.level}"
            )
        if self.min_count > self.max_count:
            raise ValueError(
                f"min_count ({self.min_count}) must be <= max_count "
                f"({self.max_count}) for level {self.level}"
            )
        if not 0.0 <= self.chance_of_max <= 1.0:
            raise ValueError(
                f"chance_of_max ({self.chance_of_max}) must be in [0, 1] "
                f"for level {self.level}"
            )


DEFAULT_DIFFICULTY_POLICIES: tuple[DifficultyWaypointPolicy, ...] = (
    DifficultyWaypointPolicy(1, 1, 2, 0.7),  # weighted toward max
    DifficultyWaypointPolicy(2, 1, 2, 0.5),
    DifficultyWaypointPolicy(3, 1, 3, 0.5),
    DifficultyWaypointPolicy(4, 0, 3, 0.5),
    DifficultyWaypointPolicy(5, 0, 3, 0.3),  # weighted toward min
)


@dataclass(frozen=True, slots=True)
class SplineConfig:
    """Catmull-Rom interpolation and arc-length sampling parameters."""

    tension: float = 0.5  # 0.5 = standard Catmull-Rom
    arc_length_samples: int = 20  # samples per segment


@dataclass(frozen=True, slots=True)
class WaypointConfig:
    """Intermediate waypoint sourcing and synthesis parameters."""

    lateral_deviation_range: float = 3.0
    vertical_deviation_range: float = 1.5
    min_distance_from_endpoints: float = 2.0
    prefer_preplaced: bool = True


@dataclass(frozen=True, slots=True)
class FlightZone:
    """Axis-aligned box plus height band that synthesized waypoints are clamped into."""

    center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    size: tuple[float, float, float] = (20.0, 8.0, 20.0)
    min_height: float = 1.5
    max_height: float = 6.0

    @property
    def minimum(self) -> tuple[float, float, float]:
        return tuple(c - s / 2.0 for c, s in zip(self.center, self.size))  # type: ignore[return-value]

    @property
    def maximum(self) -> tuple[float, float, float]:
        return tuple(c + s / 2.0 for c, s in zip(self.center, self.size))  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class DurationConfig:
    """Minimum flight duration check parameters."""

    min_flight_duration: float = 3.0  # seconds
    reference_speed: float = 5.0  # units per second
    max_extension_waypoints: int = 3


@dataclass(frozen=True, slots=True)
class FlightPathConfig:
    """Top-level path generation configuration composing all sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    spline: SplineConfig = field(default_factory=SplineConfig)
    waypoints: WaypointConfig = field(default_factory=WaypointConfig)
    zone: FlightZone = field(default_factory=FlightZone)
    duration: DurationConfig = field(default_factory=DurationConfig)
    difficulty: tuple[DifficultyWaypointPolicy, ...] = DEFAULT_DIFFICULTY_POLICIES
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Cross-parameter validation."""
        if not 0.0 <= self.spline.tension <= 1.0:
            raise ValueError(
                f"tension ({self.spline.tension}) must be in [0, 1]"
            )
        if self.spline.arc_length_samples < 2:
            raise ValueError(
                f"arc_length_samples ({self.spline.arc_length_samples}) must be >= 2"
            )
        if self.zone.min_height > self.zone.max_height:
            raise ValueError(
                f"min_height ({self.zone.min_height}) must be "
                f"<= max_height ({self.zone.max_height})"
            )
        if any(s < 0.0 for s in self.zone.size):
            raise ValueError(f"zone size {self.zone.size} must be non-negative")
        if self.waypoints.lateral_deviation_range < 0.0:
            raise ValueError(
                f"lateral_deviation_range ({self.waypoints.lateral_deviation_range}) "
                f"must be >= 0"
            )
        if self.waypoints.vertical_deviation_range < 0.0:
            raise ValueError(
                f"vertical_deviation_range ({self.waypoints.vertical_deviation_range}) "
                f"must be >= 0"
            )
        if self.duration.reference_speed <= 0.0:
            raise ValueError(
                f"reference_speed ({self.duration.reference_speed}) must be > 0"
            )
        if not self.difficulty:
            raise ValueError("difficulty must define at least one level")
        levels = [p.level for p in self.difficulty]
        if len(set(levels)) != len(levels):
            raise ValueError(f"difficulty levels must be unique, got {levels}")

    def policy_for_level(self, level: int) -> DifficultyWaypointPolicy:
        """Return the policy for ``level`` from the 1-indexed difficulty table.

        Level N reads entry N - 1; levels outside the table clamp to the
        first or last entry.
        """
        index = min(max(int(level) - 1, 0), len(self.difficulty) - 1)
        return self.difficulty[index]
