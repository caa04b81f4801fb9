"""Tests for the flight path configuration system."""

import json
import re

import pytest
from dataclasses import FrozenInstanceError, replace

from flightpath.config import (
    DEFAULT_CONFIG,
    DifficultyWaypointPolicy,
    DurationConfig,
    FlightPathConfig,
    FlightZone,
    SplineConfig,
    WaypointConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
    full_config_hash,
    generation_config_hash,
)


class TestDefaultConfig:
    """DEFAULT_CONFIG carries the documented default values."""

    def test_default_values(self):
        assert DEFAULT_CONFIG.spline.tension == 0.5
        assert DEFAULT_CONFIG.spline.arc_length_samples == 20
        assert DEFAULT_CONFIG.waypoints.lateral_deviation_range == 3.0
        assert DEFAULT_CONFIG.waypoints.vertical_deviation_range == 1.5
        assert DEFAULT_CONFIG.waypoints.min_distance_from_endpoints == 2.0
        assert DEFAULT_CONFIG.waypoints.prefer_preplaced is True
        assert DEFAULT_CONFIG.zone.size == (20.0, 8.0, 20.0)
        assert DEFAULT_CONFIG.zone.min_height == 1.5
        assert DEFAULT_CONFIG.zone.max_height == 6.0
        assert DEFAULT_CONFIG.duration.min_flight_duration == 3.0
        assert DEFAULT_CONFIG.duration.reference_speed == 5.0

    def test_default_difficulty_table(self):
        table = [
            (p.level, p.min_count, p.max_count, p.chance_of_max)
            for p in DEFAULT_CONFIG.difficulty
        ]
        assert table == [
            (1, 1, 2, 0.7),
            (2, 1, 2, 0.5),
            (3, 1, 3, 0.5),
            (4, 0, 3, 0.5),
            (5, 0, 3, 0.3),
        ]

    def test_zone_bounds(self):
        zone = FlightZone(center=(1.0, 0.0, -2.0), size=(4.0, 2.0, 6.0))
        assert zone.minimum == (-1.0, -1.0, -5.0)
        assert zone.maximum == (3.0, 1.0, 1.0)


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.description = "changed"  # type: ignore[misc]

    def test_spline_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.spline.tension = 1.0  # type: ignore[misc]

    def test_policy_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.difficulty[0].max_count = 9  # type: ignore[misc]


class TestPolicyLookup:
    """Levels index the 1-based table by position; out-of-range levels clamp."""

    def test_exact_level(self):
        assert DEFAULT_CONFIG.policy_for_level(3).level == 3

    def test_below_range(self):
        assert DEFAULT_CONFIG.policy_for_level(0).level == 1
        assert DEFAULT_CONFIG.policy_for_level(-4).level == 1

    def test_above_range(self):
        assert DEFAULT_CONFIG.policy_for_level(9).level == 5

    def test_lookup_is_by_table_position(self):
        cfg = FlightPathConfig(
            difficulty=(
                DifficultyWaypointPolicy(1, 0, 1, 0.5),
                DifficultyWaypointPolicy(3, 2, 3, 0.5),
            )
        )
        assert cfg.policy_for_level(1).level == 1
        assert cfg.policy_for_level(2).level == 3
        assert cfg.policy_for_level(3).level == 3


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_config_round_trip_hash(self):
        json_str = config_to_json(DEFAULT_CONFIG)
        restored = config_from_json(json_str)
        assert config_hash(DEFAULT_CONFIG) == config_hash(restored)

    def test_config_round_trip_equal(self):
        cfg = replace(DEFAULT_CONFIG, description="canyon run", tags=("a", "b"))
        restored = config_from_json(config_to_json(cfg))
        assert restored == cfg
        assert isinstance(restored.difficulty, tuple)
        assert isinstance(restored.zone.size, tuple)

    def test_dict_round_trip(self):
        assert config_from_dict(config_to_dict(DEFAULT_CONFIG)) == DEFAULT_CONFIG

    def test_partial_json_uses_defaults(self):
        cfg = config_from_json(json.dumps({"zone": {"size": [20, 8, 20]}}))
        assert cfg.zone.size == (20.0, 8.0, 20.0)
        assert cfg.spline == SplineConfig()

    def test_integer_literals_accepted(self):
        cfg = config_from_json(
            json.dumps({"spline": {"tension": 1}, "duration": {"reference_speed": 4}})
        )
        assert cfg.spline.tension == 1.0
        assert isinstance(cfg.duration.reference_speed, float)


class TestConfigHashing:
    """Hashing behavior for generation identity and full identity."""

    def test_generation_hash_ignores_description(self):
        cfg2 = replace(DEFAULT_CONFIG, description="relabelled", tags=("x",))
        assert generation_config_hash(DEFAULT_CONFIG) == generation_config_hash(cfg2)

    def test_full_hash_includes_description(self):
        cfg2 = replace(DEFAULT_CONFIG, description="relabelled")
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    def test_config_hash_is_hex_string(self):
        h = full_config_hash(DEFAULT_CONFIG)
        assert len(h) == 16
        assert re.match(r"^[0-9a-f]{16}$", h)

    def test_different_configs_different_hash(self):
        cfg2 = replace(DEFAULT_CONFIG, spline=SplineConfig(tension=0.3))
        assert generation_config_hash(DEFAULT_CONFIG) != generation_config_hash(cfg2)

    def test_generation_hash_ignores_duration(self):
        cfg2 = replace(DEFAULT_CONFIG, duration=DurationConfig(min_flight_duration=8.0))
        assert generation_config_hash(DEFAULT_CONFIG) == generation_config_hash(cfg2)
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    @pytest.mark.parametrize(
        "changed",
        [
            {"spline": SplineConfig(arc_length_samples=40)},
            {"waypoints": WaypointConfig(lateral_deviation_range=5.0)},
            {"zone": FlightZone(max_height=9.0)},
            {"difficulty": (DifficultyWaypointPolicy(1, 0, 1, 0.5),)},
        ],
    )
    def test_generation_hash_covers_geometry(self, changed):
        cfg2 = replace(DEFAULT_CONFIG, **changed)
        assert generation_config_hash(DEFAULT_CONFIG) != generation_config_hash(cfg2)

    def test_sub_config_hash(self):
        assert config_hash(DEFAULT_CONFIG.zone) == config_hash(FlightZone())
        assert config_hash(DEFAULT_CONFIG.zone) != config_hash(FlightZone(min_height=2.0))

    def test_non_dataclass_rejected(self):
        with pytest.raises(TypeError, match="config dataclass"):
            config_hash({"spline": {}})


class TestConfigValidation:
    """Cross-parameter validation catches invalid configs."""

    def test_tension_range(self):
        with pytest.raises(ValueError, match="tension"):
            FlightPathConfig(spline=SplineConfig(tension=1.5))

    def test_arc_length_samples(self):
        with pytest.raises(ValueError, match="arc_length_samples"):
            FlightPathConfig(spline=SplineConfig(arc_length_samples=1))

    def test_height_band(self):
        with pytest.raises(ValueError, match="min_height"):
            FlightPathConfig(zone=FlightZone(min_height=7.0, max_height=6.0))

    def test_negative_zone_size(self):
        with pytest.raises(ValueError, match="zone size"):
            FlightPathConfig(zone=FlightZone(size=(-1.0, 8.0, 20.0)))

    def test_negative_deviation(self):
        with pytest.raises(ValueError, match="lateral_deviation_range"):
            FlightPathConfig(waypoints=WaypointConfig(lateral_deviation_range=-1.0))
        with pytest.raises(ValueError, match="vertical_deviation_range"):
            FlightPathConfig(waypoints=WaypointConfig(vertical_deviation_range=-1.0))

    def test_reference_speed(self):
        with pytest.raises(ValueError, match="reference_speed"):
            FlightPathConfig(duration=DurationConfig(reference_speed=0.0))

    def test_empty_difficulty(self):
        with pytest.raises(ValueError, match="at least one level"):
            FlightPathConfig(difficulty=())

    def test_duplicate_levels(self):
        with pytest.raises(ValueError, match="unique"):
            FlightPathConfig(
                difficulty=(
                    DifficultyWaypointPolicy(1, 0, 1, 0.5),
                    DifficultyWaypointPolicy(1, 1, 2, 0.5),
                )
            )

    def test_policy_min_exceeds_max(self):
        with pytest.raises(ValueError, match="min_count"):
            DifficultyWaypointPolicy(level=2, min_count=3, max_count=1)

    def test_policy_chance_range(self):
        with pytest.raises(ValueError, match="chance_of_max"):
            DifficultyWaypointPolicy(chance_of_max=1.5)

    def test_valid_config_passes(self):
        cfg = FlightPathConfig()
        assert cfg.spline.tension == 0.5


class TestSerializationStrict:
    """Strict mode rejects unknown keys."""

    def test_serialization_strict_rejects_extra_keys(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["unknown_field"] = "sneaky"
        with pytest.raises(Exception):
            config_from_json(json.dumps(data))

    def test_nested_extra_key_rejected(self):
        with pytest.raises(Exception):
            config_from_json(json.dumps({"spline": {"tension": 0.5, "smoothness": 2}}))

    def test_invalid_values_rejected_on_load(self):
        with pytest.raises(ValueError, match="tension"):
            config_from_json(json.dumps({"spline": {"tension": 2.0}}))
