#!/usr/bin/env python3
"""Entry point for generating and inspecting flight paths.

Generates one or more paths from spawn to target and prints a JSON
document with the effective seed, waypoint sourcing, geometry, and
evenly time-spaced samples of each path. Useful for reproducing a path
from a logged seed.

Usage:
    python generate_paths.py --spawn 0 2 0 --target 10 2 0 --difficulty 3 --seed 42
    python generate_paths.py --config config.json --candidates points.json --count 5
    python generate_paths.py --config config.json --dry-run
"""

import argparse
import json
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from flightpath.config import (
    DEFAULT_CONFIG,
    FlightPathConfig,
    config_from_json,
    full_config_hash,
    generation_config_hash,
)
from flightpath.generation import GenerationResult, PathGenerator, StaticWaypointSource
from flightpath.reproducibility import derive_seeds, resolve_seed

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    log.info("Completed: %s in %.3fs", name, elapsed)


def load_candidates(path: Path) -> list[list[float]]:
    """Read a JSON list of [x, y, z] candidate positions."""
    data = json.loads(path.read_text())
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of [x, y, z] points")
    return [[float(v) for v in point] for point in data]


def result_to_dict(result: GenerationResult, num_samples: int) -> dict[str, Any]:
    """Flatten a GenerationResult into JSON-serializable primitives."""
    path = result.path
    check = result.duration_check
    return {
        "seed": result.seed,
        "difficulty_level": result.difficulty_level,
        "requested_count": result.requested_count,
        "source": str(result.source),
        "candidates_offered": result.candidates_offered,
        "candidates_suitable": result.candidates_suitable,
        "preplaced_used": result.preplaced_used,
        "dynamic_used": result.dynamic_used,
        "waypoints": path.waypoints.tolist(),
        "total_length": path.total_length,
        "duration_check": {
            "required_length": check.required_length,
            "is_short": check.is_short,
            "needs_extension": check.needs_extension,
        },
        "samples": path.sample_points(num_samples).tolist(),
    }


def run_generation(
    config: FlightPathConfig,
    spawn: list[float],
    target: list[float],
    difficulty: int,
    seed: int | None,
    count: int,
    num_samples: int,
    candidates: list[list[float]],
) -> dict[str, Any]:
    """Generate ``count`` paths and return the JSON report.

    With count > 1 per-path seeds are derived from the master seed so any
    single path can be regenerated from its reported seed alone.
    """
    generator = PathGenerator(config, StaticWaypointSource(candidates))
    master_seed = resolve_seed(seed)
    seeds = [master_seed] if count == 1 else derive_seeds(master_seed, count)

    paths: list[dict[str, Any]] = []
    with stage_timer(f"Generate {count} path(s)"):
        for path_seed in seeds:
            result = generator.generate_path(spawn, target, difficulty, seed=path_seed)
            paths.append(result_to_dict(result, num_samples))

    return {
        "config_hash": generation_config_hash(config),
        "master_seed": master_seed,
        "spawn": spawn,
        "target": target,
        "difficulty": difficulty,
        "paths": paths,
    }


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate reproducible flight paths and print them as JSON",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to config JSON file")
    parser.add_argument(
        "--spawn", type=float, nargs=3, default=[0.0, 2.0, 0.0], metavar=("X", "Y", "Z"),
    )
    parser.add_argument(
        "--target", type=float, nargs=3, default=[10.0, 2.0, 0.0], metavar=("X", "Y", "Z"),
    )
    parser.add_argument("--difficulty", type=int, default=1, help="Difficulty level")
    parser.add_argument("--seed", type=int, default=None, help="Master seed (drawn if omitted)")
    parser.add_argument(
        "--candidates", type=str, default=None,
        help="JSON file with a list of [x, y, z] candidate waypoints",
    )
    parser.add_argument("--count", type=int, default=1, help="Number of paths to generate")
    parser.add_argument("--samples", type=int, default=50, help="Samples per path in the output")
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Load and validate config, print summary, and exit",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())
        log.info("Config loaded from %s", config_path)
    else:
        config = DEFAULT_CONFIG

    print(f"Config hash:     {full_config_hash(config)}", file=sys.stderr)
    print(f"Generation hash: {generation_config_hash(config)}", file=sys.stderr)
    print(
        f"Spline:     tension={config.spline.tension}, "
        f"samples={config.spline.arc_length_samples}",
        file=sys.stderr,
    )
    print(
        "Difficulty: "
        + ", ".join(
            f"L{p.level}={p.min_count}-{p.max_count}@{p.chance_of_max}"
            for p in config.difficulty
        ),
        file=sys.stderr,
    )

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.", file=sys.stderr)
        return

    if args.count < 1:
        print("Error: --count must be >= 1", file=sys.stderr)
        sys.exit(1)

    candidates: list[list[float]] = []
    if args.candidates is not None:
        candidates = load_candidates(Path(args.candidates))

    report = run_generation(
        config,
        args.spawn,
        args.target,
        args.difficulty,
        args.seed,
        args.count,
        args.samples,
        candidates,
    )
    json.dump(report, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
