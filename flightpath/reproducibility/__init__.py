"""Reproducibility infrastructure: per-call seed resolution and RNG creation."""

from flightpath.reproducibility.seed import (
    MAX_SEED,
    create_rng,
    derive_seeds,
    resolve_seed,
    verify_seed_determinism,
)

__all__ = [
    "MAX_SEED",
    "create_rng",
    "derive_seeds",
    "resolve_seed",
    "verify_seed_determinism",
]
