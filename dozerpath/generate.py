"""Seeded procedural boards for demos, benchmarks and tests."""

from __future__ import annotations

import hashlib

import numpy as np
from numpy.random import Generator, PCG64
from opensimplex import OpenSimplex

from .board import HexBoard
from .config import BoardSettings

_BITGEN_MODULUS = 2**128
_NOISE_MODULUS = 2**31


def _derive_seed(seed: int, namespace: str, *, modulo: int) -> int:
    """Return a deterministic per-namespace seed derived from ``seed``."""

    token = f"{seed}:{namespace}"
    digest = hashlib.blake2b(token.encode("utf-8"), digest_size=16).digest()
    # Zero has special meaning for some generators.
    return int.from_bytes(digest, "big") % modulo or 1


def generate_board(settings: BoardSettings | None = None, **overrides: object) -> HexBoard:
    """Build a :class:`HexBoard` from ``settings``; same seed, same board.

    Ground levels follow a simplex noise field.  Obstacles, impassable hexes
    and terrain costs are scattered with a PCG64 generator.
    """

    if settings is None:
        settings = BoardSettings.model_validate(overrides)
    elif overrides:
        settings = BoardSettings.model_validate({**settings.model_dump(), **overrides})

    board = HexBoard(settings.width, settings.height, layout=settings.layout)
    shape = (settings.height, settings.width)

    noise = OpenSimplex(seed=_derive_seed(settings.seed, "noise:level", modulo=_NOISE_MODULUS))
    cols = np.arange(settings.width, dtype=np.float64) * settings.level_frequency
    rows = np.arange(settings.height, dtype=np.float64) * settings.level_frequency
    field = noise.noise2array(cols, rows)
    board.levels[:] = np.rint((field + 1.0) / 2.0 * settings.max_level).astype(np.int64)

    rng = Generator(PCG64(_derive_seed(settings.seed, "rng:terrain", modulo=_BITGEN_MODULUS)))
    board.terrain_costs[:] = rng.integers(0, settings.max_terrain_cost + 1, size=shape)

    impassable = rng.random(shape) < settings.impassable_density
    has_obstacle = (rng.random(shape) < settings.obstacle_density) & ~impassable
    costs = rng.integers(settings.min_leveling_cost, settings.max_leveling_cost + 1, size=shape)
    heights = rng.integers(1, 3, size=shape)

    board.impassable[:] = impassable
    board.obstacles[:] = np.where(has_obstacle, costs, 0)
    board.feature_heights[:] = np.where(has_obstacle, heights, 0)
    return board


__all__ = ["generate_board"]
