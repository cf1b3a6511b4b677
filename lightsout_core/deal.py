from __future__ import annotations

import logging
import random
from typing import Optional

from .config import GridConfig
from .grid import Grid

logger = logging.getLogger(__name__)


def generate(config: GridConfig, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Grid:
    """
    Deals a fresh grid where each cell is independently lit with probability
    config.chance_light_starts_on.

    Each call draws from its own random.Random(seed) unless an rng is injected,
    so boards dealt for different sessions never share generator state.
    """
    config.validate()
    rng = rng or random.Random(seed)
    p = config.chance_light_starts_on
    rows = tuple(
        tuple(rng.random() < p for _ in range(config.ncols))
        for _ in range(config.nrows)
    )
    grid = Grid(rows=rows)
    logger.debug("dealt %dx%d grid with %d lit cells", config.nrows, config.ncols, grid.lit_count())
    return grid
