from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from babel_library.utils.coordinates import PAGES, SHELVES, VOLUMES, WALLS, Coordinates


@dataclass(frozen=True)
class SamplerConfig:
    seed: Optional[int] = None


class CoordinateSampler:
    """Uniform random coordinates; callable, so it can be passed as a coordinate source."""

    def __init__(self, cfg: Optional[SamplerConfig] = None) -> None:
        self.cfg = cfg or SamplerConfig()
        self.rng = random.Random(self.cfg.seed)

    def sample(self) -> Coordinates:
        return Coordinates(
            wall=self.rng.randint(0, WALLS - 1),
            shelf=self.rng.randint(0, SHELVES - 1),
            volume=self.rng.randint(0, VOLUMES - 1),
            page=self.rng.randint(0, PAGES - 1),
        )

    def __call__(self) -> Coordinates:
        return self.sample()
