from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from babel_library.core.base_codec import CONTENT_ALPHABET


@dataclass(frozen=True)
class NormalizationConfig:
    capacity: int = 40 * 80
    pad_char: str = " "


class PageNormalizer:
    def __init__(self, cfg: Optional[NormalizationConfig] = None) -> None:
        self.cfg = cfg or NormalizationConfig()
        if self.cfg.capacity <= 0:
            raise ValueError("capacity must be positive")
        if len(self.cfg.pad_char) != 1:
            raise ValueError("pad_char must be a single character")

    @property
    def capacity(self) -> int:
        return self.cfg.capacity

    def normalize(self, text: str) -> str:
        if len(text) >= self.cfg.capacity:
            return text[: self.cfg.capacity]
        return text.ljust(self.cfg.capacity, self.cfg.pad_char)

    def scatter(self, text: str, rng: random.Random, alphabet: str = CONTENT_ALPHABET) -> str:
        """
        Hide `text` at a random offset inside a page of random symbols.

        Text at or over capacity is returned unchanged.
        """
        if len(text) >= self.cfg.capacity:
            return text
        free = self.cfg.capacity - len(text)
        before = rng.randrange(free)
        head = "".join(rng.choice(alphabet) for _ in range(before))
        tail = "".join(rng.choice(alphabet) for _ in range(free - before))
        return head + text + tail
