from __future__ import annotations


class Locator:
    """
    Places a page's content value and its coordinate scalar as the two digits
    of a base-`multiplier` number, where multiplier = base ** capacity.
    """

    def __init__(self, content_base: int, capacity: int) -> None:
        if content_base < 2:
            raise ValueError("content_base must be >= 2")
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.content_base = content_base
        self.capacity = capacity
        self.multiplier = content_base ** capacity

    def combine(self, content_value: int, scalar: int) -> int:
        if not 0 <= content_value < self.multiplier:
            raise ValueError("content_value must be in [0, multiplier)")
        if scalar < 0:
            raise ValueError("scalar must be non-negative")
        return content_value + scalar * self.multiplier

    def decompose(self, combined: int) -> tuple[int, int]:
        """Return (content_value, scalar)."""
        if combined < 0:
            raise ValueError("combined value must be non-negative")
        scalar, content_value = divmod(combined, self.multiplier)
        return content_value, scalar
