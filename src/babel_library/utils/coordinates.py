from __future__ import annotations

from typing import NamedTuple

from babel_library.core.errors import CoordinateOutOfRange


# Exclusive upper bounds per field.
WALLS = 5
SHELVES = 6
VOLUMES = 33
PAGES = 411

# (field, exclusive bound, place value), most significant first.
_FIELDS = (
    ("wall", WALLS, 1_000_000),
    ("shelf", SHELVES, 100_000),
    ("volume", VOLUMES, 1_000),
    ("page", PAGES, 1),
)


class Coordinates(NamedTuple):
    wall: int
    shelf: int
    volume: int
    page: int


def check_coordinates(coords: Coordinates) -> None:
    for (name, bound, _), value in zip(_FIELDS, coords):
        if value < 0 or value >= bound:
            raise CoordinateOutOfRange(name, value, bound)


class CoordinateCodec:
    """
    Canonical scalar encoding:
      scalar = (wall * 1_000_000) + (shelf * 100_000) + (volume * 1_000) + page
    """

    def __init__(self) -> None:
        # Each field's digits must stay below the next field's place value.
        for (_, _, upper), (name, bound, place) in zip(_FIELDS, _FIELDS[1:]):
            if bound * place > upper:
                raise ValueError(f"{name} digits overlap the next field")

    @property
    def max_scalar(self) -> int:
        return sum((bound - 1) * place for _, bound, place in _FIELDS)

    def encode(self, coords: Coordinates) -> int:
        check_coordinates(coords)
        return sum(value * place for (_, _, place), value in zip(_FIELDS, coords))

    def decode(self, scalar: int) -> Coordinates:
        if scalar < 0:
            raise ValueError("coordinate scalar must be non-negative")
        wall = scalar // 1_000_000
        rem = scalar % 1_000_000
        shelf = rem // 100_000
        rem = rem % 100_000
        volume = rem // 1_000
        page = rem % 1_000
        coords = Coordinates(wall=wall, shelf=shelf, volume=volume, page=page)
        check_coordinates(coords)
        return coords
