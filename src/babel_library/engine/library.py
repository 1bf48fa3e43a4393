from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from babel_library.core.base_codec import AddressCodec, ContentCodec
from babel_library.core.errors import AddressFormatError, AddressMismatch
from babel_library.core.locator import Locator
from babel_library.core.normalizer import NormalizationConfig, PageNormalizer
from babel_library.data.config import LibraryConfig
from babel_library.engine.sampler import CoordinateSampler
from babel_library.utils.coordinates import CoordinateCodec, Coordinates, check_coordinates


CoordinateSource = Callable[[], Coordinates]


@dataclass(frozen=True)
class Address:
    hex: str
    wall: int
    shelf: int
    volume: int
    page: int

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(wall=self.wall, shelf=self.shelf, volume=self.volume, page=self.page)

    def __str__(self) -> str:
        return f"{self.wall}:{self.shelf}:{self.volume}:{self.page}:{self.hex}"

    @classmethod
    def parse(cls, text: str) -> "Address":
        """Parse `wall:shelf:volume:page:hex`; coordinates are range-checked, the hex is not."""
        parts = text.strip().split(":")
        if len(parts) != 5:
            raise AddressFormatError("Expected wall:shelf:volume:page:hex_address")
        # int() alone would also accept "+3", " 3", "1_0" and non-ASCII digits.
        if not all(p.isascii() and p.isdigit() for p in parts[:4]):
            raise AddressFormatError("Coordinates must be numbers")
        wall, shelf, volume, page = (int(p) for p in parts[:4])
        if not parts[4]:
            raise AddressFormatError("Missing hex address")
        check_coordinates(Coordinates(wall=wall, shelf=shelf, volume=volume, page=page))
        return cls(hex=parts[4], wall=wall, shelf=shelf, volume=volume, page=page)


class Library:
    def __init__(self, cfg: Optional[LibraryConfig] = None) -> None:
        self.cfg = cfg or LibraryConfig()
        self.content = ContentCodec(self.cfg.content_alphabet)
        self.addresses = AddressCodec(self.cfg.address_alphabet)
        self.normalizer = PageNormalizer(
            NormalizationConfig(capacity=self.cfg.capacity, pad_char=self.content.zero)
        )
        self.coords = CoordinateCodec()
        self.locator = Locator(content_base=self.content.base, capacity=self.cfg.capacity)

    @property
    def capacity(self) -> int:
        return self.cfg.capacity

    def normalize(self, text: str) -> str:
        return self.normalizer.normalize(text)

    def locate(self, text: str, coordinate_source: Optional[CoordinateSource] = None) -> Address:
        source = coordinate_source or CoordinateSampler()
        page_text = self.normalizer.normalize(text)
        content_value = self.content.encode_page(page_text)
        # Sources may return a plain (wall, shelf, volume, page) tuple.
        coords = Coordinates(*source())
        scalar = self.coords.encode(coords)
        combined = self.locator.combine(content_value, scalar)
        return Address(
            hex=self.addresses.encode_address(combined),
            wall=coords.wall,
            shelf=coords.shelf,
            volume=coords.volume,
            page=coords.page,
        )

    def resolve(self, address: Address) -> str:
        expected = self.coords.encode(address.coordinates)
        combined = self.addresses.decode_address(address.hex)
        content_value, scalar = self.locator.decompose(combined)
        if scalar != expected:
            raise AddressMismatch(f"Hex address does not belong to {address.wall}:{address.shelf}:{address.volume}:{address.page}")
        return self.content.decode_page(content_value, self.capacity)


DEFAULT_LIBRARY = Library()


def locate(text: str, coordinate_source: Optional[CoordinateSource] = None) -> Address:
    return DEFAULT_LIBRARY.locate(text, coordinate_source)


def resolve(wall: int, shelf: int, volume: int, page: int, hex_address: str) -> str:
    address = Address(hex=hex_address, wall=wall, shelf=shelf, volume=volume, page=page)
    return DEFAULT_LIBRARY.resolve(address)
