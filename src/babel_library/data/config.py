from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from babel_library.core.base_codec import ADDRESS_ALPHABET, CONTENT_ALPHABET, validate_alphabet


@dataclass(frozen=True)
class LibraryConfig:
    rows: int = 40
    columns: int = 80
    content_alphabet: str = CONTENT_ALPHABET
    address_alphabet: str = ADDRESS_ALPHABET

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError("rows and columns must be positive")
        validate_alphabet(self.content_alphabet)
        validate_alphabet(self.address_alphabet)

    @property
    def capacity(self) -> int:
        return self.rows * self.columns

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LibraryConfig":
        defaults = cls()
        return cls(
            rows=int(data.get("rows", defaults.rows)),
            columns=int(data.get("columns", defaults.columns)),
            content_alphabet=str(data.get("content_alphabet", defaults.content_alphabet)),
            address_alphabet=str(data.get("address_alphabet", defaults.address_alphabet)),
        )

    @classmethod
    def from_path(cls, path: str) -> "LibraryConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config format (expected mapping): {path}")
        section = data.get("library") or {}
        if not isinstance(section, dict):
            raise ValueError(f"Invalid 'library' section (expected mapping): {path}")
        return cls.from_dict(section)


def load_config(path: str | Path | None) -> LibraryConfig:
    if path is None:
        return LibraryConfig()
    return LibraryConfig.from_path(str(path))
