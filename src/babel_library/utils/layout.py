from __future__ import annotations


def wrap_page(text: str, columns: int) -> list[str]:
    if columns <= 0:
        raise ValueError("columns must be positive")
    return [text[i : i + columns] for i in range(0, len(text), columns)]


def format_page(text: str, columns: int) -> str:
    return "\n".join(wrap_page(text, columns))
