"""Pure text helpers used when shaping option values.

No external dependencies — stdlib only.
"""

from __future__ import annotations


def is_blank(text: object) -> bool:
    """True for ``None``, non-strings, and empty or whitespace-only strings."""
    if not isinstance(text, str):
        return True
    return not text.strip()


def none_if_blank(text: str | None) -> str | None:
    """Return *text* unchanged, or ``None`` when it is blank."""
    return None if is_blank(text) else text


def split_csv(value: str) -> list[str]:
    """Split a comma-separated string, dropping blank items.

    Items are stripped of surrounding whitespace.
    """
    return [item.strip() for item in value.split(",") if item.strip()]
