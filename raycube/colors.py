"""Ceiling and floor colour settings."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import SEP
from .errors import CubError, ErrorMessage

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Rgb:
    """A colour given as three 0-255 components."""

    r: int
    g: int
    b: int

    def packed(self) -> int:
        """The colour as a 0xRRGGBB integer."""
        return (self.r << 16) | (self.g << 8) | self.b


def is_digits(text: str) -> bool:
    """True when every character is an ASCII digit (also for an empty string)."""
    return all(char in _DIGITS for char in text)


def parse_rgb(text: str) -> Rgb:
    """Parse ``R,G,B``; empty fields between commas are skipped."""
    parts = [part.strip(SEP) for part in text.split(",") if part]
    if len(parts) != 3:
        raise CubError(ErrorMessage.FORMAT_RGB)
    if any(not is_digits(part) or len(part) > 3 for part in parts):
        raise CubError(ErrorMessage.FORMAT_RGB)
    values = [int(part) if part else 0 for part in parts]
    if any(value > 255 for value in values):
        raise CubError(ErrorMessage.FORMAT_RGB)
    return Rgb(*values)


def parse_color_line(line: str) -> tuple[str, Rgb]:
    """Parse a ``C`` or ``F`` line into its letter and colour."""
    letter = line[:1]
    if not letter or letter not in "CF":
        raise CubError(ErrorMessage.INVALID_TEXTURE)
    return letter, parse_rgb(line[1:].lstrip(SEP))