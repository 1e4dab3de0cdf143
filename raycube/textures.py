"""Wall textures and the six settings that precede the map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from PIL import Image

from .colors import parse_color_line
from .constants import (
    ALL_TEXTURE,
    DEFAULT_CEIL_COLOR,
    DEFAULT_FLOOR_COLOR,
    EXTENSION,
    MIN_LEN_PATH_TEXTURE,
    SEP,
    TEXTURE_SIZE,
    WallSide,
)
from .errors import CubError, ErrorMessage
from .tokens import Token, TokenType


@dataclass(frozen=True)
class Texture:
    """A bitmap of 0xRRGGBB pixels stored row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    def pixel(self, x: int, y: int) -> int:
        """Colour at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside texture")
        return self.pixels[y * self.width + x]


@dataclass
class SceneSettings:
    """Wall textures and ceiling/floor colours read from a scene."""

    textures: dict[WallSide, Texture] = field(default_factory=dict)
    ceil_color: int = DEFAULT_CEIL_COLOR
    floor_color: int = DEFAULT_FLOOR_COLOR
    count: int = 0


def parse_wall_line(line: str) -> tuple[WallSide, str]:
    """Split a wall line such as ``NO ./north.xpm`` into side and path."""
    side = next((s for s in WallSide if line.startswith(s.name)), None)
    if side is None:
        raise CubError(ErrorMessage.INVALID_TEXTURE)
    rest = line[len(side.name):]
    if rest and rest[0] not in SEP:
        raise CubError(ErrorMessage.SEPARATOR_TEXTURE)
    return side, rest.lstrip(SEP)


def validate_texture_path(path: str) -> str:
    """Check the length and extension of a texture path and return it."""
    if len(path) < MIN_LEN_PATH_TEXTURE:
        raise CubError(ErrorMessage.LEN_PATH_TEXTURE)
    if not path.endswith(EXTENSION):
        raise CubError(ErrorMessage.EXTENSION_TEXTURE)
    return path


def load_texture(path: str) -> Texture:
    """Load an image file as a square texture of the fixed size."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
    except (OSError, SyntaxError, ValueError) as exc:
        raise CubError(ErrorMessage.OPEN_TEXTURE) from exc
    if rgb.size != (TEXTURE_SIZE, TEXTURE_SIZE):
        raise CubError(ErrorMessage.OPEN_TEXTURE)
    channels = iter(rgb.tobytes())
    pixels = tuple((r << 16) | (g << 8) | b for r, g, b in zip(channels, channels, channels))
    return Texture(width=rgb.width, height=rgb.height, pixels=pixels)


def parse_textures(
    tokens: Iterable[Token],
    loader: Callable[[str], Texture] = load_texture,
) -> SceneSettings:
    """Read the wall textures and colours until all six settings are found."""
    settings = SceneSettings()
    for token in tokens:
        if settings.count == ALL_TEXTURE:
            break
        if token.kind != TokenType.TEXTURE:
            continue
        head = token.text[:1]
        if head and head in "NSEW":
            side, path = parse_wall_line(token.text)
            if side in settings.textures:
                raise CubError(ErrorMessage.DUPLICATE_TEXTURE)
            settings.textures[side] = loader(validate_texture_path(path))
            settings.count += 1
        elif head and head in "CF":
            letter, color = parse_color_line(token.text)
            if letter == "C":
                settings.ceil_color = color.packed()
            else:
                settings.floor_color = color.packed()
            settings.count += 1
    if any(side not in settings.textures for side in WallSide):
        raise CubError(ErrorMessage.AMOUNT_TEXTURE)
    return settings