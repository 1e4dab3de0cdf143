"""Casting rays through the map and drawing the textured view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from .constants import TEXTURE_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH, WallSide
from .gamemap import GameMap, Hero, Point
from .textures import Texture

_MIN_DISTANCE = 1e-6


@dataclass
class Frame:
    """A screen buffer of 0xRRGGBB pixels stored row by row."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.pixels = [0] * (self.width * self.height)

    def put(self, x: int, y: int, color: int) -> None:
        """Set a pixel; positions outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """The pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside frame")
        return self.pixels[y * self.width + x]

    def fill_background(self, ceil: int, floor: int) -> None:
        """Paint the upper half with ``ceil`` and the lower half with ``floor``."""
        half = self.height // 2
        self.pixels[: half * self.width] = [ceil] * (half * self.width)
        # The row at the very middle is left as it was.
        floor_rows = max(self.height - half - 1, 0)
        start = (half + 1) * self.width
        self.pixels[start:] = [floor] * (floor_rows * self.width)


@dataclass(frozen=True)
class RayHit:
    """Where the ray of one screen column meets a wall."""

    column: int
    direction: Point
    map_x: int
    map_y: int
    side_y: bool
    distance: float
    wall: WallSide


def _wall_side(direction: Point, side_y: bool) -> WallSide:
    if not side_y:
        return WallSide.EA if direction.x >= 0 else WallSide.WE
    return WallSide.SO if direction.y >= 0 else WallSide.NO


def _axis_start(pos: float, cell: int, component: float) -> tuple[float, int, float]:
    delta = abs(1 / component) if component else math.inf
    if component < 0:
        return delta, -1, (pos - cell) * delta
    return delta, 1, (cell + 1.0 - pos) * delta


def cast_ray(
    game_map: GameMap, hero: Hero, column: int, width: int = WINDOW_WIDTH
) -> RayHit:
    """Step the ray of ``column`` cell by cell until it enters a wall."""
    camera_x = 2.0 * column / width - 1.0
    direction = Point(
        hero.dir.x + hero.plane.x * camera_x,
        hero.dir.y + hero.plane.y * camera_x,
    )
    map_x = int(hero.pos.x)
    map_y = int(hero.pos.y)
    delta_x, step_x, side_x = _axis_start(hero.pos.x, map_x, direction.x)
    delta_y, step_y, side_y_dist = _axis_start(hero.pos.y, map_y, direction.y)
    side_y = False
    while True:
        if side_x < side_y_dist:
            side_x += delta_x
            map_x += step_x
            side_y = False
        else:
            side_y_dist += delta_y
            map_y += step_y
            side_y = True
        if game_map.is_wall(map_x, map_y):
            break
    distance = side_y_dist - delta_y if side_y else side_x - delta_x
    return RayHit(
        column=column,
        direction=direction,
        map_x=map_x,
        map_y=map_y,
        side_y=side_y,
        distance=distance,
        wall=_wall_side(direction, side_y),
    )


def texture_column(hit: RayHit, hero: Hero) -> int:
    """The texture column that the ray hits on the wall."""
    if not hit.side_y:
        wall_x = hero.pos.y + hit.distance * hit.direction.y
    else:
        wall_x = hero.pos.x + hit.distance * hit.direction.x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * TEXTURE_SIZE)
    if (not hit.side_y and hit.direction.x > 0) or (hit.side_y and hit.direction.y < 0):
        tex_x = TEXTURE_SIZE - tex_x - 1
    return tex_x


def _wall_span(distance: float, screen_height: int) -> tuple[int, int]:
    height = int(screen_height / max(distance, _MIN_DISTANCE))
    top = screen_height // 2 - height // 2
    return height, top


def render(
    frame: Frame,
    game_map: GameMap,
    hero: Hero,
    textures: Mapping[WallSide, Texture],
    ceil: int,
    floor: int,
) -> Frame:
    """Draw the background and one textured wall slice per column."""
    frame.fill_background(ceil, floor)
    for column in range(frame.width):
        hit = cast_ray(game_map, hero, column, frame.width)
        tex_x = texture_column(hit, hero)
        height, top = _wall_span(hit.distance, frame.height)
        if height <= 0:
            continue
        texture = textures[hit.wall]
        step = TEXTURE_SIZE / height
        first = max(top, 0)
        last = min(top + height, frame.height)
        for y in range(first, last):
            tex_y = min(int((y - top) * step), TEXTURE_SIZE - 1)
            frame.put(column, y, texture.pixel(tex_x, tex_y))
    return frame