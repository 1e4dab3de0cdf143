"""The map grid of a scene and the hero standing on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .constants import ALL_CHARACTERS, FOV, HERO_CHARACTERS
from .errors import CubError, ErrorMessage


@dataclass(frozen=True)
class Point:
    """A point or vector on the map plane."""

    x: float
    y: float


@dataclass
class Hero:
    """Position, view direction and camera plane of the player."""

    pos: Point
    dir: Point
    plane: Point


_HERO_VIEWS = {
    "E": (Point(1, 0), Point(0, FOV)),
    "W": (Point(-1, 0), Point(0, -FOV)),
    "S": (Point(0, 1), Point(-FOV, 0)),
    "N": (Point(0, -1), Point(FOV, 0)),
}


def _make_hero(direction: str, row: int, col: int) -> Hero:
    view, plane = _HERO_VIEWS[direction]
    return Hero(pos=Point(col + 0.5, row + 0.5), dir=view, plane=plane)


@dataclass
class GameMap:
    """The map as written (``rows``) and padded to a rectangle (``grid``)."""

    rows: list[str]
    grid: list[str]
    hero: Hero
    width: int
    height: int

    def check_borders(self) -> None:
        """Reject a map whose open floor touches its edge or an empty cell."""
        for i, row in enumerate(self.rows):
            for j, char in enumerate(row):
                if char != "0":
                    continue
                if i == 0 or i == self.height - 1 or j == 0 or j == len(row) - 1:
                    raise CubError(ErrorMessage.BORDERS_MAP)
                neighbours = (
                    self.grid[i - 1][j],
                    self.grid[i + 1][j],
                    self.grid[i][j - 1],
                    self.grid[i][j + 1],
                )
                if " " in neighbours:
                    raise CubError(ErrorMessage.BORDERS_MAP)

    def close_gaps(self) -> None:
        """Turn every empty cell of the grid into a wall."""
        self.grid = [row.replace(" ", "1") for row in self.grid]

    def cell(self, x: int, y: int) -> str:
        """The character of the grid at column ``x`` and row ``y``."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"cell ({x}, {y}) outside map")
        return self.grid[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        """True for a wall cell; anything outside the grid counts as wall."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            return True
        return self.grid[y][x] == "1"


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from its rows, locate the hero and check the borders."""
    lines = list(lines)
    if not lines:
        raise CubError(ErrorMessage.NO_MAP)
    rows = list(lines)
    hero: Hero | None = None
    for i, line in enumerate(lines):
        for j, char in enumerate(line):
            if char not in ALL_CHARACTERS:
                raise CubError(ErrorMessage.INVALID_CHR_MAP)
            if char in HERO_CHARACTERS:
                if hero is not None:
                    raise CubError(ErrorMessage.MANY_HEROES)
                hero = _make_hero(char, i, j)
                rows[i] = line[:j] + "0" + line[j + 1:]
    if hero is None:
        raise CubError(ErrorMessage.NO_HERO)
    width = max(len(row) for row in rows)
    grid = [row.ljust(width) for row in rows]
    game_map = GameMap(rows=rows, grid=grid, hero=hero, width=width, height=len(rows))
    game_map.check_borders()
    return game_map