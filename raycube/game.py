"""A loaded scene, the player moving through it and the view drawn of it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable

from .constants import ANGLE_STEP, MOVE_STEP, SCENE_EXTENSION, Key
from .errors import CubError, ErrorMessage
from .gamemap import GameMap, Hero, Point, parse_map
from .raycast import Frame, render
from .textures import SceneSettings, Texture, load_texture, parse_textures
from .tokens import Token, map_lines, validate_tokens

_EDGE_MARGIN = 1.1


class MoveMode(Enum):
    """How the player is kept inside the map."""

    BOUNDS = "bounds"
    COLLIDE = "collide"


def check_file_extension(filename: str) -> str:
    """Return ``filename`` if its last extension is ``.cub``, else raise."""
    dot = filename.rfind(".")
    if dot < 0 or filename[dot:] != SCENE_EXTENSION:
        raise CubError(ErrorMessage.FILE_EXTENSION)
    return filename


@dataclass
class Game:
    """A running scene: map, settings, movement rules and screen buffer."""

    game_map: GameMap
    settings: SceneSettings
    mode: MoveMode = MoveMode.BOUNDS
    frame: Frame = field(default_factory=Frame)
    running: bool = True

    @property
    def hero(self) -> Hero:
        """The player standing on the map."""
        return self.game_map.hero

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[Token],
        loader: Callable[[str], Texture] = load_texture,
        mode: MoveMode = MoveMode.BOUNDS,
    ) -> "Game":
        """Check the scene layout, read its settings and map, and start a game."""
        tokens = list(tokens)
        validate_tokens(tokens)
        settings = parse_textures(tokens, loader)
        game_map = parse_map(map_lines(tokens))
        game_map.close_gaps()
        return cls(game_map=game_map, settings=settings, mode=mode)

    def handle_key(self, keycode: int) -> None:
        """React to a key press; unknown keys are ignored."""
        try:
            key = Key(keycode)
        except ValueError:
            return
        hero = self.hero
        if key is Key.ESC:
            self.running = False
        elif key is Key.MOVE_AHEAD:
            self.move(hero.dir.x * MOVE_STEP, hero.dir.y * MOVE_STEP)
        elif key is Key.MOVE_BACKWARD:
            self.move(-hero.dir.x * MOVE_STEP, -hero.dir.y * MOVE_STEP)
        elif key is Key.MOVE_RIGHT:
            self.move(hero.plane.x * MOVE_STEP, hero.plane.y * MOVE_STEP)
        elif key is Key.MOVE_LEFT:
            self.move(-hero.plane.x * MOVE_STEP, -hero.plane.y * MOVE_STEP)
        elif key is Key.ROTATE_RIGHT:
            self.rotate(ANGLE_STEP)
        elif key is Key.ROTATE_LEFT:
            self.rotate(-ANGLE_STEP)

    def _open_floor(self, x: float, y: float) -> bool:
        row_index, col_index = int(y), int(x)
        if not 0 <= row_index < len(self.game_map.rows):
            return False
        row = self.game_map.rows[row_index]
        return 0 <= col_index < len(row) and row[col_index] == "0"

    def move(self, dx: float, dy: float) -> None:
        """Shift the player along each axis where the move mode allows it."""
        pos = self.hero.pos
        x, y = pos.x, pos.y
        if self.mode is MoveMode.BOUNDS:
            if _EDGE_MARGIN < x + dx < self.game_map.width - _EDGE_MARGIN:
                x += dx
            if _EDGE_MARGIN < y + dy < self.game_map.height - _EDGE_MARGIN:
                y += dy
        else:
            if self._open_floor(x + dx, y):
                x += dx
            if self._open_floor(x, y + dy):
                y += dy
        self.hero.pos = Point(x, y)
        self.render()

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def turn(vector: Point) -> Point:
            return Point(
                vector.x * cos_a - vector.y * sin_a,
                vector.x * sin_a + vector.y * cos_a,
            )

        self.hero.dir = turn(self.hero.dir)
        self.hero.plane = turn(self.hero.plane)
        self.render()

    def render(self) -> Frame:
        """Draw the current view into the frame and return it."""
        return render(
            self.frame,
            self.game_map,
            self.hero,
            self.settings.textures,
            self.settings.ceil_color,
            self.settings.floor_color,
        )