"""Fixed parameters of the scene format, the window and the controls."""

from enum import IntEnum

WINDOW_TITLE = "Cub3D"
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 800

DEFAULT_CEIL_COLOR = 1000
DEFAULT_FLOOR_COLOR = 500

FOV = 0.66

MAX_RGB = 16777215

SEP = " \t\v\f\r"

ALL_CHARACTERS = " 01NSWE"
HERO_CHARACTERS = "NSWE"

WALL_TEXTURE = 4
ALL_TEXTURE = 6
TEXTURE_SIZE = 64

EXTENSION = ".xpm"
MIN_LEN_PATH_TEXTURE = 5
SCENE_EXTENSION = ".cub"

ANGLE_STEP = 0.10
MOVE_STEP = 0.2


class Key(IntEnum):
    """Key codes the game reacts to."""

    MOVE_LEFT = 0
    MOVE_BACKWARD = 1
    MOVE_RIGHT = 2
    ROTATE_LEFT = 12
    MOVE_AHEAD = 13
    ROTATE_RIGHT = 14
    ESC = 53


class WallSide(IntEnum):
    """The four wall textures; the name is the identifier used in scene files."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3