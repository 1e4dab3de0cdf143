"""Errors raised while loading and running a scene."""

from enum import Enum


class ErrorMessage(str, Enum):
    """Messages reported for every way a scene can be rejected."""

    AMOUNT_ARGS = "Error: amount args in input"
    FILE_EXTENSION = "Error: file extension '.cub'"
    OPEN_FILE = "Error: open file"
    FILE_EMPTY = "Error: file map is empty"
    AMOUNT_TEXTURE = "Error: amount texture"
    MIN_MAP = "Error: few rows in map"
    TEXTURE_BEFORE_MAP = "Error: texture after map"
    MAP_IS_SINGLE = "Error: map is not single"
    INVALID_TEXTURE = "Error: invalid texture"
    SEPARATOR_TEXTURE = "Error: no separator"
    DUPLICATE_TEXTURE = "Error: duplicate texture"
    LEN_PATH_TEXTURE = "Error: len path texture"
    EXTENSION_TEXTURE = "Error: extension texture"
    OPEN_TEXTURE = "Error: open texture"
    NO_MAP = "Error: no map in file"
    FORMAT_RGB = "Error: format rgb"
    MAX_RGB = "Error: value more max rgb"
    COUNT_ROWS_MAP = "Error: count rows map"
    INVALID_CHR_MAP = "Error: invalid char in map"
    MANY_HEROES = "Error: many herous on map"
    NO_HERO = "Error: no hero in map"
    BORDERS_MAP = "Error: borders in map"


class CubError(Exception):
    """A scene or command line was rejected; the program exits with ``exit_code``."""

    exit_code = 1

    def __init__(self, message):
        if isinstance(message, ErrorMessage):
            self.kind = message
            text = message.value
        else:
            self.kind = None
            text = str(message)
        super().__init__(text)
        self.message = text