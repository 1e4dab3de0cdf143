"""Splitting a scene file into classified lines and checking their layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from itertools import dropwhile, takewhile
from typing import Iterable

from .constants import ALL_CHARACTERS, ALL_TEXTURE, SEP
from .errors import CubError, ErrorMessage


class TokenType(IntEnum):
    """What a line of a scene file holds."""

    TEXTURE = 1
    SEPARATOR = 2
    MAP = 3


@dataclass(frozen=True)
class Token:
    """One line of a scene file: the raw line, its trimmed text and its kind."""

    line: str
    text: str
    kind: TokenType


def _classify(line: str) -> Token:
    text = line.strip(SEP)
    if not text:
        kind = TokenType.SEPARATOR
    elif all(char in ALL_CHARACTERS for char in line):
        kind = TokenType.MAP
    else:
        kind = TokenType.TEXTURE
    return Token(line=line, text=text, kind=kind)


def read_lines(stream: Iterable[str]) -> list[Token]:
    """Read every line of ``stream`` into a token; an empty stream is an error."""
    tokens = [_classify(raw[:-1] if raw.endswith("\n") else raw) for raw in stream]
    if not tokens:
        raise CubError(ErrorMessage.FILE_EMPTY)
    return tokens


def count_tokens(tokens: Iterable[Token], kind: TokenType) -> int:
    """Number of tokens of the given kind."""
    return sum(1 for token in tokens if token.kind == kind)


def find_token(tokens: Iterable[Token], kind: TokenType) -> Token | None:
    """The first token of the given kind, or None."""
    return next((token for token in tokens if token.kind == kind), None)


def map_lines(tokens: Iterable[Token]) -> list[str]:
    """Raw lines of the first contiguous block of map tokens."""
    rest = dropwhile(lambda token: token.kind != TokenType.MAP, tokens)
    lines = [token.line for token in takewhile(lambda t: t.kind == TokenType.MAP, rest)]
    if not lines:
        raise CubError(ErrorMessage.NO_MAP)
    return lines


def _check_textures_before_map(tokens: list[Token]) -> None:
    seen = 0
    for token in tokens:
        if token.kind == TokenType.TEXTURE:
            seen += 1
        elif token.kind == TokenType.MAP:
            if seen != ALL_TEXTURE:
                raise CubError(ErrorMessage.TEXTURE_BEFORE_MAP)
            return


def _check_map_is_single(tokens: list[Token]) -> None:
    rest = dropwhile(lambda token: token.kind != TokenType.MAP, tokens)
    after = dropwhile(lambda token: token.kind == TokenType.MAP, rest)
    if any(token.kind == TokenType.MAP for token in after):
        raise CubError(ErrorMessage.MAP_IS_SINGLE)


def validate_tokens(tokens: Iterable[Token]) -> None:
    """Check the overall layout: six settings, then one map of at least three rows."""
    tokens = list(tokens)
    if count_tokens(tokens, TokenType.TEXTURE) != ALL_TEXTURE:
        raise CubError(ErrorMessage.AMOUNT_TEXTURE)
    if count_tokens(tokens, TokenType.MAP) < 3:
        raise CubError(ErrorMessage.MIN_MAP)
    _check_textures_before_map(tokens)
    _check_map_is_single(tokens)