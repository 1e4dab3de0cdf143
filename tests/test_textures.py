import io

import pytest

from raycube.colors import Rgb
from raycube.constants import DEFAULT_CEIL_COLOR, DEFAULT_FLOOR_COLOR, WallSide
from raycube.errors import CubError, ErrorMessage
from raycube.textures import (
    SceneSettings,
    Texture,
    load_texture,
    parse_textures,
    parse_wall_line,
    validate_texture_path,
)
from raycube.tokens import read_lines

WALLS = ["NO ./n.xpm", "SO ./s.xpm", "WE ./w.xpm", "EA ./e.xpm"]


def _tokens(lines):
    return read_lines(io.StringIO("".join(line + "\n" for line in lines)))


class _Loader:
    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)
        return Texture(1, 1, (len(self.paths),))


def _write_xpm(path, size):
    row = ("ab" * size)[:size]
    lines = [
        "/* XPM */",
        "static char *texture[] = {",
        f'"{size} {size} 2 1",',
        '"a c #FF0000",',
        '"b c #0000FF",',
    ]
    lines += [f'"{row}",' for _ in range(size)]
    lines.append("};")
    path.write_text("\n".join(lines) + "\n")
    return str(path)


def test_texture_pixel_is_row_major():
    texture = Texture(2, 2, (1, 2, 3, 4))
    assert texture.pixel(1, 0) == 2
    assert texture.pixel(0, 1) == 3


def test_texture_pixel_out_of_range():
    with pytest.raises(IndexError):
        Texture(2, 2, (1, 2, 3, 4)).pixel(2, 0)


def test_texture_size_mismatch():
    with pytest.raises(ValueError):
        Texture(2, 2, (1, 2, 3))


def test_parse_wall_line():
    assert parse_wall_line("NO ./a.xpm") == (WallSide.NO, "./a.xpm")
    assert parse_wall_line("EA\t\t./e.xpm") == (WallSide.EA, "./e.xpm")
    assert parse_wall_line("NO") == (WallSide.NO, "")


@pytest.mark.parametrize(
    "line, kind",
    [
        ("NO./a.xpm", ErrorMessage.SEPARATOR_TEXTURE),
        ("NN ./a.xpm", ErrorMessage.INVALID_TEXTURE),
        ("N ./a.xpm", ErrorMessage.INVALID_TEXTURE),
    ],
)
def test_parse_wall_line_errors(line, kind):
    with pytest.raises(CubError) as info:
        parse_wall_line(line)
    assert info.value.kind is kind


def test_validate_texture_path():
    assert validate_texture_path("a.xpm") == "a.xpm"


@pytest.mark.parametrize(
    "path, kind",
    [
        (".xpm", ErrorMessage.LEN_PATH_TEXTURE),
        ("", ErrorMessage.LEN_PATH_TEXTURE),
        ("./texture.png", ErrorMessage.EXTENSION_TEXTURE),
    ],
)
def test_validate_texture_path_errors(path, kind):
    with pytest.raises(CubError) as info:
        validate_texture_path(path)
    assert info.value.kind is kind


def test_load_texture_reads_xpm(tmp_path):
    texture = load_texture(_write_xpm(tmp_path / "wall.xpm", 64))
    assert (texture.width, texture.height) == (64, 64)
    assert texture.pixel(0, 0) == 0xFF0000
    assert texture.pixel(1, 0) == 0x0000FF
    assert texture.pixel(0, 63) == texture.pixel(0, 0)


def test_load_texture_wrong_size(tmp_path):
    with pytest.raises(CubError) as info:
        load_texture(_write_xpm(tmp_path / "small.xpm", 8))
    assert info.value.kind is ErrorMessage.OPEN_TEXTURE


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(CubError) as info:
        load_texture(str(tmp_path / "absent.xpm"))
    assert info.value.kind is ErrorMessage.OPEN_TEXTURE


def test_parse_textures_full_scene():
    loader = _Loader()
    settings = parse_textures(
        _tokens(WALLS + ["", "F 220,100,0", "C 225,30,0", "", "111"]), loader
    )
    assert loader.paths == ["./n.xpm", "./s.xpm", "./w.xpm", "./e.xpm"]
    assert set(settings.textures) == set(WallSide)
    assert settings.textures[WallSide.NO].pixel(0, 0) == 1
    assert settings.floor_color == Rgb(220, 100, 0).packed()
    assert settings.ceil_color == Rgb(225, 30, 0).packed()
    assert settings.count == 6


def test_parse_textures_default_colors():
    settings = parse_textures(_tokens(WALLS), _Loader())
    assert settings == SceneSettings(
        textures=settings.textures,
        ceil_color=DEFAULT_CEIL_COLOR,
        floor_color=DEFAULT_FLOOR_COLOR,
        count=4,
    )


def test_parse_textures_duplicate():
    with pytest.raises(CubError) as info:
        parse_textures(_tokens(WALLS[:3] + ["NO ./x.xpm"]), _Loader())
    assert info.value.kind is ErrorMessage.DUPLICATE_TEXTURE


def test_parse_textures_missing_wall():
    with pytest.raises(CubError) as info:
        parse_textures(_tokens(WALLS[:3] + ["C 1,2,3", "F 1,2,3"]), _Loader())
    assert info.value.kind is ErrorMessage.AMOUNT_TEXTURE


def test_parse_textures_stops_after_six():
    loader = _Loader()
    lines = WALLS + ["C 1,2,3", "F 4,5,6", "NO ./again.xpm"]
    settings = parse_textures(_tokens(lines), loader)
    assert len(loader.paths) == len(WALLS)
    assert "./again.xpm" not in loader.paths
    assert settings.count == 6


def test_parse_textures_bad_extension():
    with pytest.raises(CubError) as info:
        parse_textures(_tokens(["NO ./n.png"] + WALLS[1:]), _Loader())
    assert info.value.kind is ErrorMessage.EXTENSION_TEXTURE