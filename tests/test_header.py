import pytest

from cubcaster.errors import CubError, ErrorKind
from cubcaster.header import (
    Colors,
    Textures,
    check_xpm_path,
    combine_rgb,
    is_blank,
    is_space,
    parse_colors,
    parse_textures,
)


@pytest.fixture
def texture_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "textures"
    folder.mkdir()
    for name in ("n", "s", "w", "e"):
        (folder / f"{name}.xpm").write_text("/* XPM */\n")
    return tmp_path


VALID_TEXTURE_LINES = [
    "NO ./textures/n.xpm",
    "SO ./textures/s.xpm",
    "WE ./textures/w.xpm",
    "EA ./textures/e.xpm",
]


def _kind(excinfo):
    return excinfo.value.kind


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "1", "N", ","])
def test_is_space_rejects_other(c):
    assert is_space(c) is False


def test_is_blank():
    assert is_blank(None) is True
    assert is_blank("") is True
    assert is_blank(" \t \r") is True
    assert is_blank("  1 ") is False


def test_combine_rgb_white():
    assert combine_rgb(255, 255, 255) == 0xFFFFFF


@pytest.mark.parametrize("rgb", [(220, 100, 0), (0, 0, 0), (1, 2, 3), (255, 0, 128)])
def test_combine_rgb_unpacks(rgb):
    r, g, b = rgb
    value = combine_rgb(r, g, b)
    assert (value >> 16) & 0xFF == r
    assert (value >> 8) & 0xFF == g
    assert value & 0xFF == b


def test_parse_colors_floor_first():
    colors = parse_colors(["F 220,100,0", "C 225,30,0"])
    assert colors == Colors(floor=combine_rgb(220, 100, 0), ceiling=combine_rgb(225, 30, 0))


def test_parse_colors_ignores_other_lines():
    lines = ["NO ./a.xpm", "F 10,20,30", "", "C 40,50,60", "111", "1N1"]
    colors = parse_colors(lines)
    assert colors.floor == combine_rgb(10, 20, 30)
    assert colors.ceiling == combine_rgb(40, 50, 60)


def test_parse_colors_ceiling_first_keeps_first_slot_as_floor():
    colors = parse_colors(["C 225,30,0", "F 220,100,0"])
    assert colors.floor == combine_rgb(225, 30, 0)
    assert colors.ceiling == combine_rgb(220, 100, 0)


def test_parse_colors_missing_ceiling():
    with pytest.raises(CubError) as excinfo:
        parse_colors(["F 220,100,0"])
    assert _kind(excinfo) is ErrorKind.MISSING_COLOR


def test_parse_colors_no_lines():
    with pytest.raises(CubError) as excinfo:
        parse_colors([])
    assert _kind(excinfo) is ErrorKind.MISSING_COLOR


def test_parse_colors_out_of_range():
    with pytest.raises(CubError) as excinfo:
        parse_colors(["F 256,100,0", "C 225,30,0"])
    assert _kind(excinfo) is ErrorKind.MISSING_COLOR


def test_parse_colors_negative():
    with pytest.raises(CubError) as excinfo:
        parse_colors(["F 220,-1,0", "C 225,30,0"])
    assert _kind(excinfo) is ErrorKind.MISSING_COLOR


def test_parse_colors_missing_component():
    with pytest.raises(CubError) as excinfo:
        parse_colors(["F 220,100", "C 225,30,0"])
    assert _kind(excinfo) is ErrorKind.MISSING_COLOR


def test_parse_colors_too_many_components():
    with pytest.raises(CubError) as excinfo:
        parse_colors(["F 220,100,0,5", "C 225,30,0"])
    assert _kind(excinfo) is ErrorKind.INVALID_COLOR


def test_check_xpm_path_accepts_file(texture_dir):
    assert check_xpm_path("./textures/n.xpm") == "./textures/n.xpm"


def test_check_xpm_path_directory(texture_dir):
    (texture_dir / "dir.xpm").mkdir()
    with pytest.raises(CubError) as excinfo:
        check_xpm_path("./dir.xpm")
    assert _kind(excinfo) is ErrorKind.DIRECTORY


@pytest.mark.parametrize("path", ["abc", "./textures/n.png", "./textures/missing.xpm"])
def test_check_xpm_path_invalid(texture_dir, path):
    (texture_dir / "textures" / "n.png").write_text("x")
    with pytest.raises(CubError) as excinfo:
        check_xpm_path(path)
    assert _kind(excinfo) is ErrorKind.INVALID_TEXTURE


def test_parse_textures_valid(texture_dir):
    textures = parse_textures(VALID_TEXTURE_LINES + ["F 1,2,3", "111"])
    assert textures == Textures(
        north="NO ./textures/n.xpm",
        south="SO ./textures/s.xpm",
        west="WE ./textures/w.xpm",
        east="EA ./textures/e.xpm",
    )


def test_parse_textures_order_does_not_matter(texture_dir):
    textures = parse_textures(list(reversed(VALID_TEXTURE_LINES)))
    assert textures.north == "NO ./textures/n.xpm"
    assert textures.east == "EA ./textures/e.xpm"


def test_parse_textures_missing(texture_dir):
    with pytest.raises(CubError) as excinfo:
        parse_textures(VALID_TEXTURE_LINES[:3])
    assert _kind(excinfo) is ErrorKind.MISSING_TEXTURE


def test_parse_textures_duplicate(texture_dir):
    with pytest.raises(CubError) as excinfo:
        parse_textures(VALID_TEXTURE_LINES + ["NO ./textures/n.xpm"])
    assert _kind(excinfo) is ErrorKind.INVALID_TEXTURE


def test_parse_textures_key_inside_path_counts_twice(texture_dir):
    (texture_dir / "textures" / "NO.xpm").write_text("x")
    lines = ["NO ./textures/NO.xpm"] + VALID_TEXTURE_LINES[1:]
    with pytest.raises(CubError) as excinfo:
        parse_textures(lines)
    assert _kind(excinfo) is ErrorKind.INVALID_TEXTURE


def test_parse_textures_missing_file(texture_dir):
    lines = ["NO ./textures/absent.xpm"] + VALID_TEXTURE_LINES[1:]
    with pytest.raises(CubError) as excinfo:
        parse_textures(lines)
    assert _kind(excinfo) is ErrorKind.INVALID_TEXTURE


def test_parse_textures_without_dot(texture_dir):
    lines = ["NO textures"] + VALID_TEXTURE_LINES[1:]
    with pytest.raises(CubError) as excinfo:
        parse_textures(lines)
    assert _kind(excinfo) is ErrorKind.INVALID_TEXTURE


def test_parse_textures_directory(texture_dir):
    (texture_dir / "dir.xpm").mkdir()
    lines = ["NO ./dir.xpm"] + VALID_TEXTURE_LINES[1:]
    with pytest.raises(CubError) as excinfo:
        parse_textures(lines)
    assert _kind(excinfo) is ErrorKind.DIRECTORY