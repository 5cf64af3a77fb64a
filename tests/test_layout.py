import pytest

from cubcaster.errors import CubError, ErrorKind
from cubcaster.layout import (
    MapLayout,
    build_layout,
    check_enclosed,
    check_walls,
    count_rows,
    find_player,
    has_content,
    is_map_line,
    map_width,
    process_row,
)

ROOM = ["111111", "100N01", "111111"]


def test_has_content_reads_even_positions():
    assert has_content("1") is True
    assert has_content(" 1") is False
    assert has_content("  1") is True
    assert has_content(" \t ") is False
    assert has_content(None) is False


@pytest.mark.parametrize(
    "line, expected",
    [
        ("111", True),
        ("NO ./a.xpm", False),
        ("SO ./a.xpm", False),
        ("WE ./a.xpm", False),
        ("EA ./a.xpm", False),
        ("F 1,2,3", False),
        ("C 1,2,3", False),
        ("   ", False),
    ],
)
def test_is_map_line(line, expected):
    assert is_map_line(line) is expected


def test_map_width_ignores_header_and_uses_longest_line():
    assert map_width([]) == -1
    assert map_width(["111", "11111"]) == map_width(["11111"])
    assert map_width(["NO ./long/path.xpm", "111"]) == map_width(["111"])


def test_count_rows_counts_only_map_lines():
    assert count_rows(["NO a", "111", "   ", "F 1,2,3", "11"]) == 2
    assert count_rows(ROOM) == len(ROOM)


def test_edge_rows_turn_whitespace_into_walls():
    result = process_row(" 1 1", 0, 3, 6)
    assert set(result) == {"1"}
    assert len(result) == len(process_row("111111", 0, 3, 6))
    assert set(process_row("1 1", 2, 3, 3)) == {"1"}


def test_middle_row_spaces_and_other_whitespace():
    result = process_row("1 \t01", 1, 3, 5)
    assert result[1] == "1"
    assert result[2] == "0"
    assert result.endswith("1")


def test_middle_row_is_padded_with_floor():
    result = process_row("1N1", 1, 3, 5)
    assert result.startswith("1N1")
    assert set(result[len("1N1"):-1]) == {"0"}
    assert result[-1] == "1"


def test_middle_row_first_character_becomes_wall():
    assert process_row("N01", 1, 3, 3)[0] == "1"


def test_find_player_position():
    rows = ["111", "1N1", "111"]
    x, y = find_player(rows)
    assert rows[y][x] == "N"
    assert find_player(["111", "101"]) is None


def test_find_player_rejects_two_players():
    with pytest.raises(CubError) as info:
        find_player(["11111", "1NS01", "11111"])
    assert info.value.kind is ErrorKind.PLAYER_POSITION


@pytest.mark.parametrize(
    "rows",
    [["101", "111", "111"], ["111", "011", "111"], ["111", "111", "101"]],
)
def test_check_walls_rejects_open_edges(rows):
    with pytest.raises(CubError) as info:
        check_walls(rows, len(rows))
    assert info.value.kind is ErrorKind.NOT_ENCLOSED


def test_check_enclosed_detects_leak():
    rows = ["11111", "1N001", "11111"]
    with pytest.raises(CubError) as info:
        check_enclosed(rows, 1, 1, 3, 3)
    assert info.value.kind is ErrorKind.NOT_ENCLOSED


def test_check_enclosed_rejects_player_on_edge():
    rows = ["1111", "N011", "1111"]
    with pytest.raises(CubError) as info:
        check_enclosed(rows, 0, 1, 3, 3)
    assert info.value.kind is ErrorKind.NOT_ENCLOSED


def test_build_layout_room():
    layout = build_layout(ROOM)
    assert isinstance(layout, MapLayout)
    assert layout.rows[1] == "100N011"
    assert layout.rows[layout.player_y][layout.player_x] == "N"
    assert layout.player_facing == "N"
    assert layout.width == map_width(ROOM)
    assert layout.height == count_rows(ROOM)


def test_build_layout_keeps_rows_unflooded():
    layout = build_layout(ROOM)
    assert "F" not in "".join(layout.rows)


def test_build_layout_skips_header_lines():
    assert build_layout(["NO ./a.xpm", "F 1,2,3"] + ROOM) == build_layout(ROOM)


def test_build_layout_short_middle_row():
    layout = build_layout(["11111", "1N1", "11111"])
    assert layout.rows[1].startswith("1N1")
    assert layout.player_facing == "N"


@pytest.mark.parametrize("trailer", ["C 1,2,3", "   "])
def test_build_layout_map_must_be_last(trailer):
    with pytest.raises(CubError) as info:
        build_layout(ROOM + [trailer])
    assert info.value.kind is ErrorKind.MAP_NOT_LAST


def test_build_layout_invalid_letter():
    with pytest.raises(CubError) as info:
        build_layout(["11111", "1N2X1", "11111"])
    assert info.value.kind is ErrorKind.INVALID_LETTER


def test_build_layout_two_players():
    with pytest.raises(CubError) as info:
        build_layout(["11111", "1NS01", "11111"])
    assert info.value.kind is ErrorKind.PLAYER_POSITION


@pytest.mark.parametrize(
    "lines",
    [
        ["111", "101", "111"],
        ["1111", "1N00", "1111"],
        ["1101", "1N01", "1111"],
        [],
    ],
)
def test_build_layout_not_enclosed(lines):
    with pytest.raises(CubError) as info:
        build_layout(lines)
    assert info.value.kind is ErrorKind.NOT_ENCLOSED