import pytest

from cubcaster.colornames import lookup_color
from cubcaster.xpm import (
    TRANSPARENT,
    XpmImage,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = (
    "/* XPM */\n"
    "static char *wall[] = {\n"
    "/* columns rows colors chars-per-pixel */\n"
    '"2 2 2 1",\n'
    '"x c red",\n'
    '". c blue",\n'
    '"x.",\n'
    '".x"\n'
    "};\n"
)


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_quoted_text():
    text = '"/*keep*/" /* drop */ x'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert stripped.startswith('"/*keep*/"')
    assert "drop" not in stripped
    assert stripped.endswith("x")


def test_strip_comments_line_comment_eats_newline():
    stripped = strip_comments('"a" // note\n"b"')
    assert "note" not in stripped
    assert "\n" not in stripped
    assert stripped.endswith('"b"')


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000") == 0xFF0000


def test_text_to_rgb_named_is_case_insensitive():
    assert text_to_rgb("Red") == lookup_color("red")


def test_text_to_rgb_joins_following_word():
    assert text_to_rgb("dark", "red") == lookup_color("dark red")


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour") == 0


def test_text_to_rgb_none_is_minus_one():
    assert text_to_rgb("None") == -1


def test_parse_lines_basic_and_transparent():
    image = parse_xpm_lines(["2 1 2 1", "a c #00FF00", "b c None", "ab"])
    assert (image.width, image.height) == (2, 1)
    assert image.pixel(0, 0) == 0x00FF00
    assert image.pixel(1, 0) == TRANSPARENT


def test_parse_text_with_comments():
    image = parse_xpm_text(SAMPLE)
    assert image.pixel(0, 0) == lookup_color("red")
    assert image.pixel(1, 0) == lookup_color("blue")
    assert image.pixel(0, 1) == lookup_color("blue")
    assert image.pixel(1, 1) == lookup_color("red")


def test_two_char_keys():
    image = parse_xpm_lines(["2 1 2 2", "aa c #000001", "bb c #000002", "bbaa"])
    assert image.pixels == (0x000002, 0x000001)


def test_narrow_keys_later_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixel(0, 0) == 0x000002


def test_wide_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixel(0, 0) == 0x000001


def test_unknown_pixel_key_is_zero():
    image = parse_xpm_lines(["1 1 1 3", "abc c #000001", "zzz"])
    assert image.pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1"],
        ["1 2 1 1", "a c red", "a"],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(ValueError):
        parse_xpm_lines(lines)


def test_pixel_out_of_range():
    image = XpmImage(1, 1, (5,))
    with pytest.raises(IndexError):
        image.pixel(1, 0)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")