import pytest

from cubcaster.colornames import COLOR_NAMES, lookup_color


def test_basic_names():
    assert lookup_color("snow") == 0xFFFAFA
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("black") == 0x0


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW"])
def test_case_insensitive(name):
    assert lookup_color(name) == lookup_color("snow")


def test_spaced_and_joined_names_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("navy blue") == lookup_color("navyblue")
    assert lookup_color("light gray") == lookup_color("lightgrey")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_numbered_variants():
    assert lookup_color("gray50") == 0x7F7F7F
    assert lookup_color("grey50") == lookup_color("gray50")
    assert lookup_color("gray100") == lookup_color("white")
    assert lookup_color("gray0") == lookup_color("black")


@pytest.mark.parametrize("name", ["", "nosuchcolour", " snow", "snow ", "#ff0000"])
def test_unknown_names_raise(name):
    with pytest.raises(KeyError):
        lookup_color(name)


def test_index_keys_are_lowercase_and_values_in_range():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert -1 <= value <= 0xFFFFFF


def test_index_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["snow"] = 0  # type: ignore[index]
    assert lookup_color("snow") == 0xFFFAFA