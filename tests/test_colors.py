import pytest
from svglayout.color import Color, Colors, hex, rgb


def test_color_init():
    c = Color(255, 128, 0)
    assert c.r == 255
    assert c.g == 128
    assert c.b == 0
    assert not c.transparent
    assert str(c) == "rgb(255,128,0)"


def test_transparent():
    assert str(Colors.Transparent) == "none"
    assert Color.none() == Colors.Transparent


def test_out_of_range_channels_are_kept():
    # No validation: values are written as given
    assert str(Color(300, -5, 0)) == "rgb(300,-5,0)"


def test_presets():
    assert Colors.Red == Color(255, 0, 0)
    assert Colors.Brown == Color(165, 42, 42)
    assert Colors.Green == Color(0, 128, 0)
    assert Colors.Silver == Color(192, 192, 192)
    assert Colors.Aqua == Colors.Cyan
    assert Colors.Fuchsia == Colors.Magenta


def test_colors_class():
    assert Colors.get("Red") == Colors.Red
    assert Colors.get("red") == Colors.Red
    assert Colors.get_name(Colors.Red) == "Red"
    assert Colors.get_name(Color(1, 2, 3)) is None

    with pytest.raises(ValueError):
        Colors.get("NonExistentColor")


def test_all_presets():
    all_colors = list(Colors.all())
    assert len(all_colors) == 16
    assert all(isinstance(c, Color) for c in all_colors)
    assert "Transparent" in Colors.names()


def test_hex():
    assert hex(Colors.Red) == "#ff0000"
    assert hex(Colors.Transparent) == "none"
    assert hex("#ff0000") == Colors.Red
    assert hex("ff0000") == Colors.Red
    assert hex("#f00") == Colors.Red

    with pytest.raises(ValueError):
        hex("#ff00")


def test_rgb():
    assert rgb(100, 200, 120) == Color(100, 200, 120)
