import pytest
from ..samples import samples_text_rgba
from chromavalue import parse, parse_rgb, parse_hsl, parse_hsv, from_rgb, rgb, hsl, hsv
from chromavalue.errors import ColorSyntaxError, UnknownColorNameError, UnknownFunctionError

def test_parse_samples():
    for text, (r, g, b, a) in samples_text_rgba.items():
        color = parse(text)
        assert (color.red.value, color.green.value, color.blue.value, color.alpha.value) == (r, g, b, a), text

def test_scenarios():
    assert parse("rgb(1,2,3)").to_css() == "#010203"
    assert parse("rgba(1,2,3,127)").alpha.value == 127
    assert str(parse("hsl(359,100%,50%)")) == "hsl(359,100%,50%)"
    assert str(parse("#00000000").mix(parse("#ffffffff"), 0.5)) == "#80808080"
    with pytest.raises(ColorSyntaxError):
        parse("rgb(1")

def test_hash_round_trip():
    for value in range(0, 0x1000000, 0x0F0F0F):
        color = from_rgb(value)
        assert parse(str(color)) == color

def test_parse_other_spaces():
    assert parse("hsl(10,50%,50%)") == hsl(10, 0.5, 0.5)
    assert parse("hsv(10,50%,50%)") == hsv(10, 0.5, 0.5)

def test_parse_rgb():
    assert parse_rgb("#010203") == rgb(1, 2, 3)
    assert parse_rgb("rgb(1,2,3)") == rgb(1, 2, 3)
    assert parse_rgb("white") == rgb(255, 255, 255)
    with pytest.raises(UnknownFunctionError):
        parse_rgb("rgbx(1,2,3)")

def test_parse_hsl_and_hsv():
    assert parse_hsl("hsla(1, 10%, 20%, 30%)").alpha.value == 0.3
    assert parse_hsv("hsv(1 0.1 0.2)") == hsv(1, 0.1, 0.2)
    with pytest.raises(UnknownFunctionError):
        parse_hsl("hsv(1,0.1,0.2)")
    with pytest.raises(UnknownFunctionError):
        parse_hsv("rgb(1,2,3)")

def test_errors():
    with pytest.raises(ValueError):
        parse("")
    with pytest.raises(UnknownColorNameError):
        parse("notacolor")
    with pytest.raises(ColorSyntaxError) as info:
        parse("123")
    assert info.value.position == 0
    with pytest.raises(ColorSyntaxError):
        parse("#12")
