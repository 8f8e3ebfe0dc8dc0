import pytest
from chromavalue.colors import OpaqueRgbColor, AlphaRgbColor, rgb, rgba
from chromavalue.errors import ColorSyntaxError
from chromavalue.parser import parse_hash

def test_short_forms():
    assert parse_hash("#123") == rgb(0x11, 0x22, 0x33)
    color = parse_hash("#1234")
    assert isinstance(color, AlphaRgbColor)
    assert color == rgba(0x11, 0x22, 0x33, 0x44)

def test_long_forms():
    assert parse_hash("#123456") == rgb(0x12, 0x34, 0x56)
    assert parse_hash("#12345678") == rgba(0x12, 0x34, 0x56, 0x78)
    assert parse_hash("#aBcDeF") == rgb(0xAB, 0xCD, 0xEF)

def test_opaque_alpha_digits():
    assert isinstance(parse_hash("#123f"), OpaqueRgbColor)
    assert isinstance(parse_hash("#123456ff"), OpaqueRgbColor)

@pytest.mark.parametrize("text", ["#", "#1", "#12", "#12345", "#1234567", "#123456789"])
def test_bad_length(text):
    with pytest.raises(ColorSyntaxError):
        parse_hash(text)

def test_bad_digit_position():
    with pytest.raises(ColorSyntaxError) as info:
        parse_hash("#12g456")
    assert info.value.position == 3
