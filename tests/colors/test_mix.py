import pytest
from chromavalue.colors import rgb, rgba, hsl, OpaqueRgbColor, BLACK, WHITE
from chromavalue.colors.mixing import check_amount, is_mix_small, is_mix_large, mix_channel
from chromavalue.components import RedComponent, AlphaRgbComponent, HueHslComponent
from chromavalue.errors import MixAmountError

def test_check_amount():
    assert check_amount(0.0) == 0.0
    assert check_amount(1) == 1
    for amount in (-0.01, 1.01, float("nan")):
        with pytest.raises(MixAmountError):
            check_amount(amount)

def test_thresholds():
    assert is_mix_small(0.0)
    assert is_mix_small(1 / 512)
    assert not is_mix_small(2 / 512)
    assert is_mix_large(1.0)
    assert is_mix_large(1 - 1 / 512)
    assert not is_mix_large(1 - 2 / 512)

def test_mix_channel():
    assert mix_channel(0, 255, 0.5) == 128
    assert mix_channel(255, 0, 0.5) == 128
    assert mix_channel(10, 10, 0.5) == 10
    assert mix_channel(0, 100, 0.25) == 25

def test_mix_colors_half():
    result = rgba(0, 0, 0, 0).mix(rgba(255, 255, 255, 255), 0.5)
    assert str(result) == "#80808080"

def test_mix_amount_ends():
    color = rgb(10, 20, 30)
    other = rgba(200, 100, 50, 25)
    assert color.mix(other, 0.0) is color
    assert color.mix(other, 1 / 1024) is color
    assert color.mix(other, 1.0) == other
    assert color.mix(other, 1 - 1 / 1024) == other

def test_mix_same_color():
    color = rgba(10, 20, 30, 40)
    for amount in (0.1, 0.25, 0.5, 0.9):
        assert color.mix(color, amount) == color

def test_mix_other_space():
    red = hsl(0, 1, 0.5)
    assert BLACK.mix(red, 1.0) == rgb(255, 0, 0)
    assert BLACK.mix(red, 0.5) == rgb(128, 0, 0)

def test_mix_alpha_participates():
    result = rgb(0, 0, 0).mix(rgba(0, 0, 0, 0), 0.5)
    assert result.alpha.value == 128

def test_mix_result_demotes_to_opaque():
    assert isinstance(BLACK.mix(WHITE, 0.5), OpaqueRgbColor)

def test_mix_component():
    color = rgb(0, 10, 20)
    assert color.mix(RedComponent.with_value(255), 0.5) == rgb(128, 10, 20)
    assert color.mix(RedComponent.with_value(255), 1.0) == rgb(255, 10, 20)
    assert color.mix(RedComponent.with_value(255), 0.0) is color
    assert color.mix(AlphaRgbComponent.with_value(0), 0.5) == rgba(0, 10, 20, 128)

def test_mix_invalid_amount():
    with pytest.raises(MixAmountError):
        BLACK.mix(WHITE, 1.5)
    with pytest.raises(MixAmountError):
        BLACK.mix(RedComponent.with_value(1), -0.5)

def test_mix_foreign_component():
    with pytest.raises(TypeError):
        BLACK.mix(HueHslComponent.with_value(10), 0.5)
