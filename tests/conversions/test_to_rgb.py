from ..samples import samples_rgb_hsl, samples_rgb_hsv
from chromavalue.conversions import (
    hsl_to_rgb,
    hsv_to_rgb,
    np_hsl_to_rgb,
    np_hsv_to_rgb,
    hue_to_rgb,
    round_half_up,
    unit_to_byte,
)
import numpy as np

def test_hsl_to_rgb():
    for rgb, hsl in samples_rgb_hsl.items():
        assert hsl_to_rgb(*hsl) == rgb, f"{hsl} -> {hsl_to_rgb(*hsl)} != {rgb}"

def test_hsv_to_rgb():
    for rgb, hsv in samples_rgb_hsv.items():
        assert hsv_to_rgb(*hsv) == rgb, f"{hsv} -> {hsv_to_rgb(*hsv)} != {rgb}"

def test_hsl_gray_ignores_hue():
    assert hsl_to_rgb(123.0, 0.0, 0.5) == (128, 128, 128)

def test_hue_to_rgb_branches():
    p, q = 0.2, 0.8
    assert abs(hue_to_rgb(p, q, 0.1) - (p + (q - p) * 6 * 0.1)) < 1e-12
    assert hue_to_rgb(p, q, 0.3) == q
    assert abs(hue_to_rgb(p, q, 0.6) - (p + (q - p) * (2 / 3 - 0.6) * 6)) < 1e-12
    assert hue_to_rgb(p, q, 0.9) == p
    assert hue_to_rgb(p, q, -0.7) == hue_to_rgb(p, q, 0.3)
    assert hue_to_rgb(p, q, 1.3) == hue_to_rgb(p, q, 0.3)

def test_np_hsl_to_rgb_matches_scalar():
    hsl = np.array(list(samples_rgb_hsl.values()))
    expected = np.array(list(samples_rgb_hsl.keys()))
    assert np.array_equal(np_hsl_to_rgb(hsl), expected)

def test_np_hsv_to_rgb_matches_scalar():
    hsv = np.array(list(samples_rgb_hsv.values()))
    expected = np.array(list(samples_rgb_hsv.keys()))
    assert np.array_equal(np_hsv_to_rgb(hsv), expected)

def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(-1.5) == -1

def test_unit_to_byte():
    assert unit_to_byte(0.0) == 0
    assert unit_to_byte(1.0) == 255
    assert unit_to_byte(0.5) == 128
    assert unit_to_byte(1.5) == 255
    assert unit_to_byte(-0.5) == 0
