from ..samples import samples_rgb_hsl
from chromavalue.conversions import rgb_to_hsl, np_rgb_to_hsl
import numpy as np

hsl_tolerance = 1e-9

def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl(r, g, b)
        assert abs(h - h_exp) < hsl_tolerance, f"{(r, g, b)}: hue {h} != {h_exp}"
        assert abs(s - s_exp) < hsl_tolerance
        assert abs(l - l_exp) < hsl_tolerance

def test_rgb_to_hsl_red_branch_wraps_blue_above_green():
    h, s, l = rgb_to_hsl(255, 0, 128)
    assert 329 < h < 331
    assert s == 1.0

def test_np_rgb_to_hsl_matches_scalar():
    rgb = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array([rgb_to_hsl(*color) for color in samples_rgb_hsl])
    result = np_rgb_to_hsl(rgb)
    assert result.shape == (len(samples_rgb_hsl), 3)
    assert np.allclose(result, expected)

def test_np_rgb_to_hsl_keeps_leading_shape():
    rgb = np.zeros((2, 4, 3), dtype=np.uint8)
    rgb[..., 0] = 255
    result = np_rgb_to_hsl(rgb)
    assert result.shape == (2, 4, 3)
    assert np.allclose(result[..., 0], 0.0)
    assert np.allclose(result[..., 1], 1.0)
    assert np.allclose(result[..., 2], 0.5)
