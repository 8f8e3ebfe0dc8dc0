from ..samples import samples_rgb_hsv
from chromavalue.conversions import rgb_to_hsv, np_rgb_to_hsv
import numpy as np

hsv_tolerance = 1e-9

def test_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_hsv(r, g, b)
        assert abs(h - h_exp) < hsv_tolerance, f"{(r, g, b)}: hue {h} != {h_exp}"
        assert abs(s - s_exp) < hsv_tolerance
        assert abs(v - v_exp) < hsv_tolerance

def test_rgb_to_hsv_hue_in_range():
    for r in range(0, 256, 17):
        for g in range(0, 256, 17):
            for b in range(0, 256, 17):
                h, s, v = rgb_to_hsv(r, g, b)
                assert 0.0 <= h < 360.0
                assert 0.0 <= s <= 1.0
                assert 0.0 <= v <= 1.0

def test_np_rgb_to_hsv_matches_scalar():
    rgb = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array([rgb_to_hsv(*color) for color in samples_rgb_hsv])
    assert np.allclose(np_rgb_to_hsv(rgb), expected)
