"""color_utils 변환 함수 테스트"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from color_utils import (
    InvalidFormatError,
    check_rgb,
    cmyk_to_rgb,
    hex_to_lab,
    hex_to_rgb,
    lab_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    validate_hex,
    warmth,
)


@pytest.mark.parametrize("value", ["#FF0000", "FF0000", "#ff0000", "ff0000"])
def test_hex_to_rgb_accepts_optional_hash_and_any_case(value):
    assert hex_to_rgb(value) == (255, 0, 0)


@pytest.mark.parametrize(
    "value",
    ["#FF00", "#GG0000", "#FF00001", "", "rgb(1,2,3)", None, " #FF0000", "#FF0000\n", "\tff0000 "],
)
def test_hex_to_rgb_rejects_malformed(value):
    with pytest.raises(InvalidFormatError):
        hex_to_rgb(value)


def test_red_to_lab_matches_reference_values():
    L, a, b = rgb_to_lab(*hex_to_rgb("#FF0000"))
    assert L == pytest.approx(53.24, abs=0.5)
    assert a == pytest.approx(80.09, abs=0.5)
    assert b == pytest.approx(67.20, abs=0.5)


def test_white_and_black_lab():
    assert rgb_to_lab(255, 255, 255) == pytest.approx((100.0, 0.0, 0.0), abs=0.05)
    assert rgb_to_lab(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


@pytest.mark.parametrize("channels", [(256, 0, 0), (-1, 0, 0), (0, 0, 1.5), (True, 0, 0)])
def test_rgb_to_lab_rejects_out_of_range(channels):
    with pytest.raises(InvalidFormatError):
        rgb_to_lab(*channels)


def test_rgb_to_lab_is_deterministic():
    assert rgb_to_lab(12, 200, 99) == rgb_to_lab(12, 200, 99)
    assert rgb_to_lab(np.int64(12), 200, 99) == rgb_to_lab(12, 200, 99)


@pytest.mark.parametrize(
    "rgb",
    [(255, 0, 0), (0, 255, 255), (255, 215, 0), (18, 52, 86), (224, 172, 150), (1, 2, 3), (250, 250, 245)],
)
def test_lab_round_trip_within_two_levels(rgb):
    back = lab_to_rgb(*rgb_to_lab(*rgb))
    for original, restored in zip(rgb, back):
        assert abs(original - restored) <= 2


def test_lab_round_trip_random_sample():
    rng = np.random.default_rng(7)
    for r, g, b in rng.integers(0, 256, size=(40, 3)):
        back = lab_to_rgb(*rgb_to_lab(int(r), int(g), int(b)))
        assert max(abs(int(x) - y) for x, y in zip((r, g, b), back)) <= 2


@pytest.mark.parametrize(
    "rgb, hue",
    [((255, 0, 0), 0.0), ((0, 255, 0), 120.0), ((0, 0, 255), 240.0), ((0, 255, 255), 180.0)],
)
def test_rgb_to_hsl_hue_angles(rgb, hue):
    assert rgb_to_hsl(*rgb).h == pytest.approx(hue)


def test_rgb_to_hsl_gray_has_no_saturation():
    h, s, l = rgb_to_hsl(128, 128, 128)
    assert s == 0.0
    assert l == pytest.approx(128 / 255)


def test_cmyk_conversions():
    assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)
    assert rgb_to_cmyk(255, 0, 0) == (0, 100, 100, 0)
    assert cmyk_to_rgb(0, 100, 100, 0) == (255, 0, 0)
    with pytest.raises(InvalidFormatError):
        cmyk_to_rgb(0, 0, 120, 0)


def test_rgb_to_hex_rejects_out_of_range():
    assert rgb_to_hex(255, 107, 92) == "#FF6B5C"
    with pytest.raises(InvalidFormatError):
        rgb_to_hex(300, 0, 0)


@pytest.mark.parametrize(
    "rgb, expected",
    [((255, 0, 0), "warm"), ((0, 255, 255), "cool"), ((0, 255, 0), "cool"), ((128, 255, 0), "neutral")],
)
def test_warmth(rgb, expected):
    assert warmth(*rgb) == expected


def test_hex_to_lab_matches_rgb_path():
    assert hex_to_lab("ff0000") == rgb_to_lab(255, 0, 0)
    with pytest.raises(InvalidFormatError):
        hex_to_lab("#GG0000")


@pytest.mark.parametrize(
    "value, expected",
    [("#FFAA00", True), ("ffaa00", True), (" ffaa00 ", False), ("#FFAA00\n", False), ("#FFA", False), ("", False)],
)
def test_validate_hex(value, expected):
    assert validate_hex(value) is expected


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (1.5, 2, 3), (True, 0, 0), ("255", 0, 0)])
def test_check_rgb_rejects_bad_channels(channels):
    with pytest.raises(InvalidFormatError):
        check_rgb(*channels)


def test_check_rgb_accepts_numpy_integers():
    check_rgb(np.uint8(255), np.int64(0), 128)
