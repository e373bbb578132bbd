"""색공간 변환 유틸 (RGB/HEX/CMYK/HSL ↔ CIE L*a*b*)"""
from __future__ import annotations

import colorsys
import re
from functools import lru_cache
from typing import NamedTuple

import numpy as np
from skimage import color as skcolor

HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")

# sRGB(D65) → XYZ, 4자리 계수 그대로 유지 (점수 임계값이 이 값 기준)
SRGB_TO_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ]
)
D65_WHITE = np.array([0.95047, 1.0, 1.08883])

LAB_CACHE_SIZE = 1024


class InvalidFormatError(ValueError):
    pass


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class Lab(NamedTuple):
    L: float
    a: float
    b: float


class HSL(NamedTuple):
    h: float
    s: float
    l: float


class CMYK(NamedTuple):
    c: int
    m: int
    y: int
    k: int


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def check_rgb(r, g, b) -> None:
    for channel in (r, g, b):
        if isinstance(channel, bool) or not isinstance(channel, (int, np.integer)):
            raise InvalidFormatError(f"RGB 채널은 정수여야 해: {channel!r}")
        if not 0 <= channel <= 255:
            raise InvalidFormatError(f"RGB 범위는 0~255야: {channel!r}")


def validate_hex(s: str) -> bool:
    return isinstance(s, str) and HEX_RE.fullmatch(s) is not None


def hex_to_rgb(s: str) -> RGB:
    # 앞뒤 공백이나 끝의 개행도 허용하지 않는다
    m = HEX_RE.fullmatch(s) if isinstance(s, str) else None
    if not m:
        raise InvalidFormatError(f"올바른 HEX 형식이 아니야: {s!r} (예: #FF6B5C)")
    val = m.group(1)
    return RGB(int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    check_rgb(r, g, b)
    return f"#{r:02X}{g:02X}{b:02X}"


@lru_cache(maxsize=LAB_CACHE_SIZE)
def _rgb_to_lab_cached(r: int, g: int, b: int) -> Lab:
    arr = np.array([r, g, b], dtype=float) / 255.0
    linear = np.where(arr > 0.04045, ((arr + 0.055) / 1.055) ** 2.4, arr / 12.92)
    xyz = SRGB_TO_XYZ @ linear / D65_WHITE
    fx, fy, fz = np.where(xyz > 0.008856, np.cbrt(xyz), 7.787 * xyz + 16.0 / 116.0)
    return Lab(float(116.0 * fy - 16.0), float(500.0 * (fx - fy)), float(200.0 * (fy - fz)))


def rgb_to_lab(r: int, g: int, b: int) -> Lab:
    """sRGB → 선형 → XYZ(D65) → L*a*b*."""
    check_rgb(r, g, b)
    return _rgb_to_lab_cached(int(r), int(g), int(b))


def hex_to_lab(s: str) -> Lab:
    return rgb_to_lab(*hex_to_rgb(s))


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    """CIE 표준 역변환 (D65). 색역 밖 값은 0~255로 자른다."""
    lab = np.array([L, a, b], dtype=np.float64).reshape(1, 1, 3)
    rgb = skcolor.lab2rgb(lab, illuminant="D65").reshape(3)
    clipped = np.clip(np.round(rgb * 255.0), 0, 255).astype(int)
    return RGB(int(clipped[0]), int(clipped[1]), int(clipped[2]))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    check_rgb(r, g, b)
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return HSL(h * 360.0, s, l)


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    check_rgb(r, g, b)
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    k = 1.0 - max(rn, gn, bn)
    if k == 1.0:
        return CMYK(0, 0, 0, 100)
    c = (1.0 - rn - k) / (1.0 - k)
    m = (1.0 - gn - k) / (1.0 - k)
    y = (1.0 - bn - k) / (1.0 - k)
    return CMYK(round(c * 100), round(m * 100), round(y * 100), round(k * 100))


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGB:
    for value in (c, m, y, k):
        if not 0 <= value <= 100:
            raise InvalidFormatError(f"CMYK 범위는 0~100이야: {value!r}")
    black = 1.0 - k / 100.0
    return RGB(
        round(255 * (1.0 - c / 100.0) * black),
        round(255 * (1.0 - m / 100.0) * black),
        round(255 * (1.0 - y / 100.0) * black),
    )


def warmth(r: int, g: int, b: int) -> str:
    """색상환 기준 온도감: warm / cool / neutral"""
    hue = round(rgb_to_hsl(r, g, b).h)
    if hue <= 60 or hue >= 300:
        return "warm"
    if 120 <= hue <= 240:
        return "cool"
    return "neutral"
