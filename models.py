"""색상/시즌/매칭 결과 자료형"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union

from color_utils import (
    HSL,
    RGB,
    InvalidFormatError,
    Lab,
    check_rgb,
    hex_to_rgb,
    lab_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
)
from color_metrics.delta_e import MatchBand, interpret_delta_e


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


# 동점일 때 이 순서가 앞선 시즌을 고른다
CANONICAL_SEASON_ORDER: Tuple[Season, ...] = tuple(Season)


@dataclass(frozen=True)
class SeasonProfile:
    temperature: str
    clarity: str
    depth: str


SEASON_PROFILES: Dict[Season, SeasonProfile] = {
    Season.SPRING: SeasonProfile(temperature="warm", clarity="clear", depth="light"),
    Season.SUMMER: SeasonProfile(temperature="cool", clarity="soft", depth="light"),
    Season.AUTUMN: SeasonProfile(temperature="warm", clarity="muted", depth="deep"),
    Season.WINTER: SeasonProfile(temperature="cool", clarity="clear", depth="deep"),
}


class HarmonyType(str, Enum):
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"


@dataclass(frozen=True)
class Color:
    """sRGB 또는 L*a*b* 중 하나로 저장되는 불변 색상 값."""

    rgb_value: RGB | None = None
    lab_value: Lab | None = None

    def __post_init__(self) -> None:
        if (self.rgb_value is None) == (self.lab_value is None):
            raise InvalidFormatError("Color는 RGB와 Lab 중 정확히 하나만 가져야 해.")

    @classmethod
    def from_hex(cls, s: str) -> "Color":
        return cls(rgb_value=hex_to_rgb(s))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        check_rgb(r, g, b)
        return cls(rgb_value=RGB(int(r), int(g), int(b)))

    @classmethod
    def from_lab(cls, L: float, a: float, b: float) -> "Color":
        return cls(lab_value=Lab(float(L), float(a), float(b)))

    @property
    def lab(self) -> Lab:
        if self.lab_value is not None:
            return self.lab_value
        return rgb_to_lab(*self.rgb_value)

    @property
    def rgb(self) -> RGB:
        if self.rgb_value is not None:
            return self.rgb_value
        return lab_to_rgb(*self.lab_value)

    @property
    def hex(self) -> str:
        return rgb_to_hex(*self.rgb)

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(*self.rgb)


ColorLike = Union[Color, str, Tuple[int, int, int]]


def as_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return Color.from_rgb(*value)
    raise InvalidFormatError(f"색상으로 해석할 수 없는 값이야: {value!r}")


@dataclass(frozen=True)
class ReferenceColor:
    color: Color
    label: str
    season: Season
    category: str
    source_id: Any = None
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def lab(self) -> Lab:
        return self.color.lab


@dataclass(frozen=True)
class MatchResult:
    reference: ReferenceColor
    delta_e: float
    score: float

    @property
    def band(self) -> MatchBand:
        return interpret_delta_e(self.delta_e)

    def to_dict(self) -> Dict[str, Any]:
        ref = self.reference
        return {
            "label": ref.label,
            "hex": ref.color.hex,
            "season": ref.season.value,
            "category": ref.category,
            "source_id": ref.source_id,
            "delta_e": float(self.delta_e),
            "score": float(self.score),
            "band": self.band.label,
        }


@dataclass(frozen=True)
class SeasonEstimate:
    season: Season
    confidence: float
    all_scores: Dict[Season, float]


@dataclass(frozen=True)
class HarmonyMatch:
    type: HarmonyType
    confidence: float


@dataclass(frozen=True)
class HarmonyAnalysis:
    colors: List[Color]
    hues: List[float]
    harmony_types: List[HarmonyMatch]
    seasonal_match: Dict[Season, float]
    average_distance: float
    diversity: float
    overall_score: float

    @property
    def top_harmony(self) -> HarmonyMatch | None:
        return self.harmony_types[0] if self.harmony_types else None
