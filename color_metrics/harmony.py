"""색상 조합 조화 분석"""
from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, List, Mapping, Sequence

from color_metrics.delta_e import delta_e
from color_metrics.matching import InsufficientInputError, ordered_catalogs, seasonal_match
from config import DEFAULT_CONFIG, MatchingConfig
from models import (
    Color,
    ColorLike,
    HarmonyAnalysis,
    HarmonyMatch,
    HarmonyType,
    ReferenceColor,
    Season,
    as_color,
)

logger = logging.getLogger("personal_color")


def detect_harmony_types(hues: Sequence[float]) -> List[HarmonyMatch]:
    """색상환 각도 분포로 조화 타입을 판정한다. 해당되는 타입을 모두 신뢰도 내림차순으로."""
    count = len(hues)
    found: List[HarmonyMatch] = []
    spread = max(hues) - min(hues)

    if spread <= 30:
        found.append(HarmonyMatch(HarmonyType.MONOCHROMATIC, max(0.0, 100.0 - spread * 2)))

    if count <= 3 and spread <= 60:
        found.append(HarmonyMatch(HarmonyType.ANALOGOUS, max(0.0, 100.0 - spread)))

    if count == 2:
        diff = abs(hues[0] - hues[1])
        diff = min(diff, 360.0 - diff)
        if 150 <= diff <= 210:
            found.append(HarmonyMatch(HarmonyType.COMPLEMENTARY, max(0.0, 100.0 - abs(diff - 180) * 2)))

    if count == 3:
        h0, h1, h2 = sorted(hues)
        gap1 = h1 - h0
        gap2 = h2 - h1
        if abs(gap1 - 120) <= 30 and abs(gap2 - 120) <= 30:
            confidence = max(0.0, 100.0 - (abs(gap1 - 120) + abs(gap2 - 120)) * 2)
            found.append(HarmonyMatch(HarmonyType.TRIADIC, confidence))

    return sorted(found, key=lambda m: m.confidence, reverse=True)


def average_pairwise_distance(colors: Sequence[Color]) -> float:
    pairs = list(combinations(colors, 2))
    if not pairs:
        return 0.0
    return sum(delta_e(a.lab, b.lab) for a, b in pairs) / len(pairs)


def diversity_score(avg_distance: float, config: MatchingConfig | None = None) -> float:
    """평균 쌍별 ΔE가 목표치(30)에서 멀어질수록 감점."""
    cfg = config or DEFAULT_CONFIG
    return max(0.0, 100.0 - abs(avg_distance - cfg.diversity_target) * cfg.diversity_slope)


def analyze_combination(
    colors: Sequence[ColorLike],
    seasonal_catalogs: Mapping[Season, Sequence[ReferenceColor]],
    config: MatchingConfig | None = None,
) -> HarmonyAnalysis:
    cfg = config or DEFAULT_CONFIG
    if colors is None or len(colors) < 2:
        raise InsufficientInputError("조화 분석에는 최소 2개의 색상이 필요해.")
    parsed = [as_color(c) for c in colors]
    hues = [c.hsl.h for c in parsed]

    harmony_types = detect_harmony_types(hues)

    seasonal: Dict[Season, float] = {}
    for season, catalog in ordered_catalogs(seasonal_catalogs).items():
        seasonal[season] = seasonal_match(parsed, catalog, cfg)

    avg_distance = average_pairwise_distance(parsed)
    diversity = diversity_score(avg_distance, cfg)
    top_confidence = harmony_types[0].confidence if harmony_types else 0.0

    overall = (
        top_confidence * cfg.harmony_weight
        + max(seasonal.values()) * cfg.seasonal_weight
        + diversity * cfg.diversity_weight
    )

    logger.info(
        "[정보] 조합 분석 %s: 조화=%s, 평균ΔE=%.2f, 다양성=%.1f → 종합 %.1f점",
        ",".join(c.hex for c in parsed),
        harmony_types[0].type.value if harmony_types else "없음",
        avg_distance,
        diversity,
        overall,
    )

    return HarmonyAnalysis(
        colors=parsed,
        hues=hues,
        harmony_types=harmony_types,
        seasonal_match=seasonal,
        average_distance=avg_distance,
        diversity=diversity,
        overall_score=overall,
    )
