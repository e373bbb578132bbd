"""카탈로그 ΔE 매칭과 시즌 추정"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from color_metrics.delta_e import delta_e, matching_score
from config import DEFAULT_CONFIG, MatchingConfig
from models import (
    CANONICAL_SEASON_ORDER,
    ColorLike,
    MatchResult,
    ReferenceColor,
    Season,
    SeasonEstimate,
    as_color,
)

logger = logging.getLogger("personal_color")


class InsufficientInputError(ValueError):
    pass


def find_matches(
    query: ColorLike,
    catalog: Sequence[ReferenceColor],
    max_delta_e: Optional[float] = None,
    limit: Optional[int] = None,
    config: MatchingConfig | None = None,
) -> List[MatchResult]:
    """ΔE 오름차순(동점은 카탈로그 순서)으로 매칭 결과를 돌려준다."""
    cfg = config or DEFAULT_CONFIG
    if not catalog:
        raise InsufficientInputError("비교할 카탈로그가 비어 있어.")
    if limit is not None and limit < 0:
        raise ValueError(f"limit은 0 이상이어야 해: {limit}")

    target = as_color(query).lab
    distances = np.array([delta_e(target, entry.lab) for entry in catalog], dtype=float)
    order = np.argsort(distances, kind="stable")

    results: List[MatchResult] = []
    for idx in order:
        dist = float(distances[idx])
        if max_delta_e is not None and dist > max_delta_e:
            continue
        results.append(
            MatchResult(
                reference=catalog[int(idx)],
                delta_e=dist,
                score=matching_score(dist, cfg.score_slope),
            )
        )
    if limit is not None:
        results = results[:limit]
    return results


def best_score(query: ColorLike, catalog: Sequence[ReferenceColor], config: MatchingConfig | None = None) -> float:
    return find_matches(query, catalog, limit=1, config=config)[0].score


def ordered_catalogs(
    seasonal_catalogs: Mapping[Season, Sequence[ReferenceColor]],
) -> Dict[Season, Sequence[ReferenceColor]]:
    """키를 Season으로 맞추고 정규 순서(봄→겨울)로 정렬한다. 빈 카탈로그는 거부."""
    if not seasonal_catalogs:
        raise InsufficientInputError("시즌 카탈로그가 비어 있어.")
    normalized = {Season(key): catalog for key, catalog in seasonal_catalogs.items()}
    for season, catalog in normalized.items():
        if not catalog:
            raise InsufficientInputError(f"{season.value} 카탈로그가 비어 있어.")
    return {season: normalized[season] for season in CANONICAL_SEASON_ORDER if season in normalized}


def estimate_season_from_color(
    query: ColorLike,
    seasonal_catalogs: Mapping[Season, Sequence[ReferenceColor]],
    config: MatchingConfig | None = None,
) -> SeasonEstimate:
    color = as_color(query)
    all_scores: Dict[Season, float] = {}
    winner: Season | None = None
    for season, catalog in ordered_catalogs(seasonal_catalogs).items():
        all_scores[season] = best_score(color, catalog, config)
        # 엄격한 '>' 비교라 동점이면 먼저 나온 시즌이 남는다
        if winner is None or all_scores[season] > all_scores[winner]:
            winner = season

    logger.info(
        "[정보] 시즌 추정: %s → %s (신뢰도 %.1f)",
        color.hex,
        winner.value,
        all_scores[winner],
    )
    return SeasonEstimate(season=winner, confidence=all_scores[winner], all_scores=all_scores)


def seasonal_match(
    colors: Sequence[ColorLike],
    catalog: Sequence[ReferenceColor],
    config: MatchingConfig | None = None,
) -> float:
    """입력 색상 각각의 최고 매칭 점수 평균."""
    if not colors:
        raise InsufficientInputError("색상이 하나도 없어.")
    scores = [best_score(c, catalog, config) for c in colors]
    return sum(scores) / len(scores)
