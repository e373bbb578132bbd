"""시즌 기반 제품/조합 추천"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from catalog_loader import HAIR_CATEGORY, CatalogRepository, SeasonPalette
from color_metrics.matching import estimate_season_from_color, find_matches
from config import DEFAULT_CONFIG, MAKEUP_CATEGORIES, MatchingConfig
from models import ColorLike, MatchResult, as_color

PRODUCT_CATEGORIES = ("all", HAIR_CATEGORY, "makeup")


@dataclass
class Combination:
    colors: List[str]
    kind: str
    harmony_score: int
    description: str


def _within(color, items, cutoff: float, cfg: MatchingConfig) -> List[MatchResult]:
    # 컷오프 값과 같은 ΔE는 제외한다
    return [m for m in find_matches(color, items, config=cfg) if m.delta_e < cutoff]


def matching_products(
    query: ColorLike,
    repo: CatalogRepository,
    category: str = "all",
    config: MatchingConfig | None = None,
) -> List[MatchResult]:
    """추정 시즌의 헤어/메이크업 제품 중 ΔE가 컷오프 미만인 것을 가까운 순으로."""
    cfg = config or DEFAULT_CONFIG
    if category not in PRODUCT_CATEGORIES:
        raise ValueError(f"지원하지 않는 제품 카테고리야: {category!r}")
    color = as_color(query)
    estimate = estimate_season_from_color(color, repo.seasonal_catalogs(), cfg)
    palette = repo.load(estimate.season)

    matches: List[MatchResult] = []
    if category in ("all", HAIR_CATEGORY):
        hair = palette.products.get(HAIR_CATEGORY, [])
        if hair:
            matches.extend(_within(color, hair, cfg.hair_max_delta_e, cfg))
    if category in ("all", "makeup"):
        for makeup_category in MAKEUP_CATEGORIES:
            items = palette.products.get(makeup_category, [])
            if items:
                matches.extend(_within(color, items, cfg.makeup_max_delta_e, cfg))
    return sorted(matches, key=lambda m: m.delta_e)


def recommended_combinations(palette: SeasonPalette, count: int = 5) -> List[Combination]:
    combos: List[Combination] = []
    for colors in palette.best_combinations:
        combos.append(
            Combination(
                colors=[c.upper() for c in colors],
                kind="seasonal_best",
                harmony_score=95,
                description=f"{palette.display_name} 시즌 베스트 조합",
            )
        )

    for subtype in palette.subtypes.values():
        primary = subtype.groups.get("primary_colors", [])[:3]
        neutrals = subtype.groups.get("neutrals", [])
        if primary:
            combos.append(
                Combination(
                    colors=[ref.color.hex for ref in primary],
                    kind="subtype_primary",
                    harmony_score=90,
                    description=f"{subtype.display_name} 주요 색상 조합",
                )
            )
        if primary and len(neutrals) >= 2:
            combos.append(
                Combination(
                    colors=[primary[0].color.hex, neutrals[0].color.hex, neutrals[1].color.hex],
                    kind="balanced",
                    harmony_score=85,
                    description=f"{subtype.display_name} 균형 조합",
                )
            )

    combos.sort(key=lambda c: c.harmony_score, reverse=True)
    return combos[:count]
