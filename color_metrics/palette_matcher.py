"""카탈로그를 주입받아 매칭/시즌 추정/조합 분석을 묶는 진입점"""
from __future__ import annotations

from typing import List, Optional, Sequence

from catalog_loader import PALETTE_GROUPS, CatalogRepository
from color_metrics.harmony import analyze_combination
from color_metrics.matching import estimate_season_from_color, find_matches
from color_metrics.recommend import Combination, matching_products, recommended_combinations
from config import DEFAULT_CONFIG, MatchingConfig
from models import ColorLike, HarmonyAnalysis, MatchResult, ReferenceColor, Season, SeasonEstimate


class PaletteMatcher:
    def __init__(self, repo: CatalogRepository, config: MatchingConfig | None = None):
        self.repo = repo
        self.config = config or DEFAULT_CONFIG

    def find_matches(
        self,
        query: ColorLike,
        catalog: Optional[Sequence[ReferenceColor]] = None,
        max_delta_e: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> List[MatchResult]:
        """catalog를 생략하면 모든 시즌의 대표색(primary)과 비교한다."""
        if catalog is None:
            catalog = [ref for refs in self.repo.seasonal_catalogs().values() for ref in refs]
        return find_matches(query, catalog, max_delta_e=max_delta_e, limit=limit, config=self.config)

    def estimate_season(self, query: ColorLike) -> SeasonEstimate:
        return estimate_season_from_color(query, self.repo.seasonal_catalogs(), self.config)

    def analyze_combination(self, colors: Sequence[ColorLike]) -> HarmonyAnalysis:
        return analyze_combination(colors, self.repo.seasonal_catalogs(PALETTE_GROUPS), self.config)

    def matching_products(self, query: ColorLike, category: str = "all") -> List[MatchResult]:
        return matching_products(query, self.repo, category, self.config)

    def recommended_combinations(self, season: Season | str, count: int = 5) -> List[Combination]:
        return recommended_combinations(self.repo.load(season), count)
