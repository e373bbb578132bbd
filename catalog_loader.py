"""시즌 팔레트/제품 카탈로그 로딩"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from color_utils import InvalidFormatError
from config import MAKEUP_CATEGORIES
from models import SEASON_PROFILES, Color, ReferenceColor, Season, SeasonProfile

logger = logging.getLogger("personal_color.catalog")

DEFAULT_PALETTE_DIR = Path(__file__).resolve().parent / "palettes"
PALETTE_GROUPS = ("primary_colors", "neutrals")
HAIR_CATEGORY = "hair"


class CatalogError(ValueError):
    pass


@dataclass
class Subtype:
    subtype_id: str
    display_name: str
    groups: Dict[str, List[ReferenceColor]]


@dataclass
class SeasonPalette:
    season: Season
    display_name: str
    profile: SeasonProfile
    subtypes: Dict[str, Subtype]
    products: Dict[str, List[ReferenceColor]]
    best_combinations: List[List[str]]

    def colors(self, include: Iterable[str] = ("primary_colors",)) -> List[ReferenceColor]:
        """서브타입 순서대로 지정한 그룹의 색상을 모은다."""
        include = tuple(include)
        entries: List[ReferenceColor] = []
        for subtype in self.subtypes.values():
            for group in include:
                entries.extend(subtype.groups.get(group, []))
        return entries


def _slug(name: str) -> str:
    return re.sub(r"\W+", "_", name.strip().lower()).strip("_")


def _parse_color(raw: dict, location: str) -> Tuple[str, Color]:
    if not isinstance(raw, dict):
        raise CatalogError(f"{location}: 색상 항목은 객체여야 해.")
    name = str(raw.get("name") or "").strip()
    if not name:
        raise CatalogError(f"{location}: 'name' 필드가 없어.")
    try:
        color = Color.from_hex(raw.get("hex"))
    except InvalidFormatError as exc:
        raise CatalogError(f"{location}: {exc}") from exc
    return name, color


def _metadata(raw: dict) -> Dict[str, object]:
    return {k: v for k, v in raw.items() if k not in ("name", "hex")}


class CatalogRepository:
    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir) if base_dir is not None else DEFAULT_PALETTE_DIR
        self._cache: Dict[Season, SeasonPalette] = {}

    def list_seasons(self) -> List[Season]:
        return [s for s in Season if (self.base_dir / f"{s.value}.json").exists()]

    def load(self, season: Season | str) -> SeasonPalette:
        try:
            season = Season(season)
        except ValueError as exc:
            raise CatalogError(f"알 수 없는 시즌이야: {season!r}") from exc
        if season in self._cache:
            return self._cache[season]
        path = self.base_dir / f"{season.value}.json"
        if not path.exists():
            raise CatalogError(f"팔레트 파일이 없어: {path}")
        with path.open("r", encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as exc:
                raise CatalogError(f"{path}: JSON 파싱 실패 ({exc})") from exc
        palette = self._build(season, raw, path)
        self._cache[season] = palette
        logger.debug(
            "팔레트 로드: %s (서브타입 %d개, 제품 %d개)",
            season.value,
            len(palette.subtypes),
            sum(len(v) for v in palette.products.values()),
        )
        return palette

    def _build(self, season: Season, raw: dict, path: Path) -> SeasonPalette:
        if raw.get("season") != season.value:
            raise CatalogError(f"{path}: season 값이 파일 이름과 달라 ({raw.get('season')!r}).")
        profile = SEASON_PROFILES[season]
        characteristics = raw.get("characteristics")
        if characteristics is not None:
            declared = SeasonProfile(
                temperature=characteristics.get("temperature"),
                clarity=characteristics.get("clarity"),
                depth=characteristics.get("depth"),
            )
            if declared != profile:
                raise CatalogError(f"{path}: characteristics가 {season.value} 프로필과 맞지 않아.")

        subtypes: Dict[str, Subtype] = {}
        for subtype_id, body in (raw.get("subtypes") or {}).items():
            groups: Dict[str, List[ReferenceColor]] = {}
            for group in PALETTE_GROUPS:
                entries = []
                for idx, c in enumerate(body.get(group, []), start=1):
                    name, color = _parse_color(c, f"{path}:{subtype_id}.{group}[{idx}]")
                    meta = _metadata(c)
                    meta["group"] = group
                    entries.append(
                        ReferenceColor(
                            color=color,
                            label=name,
                            season=season,
                            category=subtype_id,
                            source_id=f"{subtype_id}.{_slug(name)}",
                            metadata=meta,
                        )
                    )
                groups[group] = entries
            subtypes[subtype_id] = Subtype(
                subtype_id=subtype_id,
                display_name=body.get("display_name", subtype_id),
                groups=groups,
            )
        if not subtypes:
            raise CatalogError(f"{path}: 서브타입이 하나도 없어.")

        products: Dict[str, List[ReferenceColor]] = {}
        raw_products = {HAIR_CATEGORY: raw.get("hair_colors", [])}
        raw_products.update(raw.get("makeup_colors", {}))
        for category, items in raw_products.items():
            entries = []
            for idx, c in enumerate(items, start=1):
                name, color = _parse_color(c, f"{path}:{category}[{idx}]")
                entries.append(
                    ReferenceColor(
                        color=color,
                        label=name,
                        season=season,
                        category=category,
                        source_id=f"{season.value}.{category}.{_slug(name)}",
                        metadata=_metadata(c),
                    )
                )
            products[category] = entries

        return SeasonPalette(
            season=season,
            display_name=raw.get("display_name", season.value),
            profile=profile,
            subtypes=subtypes,
            products=products,
            best_combinations=[list(combo) for combo in raw.get("best_combinations", [])],
        )

    def seasonal_catalogs(self, include: Iterable[str] = ("primary_colors",)) -> Dict[Season, List[ReferenceColor]]:
        include = tuple(include)
        return {season: self.load(season).colors(include) for season in self.list_seasons()}

    def products(self, season: Season | str, category: str) -> List[ReferenceColor]:
        if category != HAIR_CATEGORY and category not in MAKEUP_CATEGORIES:
            raise ValueError(f"지원하지 않는 제품 카테고리야: {category!r}")
        return list(self.load(season).products.get(category, []))
