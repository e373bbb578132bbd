"""매칭/조화 점수 파라미터"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MatchingConfig:
    score_slope: float = 5.0
    diversity_target: float = 30.0  # 평균 쌍별 ΔE 목표치
    diversity_slope: float = 2.0
    harmony_weight: float = 0.4
    seasonal_weight: float = 0.4
    diversity_weight: float = 0.2
    hair_max_delta_e: float = 30.0
    makeup_max_delta_e: float = 40.0


DEFAULT_CONFIG = MatchingConfig()

MAKEUP_CATEGORIES = ("foundation", "lipstick", "eyeshadow")
