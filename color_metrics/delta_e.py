"""ΔE 계산과 해석 구간"""
from __future__ import annotations

import math
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np
from skimage import color as skcolor

from config import DEFAULT_CONFIG


class MatchBand(Enum):
    EXCELLENT = "excellent match"
    GOOD = "good match"
    ACCEPTABLE = "acceptable match"
    CAUTION = "caution"
    POOR = "poor match"

    @property
    def label(self) -> str:
        return self.value


# (상한, 구간): 상한 미만이면 해당 구간
DELTA_E_BANDS: List[Tuple[float, MatchBand]] = [
    (3.0, MatchBand.EXCELLENT),
    (6.0, MatchBand.GOOD),
    (10.0, MatchBand.ACCEPTABLE),
    (15.0, MatchBand.CAUTION),
]


def delta_e(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """CIE76 ΔE: L*a*b* 공간의 유클리드 거리 (가중치 없음)."""
    dl = lab1[0] - lab2[0]
    da = lab1[1] - lab2[1]
    db = lab1[2] - lab2[2]
    return math.sqrt(dl * dl + da * da + db * db)


def interpret_delta_e(value: float) -> MatchBand:
    for upper, band in DELTA_E_BANDS:
        if value < upper:
            return band
    return MatchBand.POOR


def matching_score(value: float, slope: float | None = None) -> float:
    """ΔE를 0~100 점수로 선형 변환한다: max(0, 100 - ΔE*5)."""
    if value < 0:
        raise ValueError(f"ΔE는 음수일 수 없어: {value}")
    if slope is None:
        slope = DEFAULT_CONFIG.score_slope
    return max(0.0, 100.0 - value * slope)


def delta_e_ciede2000(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """CIEDE2000 ΔE 값 (비교용, 점수 계산에는 쓰지 않는다)."""
    a = np.asarray(lab1, dtype=float).reshape(1, 1, 3)
    b = np.asarray(lab2, dtype=float).reshape(1, 1, 3)
    d = skcolor.deltaE_ciede2000(a, b)
    return float(d[0, 0])
