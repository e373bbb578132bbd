"""조화 타입 판정/종합 점수 테스트"""
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from color_metrics.harmony import (
    analyze_combination,
    average_pairwise_distance,
    detect_harmony_types,
    diversity_score,
)
from color_metrics.matching import InsufficientInputError
from models import Color, HarmonyType, ReferenceColor, Season

RED_ONLY = {
    Season.SPRING: [ReferenceColor(color=Color.from_hex("#FF0000"), label="red", season=Season.SPRING, category="t")],
}


def types_of(analysis):
    return [(m.type, round(m.confidence, 6)) for m in analysis.harmony_types]


def test_red_green_is_not_complementary():
    analysis = analyze_combination(["#FF0000", "#00FF00"], RED_ONLY)
    assert HarmonyType.COMPLEMENTARY not in [m.type for m in analysis.harmony_types]


def test_red_cyan_is_complementary_with_full_confidence():
    analysis = analyze_combination(["#FF0000", "#00FFFF"], RED_ONLY)
    assert analysis.harmony_types[0].type is HarmonyType.COMPLEMENTARY
    assert analysis.harmony_types[0].confidence == pytest.approx(100)


@pytest.mark.parametrize("pair", [("#FF0000", "#00FFFF"), ("#FF2000", "#FF0000"), ("#336699", "#996633")])
def test_pair_classification_is_symmetric(pair):
    forward = analyze_combination(list(pair), RED_ONLY)
    backward = analyze_combination(list(reversed(pair)), RED_ONLY)
    assert types_of(forward) == types_of(backward)


def test_close_hues_qualify_for_several_types_sorted_by_confidence():
    analysis = analyze_combination(["#FF0000", "#FF2000"], RED_ONLY)
    kinds = [m.type for m in analysis.harmony_types]
    assert kinds == [HarmonyType.ANALOGOUS, HarmonyType.MONOCHROMATIC]
    confidences = [m.confidence for m in analysis.harmony_types]
    assert confidences == sorted(confidences, reverse=True)
    assert analysis.top_harmony.type is HarmonyType.ANALOGOUS


def test_primary_triad_is_triadic():
    matches = detect_harmony_types([0.0, 120.0, 240.0])
    assert [(m.type, m.confidence) for m in matches] == [(HarmonyType.TRIADIC, 100.0)]


def test_triadic_confidence_penalises_gap_error():
    matches = detect_harmony_types([0.0, 110.0, 240.0])
    assert matches[0].type is HarmonyType.TRIADIC
    # 간격 110, 130 → 100 - (10 + 10) * 2
    assert matches[0].confidence == pytest.approx(60.0)


def test_four_colors_only_allow_monochromatic():
    matches = detect_harmony_types([10.0, 15.0, 20.0, 25.0])
    assert [m.type for m in matches] == [HarmonyType.MONOCHROMATIC]
    assert matches[0].confidence == pytest.approx(70.0)


def test_no_harmony_when_hues_scattered():
    assert detect_harmony_types([0.0, 90.0]) == []


@pytest.mark.parametrize("avg, expected", [(30.0, 100.0), (0.0, 40.0), (45.0, 70.0), (80.0, 0.0)])
def test_diversity_score(avg, expected):
    assert diversity_score(avg) == pytest.approx(expected)


def test_average_pairwise_distance_of_identical_colors_is_zero():
    red = Color.from_hex("#FF0000")
    assert average_pairwise_distance([red, red, red]) == 0.0


def test_overall_score_weights():
    analysis = analyze_combination(["#FF0000", "#00FFFF"], RED_ONLY)
    # 보색 100 * 0.4 + 계절 매칭 (100 + 0) / 2 * 0.4 + 다양성 0 * 0.2
    assert analysis.seasonal_match[Season.SPRING] == pytest.approx(50.0)
    assert analysis.average_distance > 80
    assert analysis.diversity == 0
    assert analysis.overall_score == pytest.approx(60.0)


def test_overall_score_without_harmony_uses_zero():
    analysis = analyze_combination(["#FF0000", "#0000FF", "#00FF00", "#FFFF00"], RED_ONLY)
    assert analysis.harmony_types == []
    expected = 0.4 * analysis.seasonal_match[Season.SPRING] + 0.2 * analysis.diversity
    assert analysis.overall_score == pytest.approx(expected)


def test_requires_two_colors():
    with pytest.raises(InsufficientInputError):
        analyze_combination(["#FF0000"], RED_ONLY)
    with pytest.raises(InsufficientInputError):
        analyze_combination([], RED_ONLY)


def test_requires_catalogs():
    with pytest.raises(InsufficientInputError):
        analyze_combination(["#FF0000", "#00FFFF"], {})
