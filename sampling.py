"""피부톤 샘플 추출 보조 (영역 평균, k-means 대표색, 언더톤)"""
from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
from PIL import Image
from skimage import color as skcolor
from sklearn.cluster import KMeans

from color_metrics.matching import InsufficientInputError
from color_utils import Lab, clamp
from models import Color, ColorLike, as_color


def _resize_longest_side(pil_img: Image.Image, longest: int = 640) -> Image.Image:
    w, h = pil_img.size
    if max(w, h) <= longest:
        return pil_img
    if w >= h:
        new_w, new_h = longest, max(1, int(h * (longest / w)))
    else:
        new_w, new_h = max(1, int(w * (longest / h))), longest
    return pil_img.resize((new_w, new_h), Image.LANCZOS)


def average_color(img: Image.Image, x0: int, y0: int, x1: int, y1: int) -> Color:
    image = img.convert("RGB")
    w, h = image.size
    left = int(clamp(min(x0, x1), 0, w - 1))
    right = int(clamp(max(x0, x1), 0, w - 1))
    top = int(clamp(min(y0, y1), 0, h - 1))
    bottom = int(clamp(max(y0, y1), 0, h - 1))
    crop = image.crop((left, top, right + 1, bottom + 1))
    arr = np.asarray(crop, dtype=np.float32)
    r, g, b = [int(round(v)) for v in arr.mean(axis=(0, 1))]
    return Color.from_rgb(r, g, b)


def average_samples(samples: Sequence[ColorLike]) -> Color:
    if not samples:
        raise InsufficientInputError("평균 낼 샘플이 없어.")
    arr = np.array([as_color(s).rgb for s in samples], dtype=float)
    r, g, b = [int(round(v)) for v in arr.mean(axis=0)]
    return Color.from_rgb(r, g, b)


def is_plausible_skin(r: int, g: int, b: int, a: int = 255) -> bool:
    """피부 픽셀 후보 필터. 판정 책임은 호출자에게 있다."""
    if a < 200:
        return False
    brightness = (r + g + b) / 3
    if brightness < 50 or brightness > 250:
        return False
    if r < g or g < b:
        return False
    hi, lo = max(r, g, b), min(r, g, b)
    saturation = 0.0 if hi == 0 else (hi - lo) / hi
    return saturation <= 0.4


def dominant_colors(
    img: Image.Image,
    k: int = 5,
    min_saturation: float = 0.18,
    min_value: float = 0.22,
    random_state: int = 42,
) -> List[Tuple[Color, int]]:
    """k-means 군집 중심을 픽셀 수 내림차순으로. 회색/어두운 군집은 뺀다."""
    resized = _resize_longest_side(img.convert("RGB"), 512)
    flat = np.asarray(resized).astype(np.float32).reshape(-1, 3) / 255.0
    n_clusters = min(k, len(np.unique(flat, axis=0)))
    km = KMeans(n_clusters=n_clusters, n_init=5, random_state=random_state)
    labels = km.fit_predict(flat)
    centers = np.clip(km.cluster_centers_, 0.0, 1.0)
    counts = np.bincount(labels, minlength=n_clusters)

    hsv_centers = skcolor.rgb2hsv(centers.reshape(1, n_clusters, 3))[0]
    rows: List[Tuple[Color, int]] = []
    for i in range(n_clusters):
        if hsv_centers[i, 1] < min_saturation or hsv_centers[i, 2] < min_value:
            continue
        r, g, b = (centers[i] * 255).round().astype(int)
        rows.append((Color.from_rgb(int(r), int(g), int(b)), int(counts[i])))
    rows.sort(key=lambda row: row[1], reverse=True)
    return rows


def describe_undertone(lab: Lab) -> str:
    _, a, b = lab
    # golden이 yellow 조건을 포함하므로 먼저 본다
    if a > 5 and b > 20:
        return "golden"
    if a > 3 and b > 15:
        return "yellow"
    if a < 0 and b < 10:
        return "pink"
    if a > 0 and 8 < b < 15:
        return "olive"
    return "neutral"
