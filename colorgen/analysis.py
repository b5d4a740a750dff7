"""
색상 분석 (휘도, 대비, 색온도, 권장 텍스트 색상)

WCAG 2.x 상대 휘도와 대비비를 계산하고,
흑체 복사 근사식으로 색온도(K)를 추정합니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from colorgen.color import Color

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)

# 흰색 텍스트 권장 기준 대비비 (WCAG AA 본문)
TEXT_CONTRAST_THRESHOLD = 4.5

_MIN_KELVIN = 1000.0
_MAX_KELVIN = 40000.0
_KELVIN_EPSILON = 0.4


@dataclass(frozen=True)
class ColorAnalysis:
    color: Color
    luminance: float
    temperature: int
    contrast_white: float
    contrast_black: float
    recommended_text: str
    closest_name: str

    @property
    def hsl(self) -> tuple[float, float, float]:
        return self.color.hsl


def _linearize(channel):
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    r, g, b = (_linearize(c) for c in color.rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: Color, second: Color) -> float:
    """WCAG 대비비 (1.0 ~ 21.0)"""
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    if l1 < l2:
        l1, l2 = l2, l1
    return (l1 + 0.05) / (l2 + 0.05)


def kelvin_to_rgb(kelvin: float) -> tuple[float, float, float]:
    """흑체 색온도 → 근사 RGB (채널 제한 없음)"""
    temp = kelvin / 100.0
    if temp < 66:
        r = 255.0
        if temp < 6:
            g = 0.0
        else:
            g = temp - 2
            g = -155.25485562709179 - 0.44596950469579133 * g + 104.49216199393888 * math.log(g)
        if temp < 20:
            b = 0.0
        else:
            b = temp - 10
            b = -254.76935184120902 + 0.8274096064007395 * b + 115.67994401066147 * math.log(b)
    else:
        r = temp - 55
        r = 351.97690566805693 + 0.114206453784165 * r - 40.25366309332127 * math.log(r)
        g = temp - 50
        g = 325.4494125711974 + 0.07943456536662342 * g - 28.0852963507957 * math.log(g)
        b = 255.0
    return (r, g, b)


def color_temperature(color: Color) -> int:
    """B/R 비율에 대한 이분 탐색으로 색온도(K) 추정"""
    r, _, b = color.rgb
    target = b / r if r else math.inf
    lo, hi = _MIN_KELVIN, _MAX_KELVIN
    temp = (lo + hi) * 0.5
    while hi - lo > _KELVIN_EPSILON:
        temp = (lo + hi) * 0.5
        tr, _, tb = kelvin_to_rgb(temp)
        if tb / tr >= target:
            hi = temp
        else:
            lo = temp
    return round(temp)


def recommended_text_color(color: Color) -> str:
    if contrast_ratio(color, WHITE) > TEXT_CONTRAST_THRESHOLD:
        return "white"
    return "black"


def analyze_color(value) -> ColorAnalysis:
    """색상 분석

    Raises:
        InvalidColorFormat: 색상 문자열을 해석할 수 없을 때
    """
    color = Color.parse(value)
    return ColorAnalysis(
        color=color,
        luminance=relative_luminance(color),
        temperature=color_temperature(color),
        contrast_white=contrast_ratio(color, WHITE),
        contrast_black=contrast_ratio(color, BLACK),
        recommended_text=recommended_text_color(color),
        closest_name=color.closest_css_name(),
    )
