"""
Tailwind 스타일 음영 스케일 생성

기준 색상 하나로 50~950 의 11단계 팔레트를 만듭니다.
500 단계는 항상 입력 색상 그대로이며, 색상(hue)은 전 단계에서 고정됩니다.

사용법:
    from colorgen.shades import derive_palette
    palette = derive_palette("#3B82F6", "primary")
    print(palette[50], palette[500], palette[950])
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from colorgen.color import Color
from logging_config import get_logger

logger = get_logger("shades")

# Tailwind 표준 음영 단계
SHADE_KEYS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
BASE_SHADE = 500

_SHADE_SPAN = 450
_LIGHT_TARGET = 0.95       # 50 단계의 목표 명도
_LIGHT_DESATURATE = 0.7    # 밝아질수록 채도 감소율
_MIN_SATURATION = 0.1
_DARK_FACTOR = 0.85        # 950 단계는 원래 명도의 15%
_DARK_SATURATE = 0.2


@dataclass(frozen=True)
class Palette:
    """이름 + 음영 스케일 (불변 객체)"""

    name: str
    shades: Mapping[int, Color]

    def __getitem__(self, shade: int) -> Color:
        return self.shades[shade]

    def __iter__(self):
        return iter(self.shades.items())

    @property
    def base(self) -> Color:
        return self.shades[BASE_SHADE]

    def to_hex_dict(self) -> dict[str, str]:
        """{"50": "#eff6ff", ...} 형태 (음영 오름차순)"""
        return {str(shade): color.hex for shade, color in self.shades.items()}


def shade_color(base: Color, shade: int) -> Color:
    """기준 색상에서 단일 음영 단계 색상 계산"""
    if shade == BASE_SHADE:
        return base

    h, s, l = base.hsl
    if shade < BASE_SHADE:
        ratio = (BASE_SHADE - shade) / _SHADE_SPAN
        lightness = l + (_LIGHT_TARGET - l) * ratio
        # 무채색은 하한 없이 무채색 유지
        floor = _MIN_SATURATION if s > 0 else 0.0
        saturation = max(floor, s * (1 - ratio * _LIGHT_DESATURATE))
    else:
        ratio = (shade - BASE_SHADE) / _SHADE_SPAN
        lightness = l * (1 - ratio * _DARK_FACTOR)
        saturation = min(1.0, s * (1 + ratio * _DARK_SATURATE))
    return Color.from_hsl(h, saturation, lightness)


def derive_palette(base, name: str = "primary") -> Palette:
    """기준 색상으로 11단계 팔레트 생성

    Args:
        base: Color 또는 색상 문자열 (HEX, rgb(), hsl(), CSS 색상명)
        name: 팔레트 이름

    Raises:
        InvalidColorFormat: 색상 문자열을 해석할 수 없을 때
    """
    base_color = Color.parse(base)
    shades = {shade: shade_color(base_color, shade) for shade in SHADE_KEYS}
    logger.debug("팔레트 생성: %s (기준 %s)", name, base_color.hex)
    return Palette(name=name, shades=MappingProxyType(shades))
