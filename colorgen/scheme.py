"""
색상 조화 전략 기반 컬러 스킴 생성

전략별 고정 색상각 오프셋으로 3개의 시드 색상을 만들고,
각 시드를 derive_palette()에 넣어 이름 붙은 팔레트 3개를 생성합니다.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from colorgen.color import Color
from colorgen.errors import InvalidHue, UnknownStrategy
from colorgen.shades import Palette, derive_palette
from logging_config import get_logger

logger = get_logger("scheme")

DEFAULT_COLOR_NAMES = ("primary", "secondary", "accent")

# 전략 → [(색상각 오프셋, 채도, 명도), ...]
STRATEGIES = {
    "complementary": ((0, 0.8, 0.6), (180, 0.8, 0.6), (90, 0.7, 0.5)),
    "analogous": ((0, 0.8, 0.6), (30, 0.8, 0.6), (-30, 0.8, 0.6)),
    "monochromatic": ((0, 0.8, 0.6), (0, 0.6, 0.5), (0, 0.9, 0.7)),
    "triadic": ((0, 0.8, 0.6), (120, 0.8, 0.6), (240, 0.8, 0.6)),
}


@dataclass(frozen=True)
class ColorScheme:
    """전략 + 기준 색상각 + 팔레트 목록"""

    strategy: str
    base_hue: float
    palettes: tuple[Palette, ...]

    def __iter__(self):
        return iter(self.palettes)

    def __len__(self):
        return len(self.palettes)


def normalize_strategy(strategy) -> str:
    key = str(strategy).strip().lower()
    if key not in STRATEGIES:
        raise UnknownStrategy(strategy, STRATEGIES.keys())
    return key


def seed_colors(strategy: str, base_hue: float) -> list[Color]:
    """전략의 시드 색상 3개 (색상각은 360으로 순환)"""
    key = normalize_strategy(strategy)
    return [
        Color.from_hsl((base_hue + offset) % 360, saturation, lightness)
        for offset, saturation, lightness in STRATEGIES[key]
    ]


def derive_scheme(
    strategy: str,
    base_hue: Optional[float] = None,
    names: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
) -> ColorScheme:
    """전략과 기준 색상각으로 컬러 스킴 생성

    Args:
        strategy: complementary | analogous | monochromatic | triadic
        base_hue: 기준 색상각 (0~360). None이면 무작위
        names: 팔레트 이름 목록. 부족하면 color{n}으로 채움
        rng: base_hue 무작위 선택용 난수 생성기 (테스트용)

    Raises:
        UnknownStrategy: 지원하지 않는 전략
        InvalidHue: base_hue가 유한한 숫자가 아님
    """
    key = normalize_strategy(strategy)
    if base_hue is None:
        base_hue = (rng or random).uniform(0, 360) % 360
    else:
        try:
            hue = float(base_hue)
        except (TypeError, ValueError):
            raise InvalidHue(base_hue) from None
        if not math.isfinite(hue):
            raise InvalidHue(base_hue)
        base_hue = hue % 360
    if names is None:
        names = DEFAULT_COLOR_NAMES

    palettes = []
    for index, seed in enumerate(seed_colors(key, base_hue)):
        name = names[index] if index < len(names) and names[index] else f"color{index + 1}"
        palettes.append(derive_palette(seed, name))

    logger.debug("스킴 생성: %s (기준 색상각 %.1f)", key, base_hue)
    return ColorScheme(strategy=key, base_hue=base_hue, palettes=tuple(palettes))
