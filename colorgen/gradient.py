"""
선형 그라디언트 보간

색상 목록을 steps 개의 정지점으로 RGB 공간에서 선형 보간합니다.
첫/마지막 정지점은 입력 색상과 정확히 같고, 위치는 0~100 사이에서
엄격하게 증가합니다. 지각(perceptual) 색 공간 보간은 하지 않습니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from colorgen.color import Color, _round_half_up
from colorgen.errors import InsufficientColors, InvalidDirection

MIN_STEPS = 2
MAX_STEPS = 50
DEFAULT_STEPS = 10
DEFAULT_DIRECTION = "to-r"

# Tailwind 방향 태그 → CSS linear-gradient 키워드
DIRECTIONS = {
    "to-t": "to top",
    "to-tr": "to top right",
    "to-r": "to right",
    "to-br": "to bottom right",
    "to-b": "to bottom",
    "to-bl": "to bottom left",
    "to-l": "to left",
    "to-tl": "to top left",
}


@dataclass(frozen=True)
class GradientStop:
    color: Color
    position: float


@dataclass(frozen=True)
class GradientStops:
    """정지점 목록 + 표시용 방향 태그"""

    stops: tuple[GradientStop, ...]
    direction: str = DEFAULT_DIRECTION

    def __iter__(self):
        return iter(self.stops)

    def __len__(self):
        return len(self.stops)

    def __getitem__(self, index):
        return self.stops[index]

    @property
    def css_direction(self) -> str:
        return DIRECTIONS[self.direction]

    @property
    def colors(self) -> list[Color]:
        return [stop.color for stop in self.stops]


def normalize_direction(direction) -> str:
    """'to-r', 'r', 'to right' 등을 'to-r' 형태로 정규화"""
    key = str(direction).strip().lower()
    if key in DIRECTIONS:
        return key
    if f"to-{key}" in DIRECTIONS:
        return f"to-{key}"
    for tag, css in DIRECTIONS.items():
        if key == css:
            return tag
    raise InvalidDirection(direction)


def clamp_steps(steps, min_steps: int = MIN_STEPS, max_steps: int = MAX_STEPS) -> int:
    return max(min_steps, min(max_steps, int(steps)))


def _interpolate(lower: Color, upper: Color, factor: float) -> Color:
    return Color(*(
        _round_half_up(lo + factor * (hi - lo))
        for lo, hi in zip(lower.rgb, upper.rgb)
    ))


def build_gradient(
    colors: Sequence,
    steps: int = DEFAULT_STEPS,
    direction: str = DEFAULT_DIRECTION,
    min_steps: int = MIN_STEPS,
    max_steps: int = MAX_STEPS,
) -> GradientStops:
    """색상 목록으로 그라디언트 정지점 생성

    Args:
        colors: Color 또는 색상 문자열 목록 (2개 이상)
        steps: 정지점 개수 (min_steps~max_steps 범위로 제한)
        direction: to-t, to-tr, to-r, to-br, to-b, to-bl, to-l, to-tl

    Raises:
        InsufficientColors: 색상이 2개 미만
        InvalidColorFormat: 해석할 수 없는 색상
        InvalidDirection: 알 수 없는 방향
    """
    if colors is None or isinstance(colors, (str, Color)) or len(colors) < 2:
        count = 1 if isinstance(colors, (str, Color)) else len(colors or ())
        raise InsufficientColors(count)

    seeds = [Color.parse(c) for c in colors]
    tag = normalize_direction(direction)
    steps = clamp_steps(steps, min_steps, max_steps)

    last = len(seeds) - 1
    stops = []
    for i in range(steps):
        position = round(i * (100 / (steps - 1)), 2)
        color_index = i / (steps - 1) * last
        lower = math.floor(color_index)
        upper = math.ceil(color_index)
        if lower == upper:
            color = seeds[lower]
        else:
            color = _interpolate(seeds[lower], seeds[upper], color_index - lower)
        stops.append(GradientStop(color=color, position=position))

    return GradientStops(stops=tuple(stops), direction=tag)
