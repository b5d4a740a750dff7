"""
팔레트/그라디언트 출력 포매터

인코딩:
    keyvalue   (js, tailwind)  tailwind.config.js 조각 / Tailwind 유틸리티 클래스
    variables  (css)           :root CSS 변수 블록
    structured (json)          JSON 구조 덤프
    rendered   (gradient)      linear-gradient() 문자열 + 정지점 목록 (그라디언트 전용)

모든 출력은 입력 순서(음영 오름차순)를 따르므로 같은 입력은 항상 같은 문자열이 됩니다.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Iterable, Union

from colorgen.errors import UnsupportedEncoding
from colorgen.gradient import GradientStops
from colorgen.scheme import ColorScheme
from colorgen.shades import Palette


class Encoding(str, Enum):
    KEYVALUE = "keyvalue"
    VARIABLES = "variables"
    STRUCTURED = "structured"
    RENDERED = "rendered"


_ALIASES = {
    "js": Encoding.KEYVALUE,
    "tailwind": Encoding.KEYVALUE,
    "css": Encoding.VARIABLES,
    "json": Encoding.STRUCTURED,
    "gradient": Encoding.RENDERED,
}


def parse_encoding(value) -> Encoding:
    """인코딩 이름 또는 별칭을 Encoding으로 변환"""
    if isinstance(value, Encoding):
        return value
    key = str(value).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Encoding(key)
    except ValueError:
        raise UnsupportedEncoding(value) from None


def _format_position(position: float) -> str:
    return f"{position:g}%"


# ============================================================
# 팔레트
# ============================================================

def palettes_to_dict(palettes: Iterable[Palette]) -> dict[str, dict[str, str]]:
    return {palette.name: palette.to_hex_dict() for palette in palettes}


def format_palettes(palettes: Iterable[Palette], encoding="js") -> str:
    """팔레트 목록을 지정 인코딩 문자열로 변환

    Raises:
        UnsupportedEncoding: rendered 등 팔레트에 쓸 수 없는 인코딩
    """
    encoding = parse_encoding(encoding)
    colors = palettes_to_dict(palettes)

    if encoding is Encoding.VARIABLES:
        lines = [":root {"]
        for color_name, shades in colors.items():
            for shade, hex_value in shades.items():
                lines.append(f"  --color-{color_name}-{shade}: {hex_value};")
        lines.append("}")
        return "\n".join(lines)

    if encoding is Encoding.KEYVALUE:
        return (
            "module.exports = {\n"
            "  theme: {\n"
            "    extend: {\n"
            f"      colors: {json.dumps(colors, indent=8, ensure_ascii=False)}\n"
            "    }\n"
            "  }\n"
            "}"
        )

    if encoding is Encoding.STRUCTURED:
        return json.dumps(colors, indent=2, ensure_ascii=False)

    raise UnsupportedEncoding(encoding.value, "팔레트")


# ============================================================
# 그라디언트
# ============================================================

def css_gradient(gradient: GradientStops) -> str:
    """linear-gradient(to right, #ff0000 0%, ...)"""
    parts = [gradient.css_direction]
    parts.extend(f"{stop.color.hex} {_format_position(stop.position)}" for stop in gradient)
    return f"linear-gradient({', '.join(parts)})"


def tailwind_gradient_classes(gradient: GradientStops) -> str:
    """bg-gradient-to-r from-[#..] via-[#..] to-[#..]"""
    stops = list(gradient)
    classes = [f"bg-gradient-{gradient.direction}", f"from-[{stops[0].color.hex}]"]
    if len(stops) > 2:
        classes.extend(f"via-[{stop.color.hex}]" for stop in stops[1:-1])
    classes.append(f"to-[{stops[-1].color.hex}]")
    return " ".join(classes)


def gradient_stop_list(gradient: GradientStops) -> list[dict]:
    return [{"color": stop.color.hex, "position": stop.position} for stop in gradient]


def format_gradient(gradient: GradientStops, encoding="gradient") -> str:
    """그라디언트를 지정 인코딩 문자열로 변환"""
    encoding = parse_encoding(encoding)

    if encoding is Encoding.KEYVALUE:
        return tailwind_gradient_classes(gradient)

    if encoding is Encoding.VARIABLES:
        lines = [":root {"]
        for index, stop in enumerate(gradient, start=1):
            lines.append(f"  --gradient-stop-{index}: {stop.color.hex} {_format_position(stop.position)};")
        lines.append(f"  --gradient: {css_gradient(gradient)};")
        lines.append("}")
        return "\n".join(lines)

    if encoding is Encoding.STRUCTURED:
        return json.dumps(
            {"direction": gradient.direction, "stops": gradient_stop_list(gradient)},
            indent=2,
            ensure_ascii=False,
        )

    return json.dumps(
        {"css": css_gradient(gradient), "stops": gradient_stop_list(gradient)},
        indent=2,
        ensure_ascii=False,
    )


def render(entity: Union[Palette, ColorScheme, GradientStops, Iterable[Palette]], encoding="js") -> str:
    """팔레트 / 팔레트 목록 / 스킴 / 그라디언트를 하나의 진입점으로 포맷"""
    if isinstance(entity, GradientStops):
        return format_gradient(entity, encoding)
    if isinstance(entity, Palette):
        return format_palettes([entity], encoding)
    return format_palettes(list(entity), encoding)
