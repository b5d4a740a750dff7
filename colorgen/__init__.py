"""
colorgen - Tailwind 색상 팔레트 / 스킴 / 그라디언트 계산 코어

모든 연산은 입력만으로 결정되는 순수 함수이며 공유 상태가 없습니다.
"""

from colorgen.analysis import ColorAnalysis, analyze_color
from colorgen.color import Color
from colorgen.errors import (
    InsufficientColors,
    InvalidColorFormat,
    InvalidDirection,
    InvalidHue,
    PaletteError,
    UnknownOperation,
    UnknownStrategy,
    UnsupportedEncoding,
)
from colorgen.formatter import Encoding, format_gradient, format_palettes, render
from colorgen.gradient import GradientStop, GradientStops, build_gradient
from colorgen.scheme import ColorScheme, derive_scheme
from colorgen.shades import SHADE_KEYS, Palette, derive_palette

__all__ = [
    "Color",
    "Palette",
    "SHADE_KEYS",
    "derive_palette",
    "ColorScheme",
    "derive_scheme",
    "GradientStop",
    "GradientStops",
    "build_gradient",
    "ColorAnalysis",
    "analyze_color",
    "Encoding",
    "format_palettes",
    "format_gradient",
    "render",
    "PaletteError",
    "InvalidColorFormat",
    "UnknownStrategy",
    "InsufficientColors",
    "InvalidDirection",
    "InvalidHue",
    "UnsupportedEncoding",
    "UnknownOperation",
]
