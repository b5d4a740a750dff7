"""
색상 값 모델 (HEX, RGB, HSL, CSS 색상명)

모든 색상은 8비트 RGB 채널 3개로 저장되며,
정규 표현은 소문자 #rrggbb 입니다. 동등성 비교도 정규 표현 기준입니다.

사용법:
    from colorgen.color import Color
    c = Color.parse("hsl(220, 91%, 60%)")
    print(c.hex, c.rgb, c.hsl)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from colorgen.errors import InvalidColorFormat

# CSS Color Level 4 색상명 (grey 철자 포함 148개)
CSS_COLORS = {
    "aliceblue": (240, 248, 255), "antiquewhite": (250, 235, 215), "aqua": (0, 255, 255),
    "aquamarine": (127, 255, 212), "azure": (240, 255, 255), "beige": (245, 245, 220),
    "bisque": (255, 228, 196), "black": (0, 0, 0), "blanchedalmond": (255, 235, 205),
    "blue": (0, 0, 255), "blueviolet": (138, 43, 226), "brown": (165, 42, 42),
    "burlywood": (222, 184, 135), "cadetblue": (95, 158, 160), "chartreuse": (127, 255, 0),
    "chocolate": (210, 105, 30), "coral": (255, 127, 80), "cornflowerblue": (100, 149, 237),
    "cornsilk": (255, 248, 220), "crimson": (220, 20, 60), "cyan": (0, 255, 255),
    "darkblue": (0, 0, 139), "darkcyan": (0, 139, 139), "darkgoldenrod": (184, 134, 11),
    "darkgray": (169, 169, 169), "darkgreen": (0, 100, 0), "darkgrey": (169, 169, 169),
    "darkkhaki": (189, 183, 107), "darkmagenta": (139, 0, 139), "darkolivegreen": (85, 107, 47),
    "darkorange": (255, 140, 0), "darkorchid": (153, 50, 204), "darkred": (139, 0, 0),
    "darksalmon": (233, 150, 122), "darkseagreen": (143, 188, 143), "darkslateblue": (72, 61, 139),
    "darkslategray": (47, 79, 79), "darkslategrey": (47, 79, 79), "darkturquoise": (0, 206, 209),
    "darkviolet": (148, 0, 211), "deeppink": (255, 20, 147), "deepskyblue": (0, 191, 255),
    "dimgray": (105, 105, 105), "dimgrey": (105, 105, 105), "dodgerblue": (30, 144, 255),
    "firebrick": (178, 34, 34), "floralwhite": (255, 250, 240), "forestgreen": (34, 139, 34),
    "fuchsia": (255, 0, 255), "gainsboro": (220, 220, 220), "ghostwhite": (248, 248, 255),
    "gold": (255, 215, 0), "goldenrod": (218, 165, 32), "gray": (128, 128, 128),
    "green": (0, 128, 0), "greenyellow": (173, 255, 47), "grey": (128, 128, 128),
    "honeydew": (240, 255, 240), "hotpink": (255, 105, 180), "indianred": (205, 92, 92),
    "indigo": (75, 0, 130), "ivory": (255, 255, 240), "khaki": (240, 230, 140),
    "lavender": (230, 230, 250), "lavenderblush": (255, 240, 245), "lawngreen": (124, 252, 0),
    "lemonchiffon": (255, 250, 205), "lightblue": (173, 216, 230), "lightcoral": (240, 128, 128),
    "lightcyan": (224, 255, 255), "lightgoldenrodyellow": (250, 250, 210), "lightgray": (211, 211, 211),
    "lightgreen": (144, 238, 144), "lightgrey": (211, 211, 211), "lightpink": (255, 182, 193),
    "lightsalmon": (255, 160, 122), "lightseagreen": (32, 178, 170), "lightskyblue": (135, 206, 250),
    "lightslategray": (119, 136, 153), "lightslategrey": (119, 136, 153), "lightsteelblue": (176, 196, 222),
    "lightyellow": (255, 255, 224), "lime": (0, 255, 0), "limegreen": (50, 205, 50),
    "linen": (250, 240, 230), "magenta": (255, 0, 255), "maroon": (128, 0, 0),
    "mediumaquamarine": (102, 205, 170), "mediumblue": (0, 0, 205), "mediumorchid": (186, 85, 211),
    "mediumpurple": (147, 112, 219), "mediumseagreen": (60, 179, 113), "mediumslateblue": (123, 104, 238),
    "mediumspringgreen": (0, 250, 154), "mediumturquoise": (72, 209, 204), "mediumvioletred": (199, 21, 133),
    "midnightblue": (25, 25, 112), "mintcream": (245, 255, 250), "mistyrose": (255, 228, 225),
    "moccasin": (255, 228, 181), "navajowhite": (255, 222, 173), "navy": (0, 0, 128),
    "oldlace": (253, 245, 230), "olive": (128, 128, 0), "olivedrab": (107, 142, 35),
    "orange": (255, 165, 0), "orangered": (255, 69, 0), "orchid": (218, 112, 214),
    "palegoldenrod": (238, 232, 170), "palegreen": (152, 251, 152), "paleturquoise": (175, 238, 238),
    "palevioletred": (219, 112, 147), "papayawhip": (255, 239, 213), "peachpuff": (255, 218, 185),
    "peru": (205, 133, 63), "pink": (255, 192, 203), "plum": (221, 160, 221),
    "powderblue": (176, 224, 230), "purple": (128, 0, 128), "rebeccapurple": (102, 51, 153),
    "red": (255, 0, 0), "rosybrown": (188, 143, 143), "royalblue": (65, 105, 225),
    "saddlebrown": (139, 69, 19), "salmon": (250, 128, 114), "sandybrown": (244, 164, 96),
    "seagreen": (46, 139, 87), "seashell": (255, 245, 238), "sienna": (160, 82, 45),
    "silver": (192, 192, 192), "skyblue": (135, 206, 235), "slateblue": (106, 90, 205),
    "slategray": (112, 128, 144), "slategrey": (112, 128, 144), "snow": (255, 250, 250),
    "springgreen": (0, 255, 127), "steelblue": (70, 130, 180), "tan": (210, 180, 140),
    "teal": (0, 128, 128), "thistle": (216, 191, 216), "tomato": (255, 99, 71),
    "turquoise": (64, 224, 208), "violet": (238, 130, 238), "wheat": (245, 222, 179),
    "white": (255, 255, 255), "whitesmoke": (245, 245, 245), "yellow": (255, 255, 0),
    "yellowgreen": (154, 205, 50),
}

_NUM = r"(\d+(?:\.\d+)?)"
_RGB_RE = re.compile(rf"rgb\s*\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}\s*\)$")
_HSL_RE = re.compile(rf"hsl\s*\(\s*(-?\d+(?:\.\d+)?)(?:deg)?\s*,\s*{_NUM}%?\s*,\s*{_NUM}%?\s*\)$")
_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def _clamp_channel(value):
    return max(0, min(255, _round_half_up(value)))


def _parse_hex(color):
    m = _HEX_RE.fullmatch(color.strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _parse_rgb(color):
    m = _RGB_RE.match(color.strip())
    if m:
        r, g, b = (_round_half_up(float(v)) for v in m.groups())
        if all(0 <= v <= 255 for v in (r, g, b)):
            return (r, g, b)
    return None


def _parse_hsl(color):
    """hsl(h, s%, l%) → (h, s, l), s/l은 0~1 범위"""
    m = _HSL_RE.match(color.strip())
    if m:
        h, s, l = float(m.group(1)), float(m.group(2)), float(m.group(3))
        if s <= 100 and l <= 100:
            return (h, s / 100.0, l / 100.0)
    return None


def _rgb_to_hsl(r, g, b):
    """RGB(0~255) → HSL (h: 0~360, s/l: 0~1, 반올림 없음)"""
    r1, g1, b1 = r / 255.0, g / 255.0, b / 255.0
    cmax = max(r1, g1, b1)
    cmin = min(r1, g1, b1)
    delta = cmax - cmin
    l = (cmax + cmin) / 2.0

    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        s = delta / (1 - abs(2 * l - 1))
        if cmax == r1:
            h = 60 * (((g1 - b1) / delta) % 6)
        elif cmax == g1:
            h = 60 * ((b1 - r1) / delta + 2)
        else:
            h = 60 * ((r1 - g1) / delta + 4)

    return (h % 360, s, l)


def _hsl_to_rgb(h, s, l):
    h = h % 360
    s = max(0.0, min(1.0, s))
    l = max(0.0, min(1.0, l))
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60.0) % 2 - 1))
    m = l - c / 2.0

    if h < 60:
        r1, g1, b1 = c, x, 0
    elif h < 120:
        r1, g1, b1 = x, c, 0
    elif h < 180:
        r1, g1, b1 = 0, c, x
    elif h < 240:
        r1, g1, b1 = 0, x, c
    elif h < 300:
        r1, g1, b1 = x, 0, c
    else:
        r1, g1, b1 = c, 0, x

    return (
        _clamp_channel((r1 + m) * 255),
        _clamp_channel((g1 + m) * 255),
        _clamp_channel((b1 + m) * 255),
    )


@dataclass(frozen=True)
class Color:
    """불변 RGB 색상 값"""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidColorFormat((self.r, self.g, self.b))

    @classmethod
    def parse(cls, value) -> "Color":
        """색상 문자열(또는 Color)을 Color로 변환

        지원 형식: '#3B82F6', '3b82f6', '#abc', 'rgb(59,130,246)',
        'hsl(217, 91%, 60%)', CSS 색상명('blue').
        """
        if isinstance(value, Color):
            return value
        if not isinstance(value, str) or not value.strip():
            raise InvalidColorFormat(value)

        color = value.strip().lower()
        if color in CSS_COLORS:
            return cls(*CSS_COLORS[color])
        rgb = _parse_hex(color)
        if rgb:
            return cls(*rgb)
        rgb = _parse_rgb(color)
        if rgb:
            return cls(*rgb)
        hsl = _parse_hsl(color)
        if hsl:
            return cls.from_hsl(*hsl)
        raise InvalidColorFormat(value)

    @classmethod
    def from_hsl(cls, h, s, l) -> "Color":
        """HSL → Color (h는 360으로 순환, s/l은 0~1로 제한)"""
        if not all(math.isfinite(v) for v in (h, s, l)):
            raise InvalidColorFormat(f"hsl({h}, {s}, {l})")
        return cls(*_hsl_to_rgb(h, s, l))

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(self.r, self.g, self.b)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hsl(self) -> tuple[float, float, float]:
        return _rgb_to_hsl(self.r, self.g, self.b)

    @property
    def hue(self) -> float:
        return self.hsl[0]

    @property
    def lightness(self) -> float:
        return self.hsl[2]

    def closest_css_name(self) -> str:
        """RGB 유클리드 거리 기준 가장 가까운 CSS 색상명"""
        closest = None
        min_dist = float("inf")
        for name, (cr, cg, cb) in CSS_COLORS.items():
            dist = math.sqrt((self.r - cr) ** 2 + (self.g - cg) ** 2 + (self.b - cb) ** 2)
            if dist < min_dist:
                min_dist = dist
                closest = name
        return closest

    def __str__(self):
        return self.hex
