"""
analyze_color - 색상 형식 변환, 휘도, 색온도, 접근성 대비 분석
"""

from colorgen.analysis import analyze_color
from colorgen.errors import PaletteError

SCHEMA = {
    "name": "analyze_color",
    "description": "색상을 분석하여 형식 변환, 휘도, 색온도, 흰색/검은색 대비, 권장 텍스트 색상을 알려줍니다.",
    "input_schema": {
        "type": "object",
        "properties": {
            "color": {
                "type": "string",
                "description": "분석할 색상 (HEX, rgb(), hsl(), CSS 색상명)",
            },
        },
        "required": ["color"],
    },
}


def main(color):
    try:
        result = analyze_color(color)
    except PaletteError as e:
        return f"Error: {e}"

    r, g, b = result.color.rgb
    h, s, l = result.hsl
    return "\n".join([
        f'"{color}" 색상 분석:',
        "",
        "형식 변환:",
        f"- Hex: {result.color.hex}",
        f"- RGB: rgb({r}, {g}, {b})",
        f"- HSL: hsl({round(h)}, {round(s * 100)}%, {round(l * 100)}%)",
        f"- 가장 가까운 CSS 색상명: {result.closest_name}",
        "",
        "속성:",
        f"- 휘도: {result.luminance:.3f}",
        f"- 색온도: {result.temperature}K",
        f"- 명도: {round(l * 100)}%",
        f"- 채도: {round(s * 100)}%",
        "",
        "접근성:",
        f"- 흰색 대비: {result.contrast_white:.2f}",
        f"- 검은색 대비: {result.contrast_black:.2f}",
        f"- 권장 텍스트 색상: {result.recommended_text}",
    ])


if __name__ == "__main__":
    import sys, json
    if len(sys.argv) > 1:
        print(main(sys.argv[1]))
    else:
        print(json.dumps(SCHEMA, indent=2, ensure_ascii=False))
