"""
generate_color_scheme - 색상 조화 전략으로 팔레트 3개짜리 컬러 스킴 생성
"""

from colorgen.errors import PaletteError
from colorgen.formatter import format_palettes
from colorgen.scheme import STRATEGIES, derive_scheme
from config import get_config

SCHEMA = {
    "name": "generate_color_scheme",
    "description": "색상 조화 전략(보색, 유사색, 단색, 삼각 배색)으로 여러 팔레트를 가진 컬러 스킴을 생성합니다.",
    "input_schema": {
        "type": "object",
        "properties": {
            "strategy": {
                "type": "string",
                "enum": list(STRATEGIES),
                "description": "사용할 색상 조화 전략",
            },
            "baseHue": {
                "type": "number",
                "description": "기준 색상각 (0~360도). 생략하면 무작위",
            },
            "colorNames": {
                "type": "array",
                "items": {"type": "string"},
                "description": "생성할 팔레트 이름 목록 (기본값: primary, secondary, accent)",
            },
            "format": {
                "type": "string",
                "enum": ["js", "css", "json"],
                "description": "출력 형식 (기본값: js)",
            },
        },
        "required": ["strategy"],
    },
}


def _breakdown(palette):
    shades = ", ".join(f"{shade}({color.hex})" for shade, color in palette)
    return f"- {palette.name}: {shades}"


def main(strategy, baseHue=None, colorNames=None, format=None):
    cfg = get_config()
    names = colorNames if colorNames else cfg.color_names
    format = format or cfg.default_format

    try:
        scheme = derive_scheme(strategy, baseHue, names)
        config_text = format_palettes(scheme.palettes, format)
    except PaletteError as e:
        return f"Error: {e}"

    breakdown = "\n".join(_breakdown(p) for p in scheme)
    return (
        f"{scheme.strategy} 컬러 스킴 생성 완료 (기준 색상각: {round(scheme.base_hue)}°):\n\n"
        f"{config_text}\n\n"
        f"색상 구성:\n{breakdown}"
    )


if __name__ == "__main__":
    import sys, json
    if len(sys.argv) > 2:
        print(main(sys.argv[1], float(sys.argv[2])))
    elif len(sys.argv) > 1:
        print(main(sys.argv[1]))
    else:
        print(json.dumps(SCHEMA, indent=2, ensure_ascii=False))
