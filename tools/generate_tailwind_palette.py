"""
generate_tailwind_palette - 기준 색상 하나로 Tailwind 11단계 팔레트 생성
"""

from colorgen.errors import PaletteError
from colorgen.formatter import format_palettes
from colorgen.shades import derive_palette
from config import get_config

SCHEMA = {
    "name": "generate_tailwind_palette",
    "description": "기준 색상으로 Tailwind 호환 색상 팔레트(50~950)를 생성합니다.",
    "input_schema": {
        "type": "object",
        "properties": {
            "baseColor": {
                "type": "string",
                "description": "기준 색상 (예: '#3B82F6', 'hsl(220, 91%, 65%)', 'blue')",
            },
            "name": {
                "type": "string",
                "description": "팔레트 이름 (기본값: primary)",
            },
            "format": {
                "type": "string",
                "enum": ["js", "css", "json"],
                "description": "출력 형식 (기본값: js)",
            },
        },
        "required": ["baseColor"],
    },
}


def main(baseColor, name=None, format=None):
    cfg = get_config()
    name = name or cfg.default_palette_name
    format = format or cfg.default_format

    try:
        palette = derive_palette(baseColor, name)
        config_text = format_palettes([palette], format)
    except PaletteError as e:
        return f"Error: {e}"

    details = "\n".join(f"- {name}-{shade}: {color.hex}" for shade, color in palette)
    return (
        f'"{name}" 팔레트 생성 완료 (기준 색상 "{baseColor}"):\n\n'
        f"{config_text}\n\n"
        f"팔레트 상세:\n{details}"
    )


if __name__ == "__main__":
    import sys, json
    if len(sys.argv) > 1:
        print(main(*sys.argv[1:4]))
    else:
        print(json.dumps(SCHEMA, indent=2, ensure_ascii=False))
