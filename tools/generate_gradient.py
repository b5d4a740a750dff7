"""
generate_gradient - 색상 목록을 선형 보간한 그라디언트 생성
"""

from colorgen.errors import PaletteError
from colorgen.formatter import format_gradient
from colorgen.gradient import DIRECTIONS, build_gradient
from config import get_config

SCHEMA = {
    "name": "generate_gradient",
    "description": "2개 이상의 색상을 RGB 선형 보간하여 그라디언트 정지점과 CSS/Tailwind 코드를 생성합니다.",
    "input_schema": {
        "type": "object",
        "properties": {
            "colors": {
                "type": "array",
                "items": {"type": "string"},
                "description": "그라디언트 색상 목록 (2개 이상, 예: ['#FF0000', '#0000FF'])",
            },
            "steps": {
                "type": "integer",
                "description": "정지점 개수 (2~50, 기본값: 10)",
            },
            "direction": {
                "type": "string",
                "enum": list(DIRECTIONS),
                "description": "그라디언트 방향 (기본값: to-r)",
            },
            "format": {
                "type": "string",
                "enum": ["js", "css", "json", "gradient"],
                "description": "출력 형식 (기본값: gradient)",
            },
        },
        "required": ["colors"],
    },
}


def main(colors, steps=None, direction=None, format=None):
    cfg = get_config()
    steps = cfg.default_gradient_steps if steps is None else steps
    direction = direction or cfg.default_gradient_direction
    format = format or cfg.default_gradient_format

    try:
        gradient = build_gradient(
            colors,
            steps,
            direction,
            min_steps=cfg.min_gradient_steps,
            max_steps=cfg.max_gradient_steps,
        )
        output = format_gradient(gradient, format)
    except PaletteError as e:
        return f"Error: {e}"

    stops = "\n".join(f"- {stop.position:g}%: {stop.color.hex}" for stop in gradient)
    return (
        f"그라디언트 생성 완료 ({len(gradient)}단계, {gradient.direction}):\n\n"
        f"{output}\n\n"
        f"정지점:\n{stops}"
    )


if __name__ == "__main__":
    import sys, json
    if len(sys.argv) > 2:
        print(main(sys.argv[1:]))
    else:
        print(json.dumps(SCHEMA, indent=2, ensure_ascii=False))
