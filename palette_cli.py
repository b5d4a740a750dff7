"""
tailwind-color-generator 명령줄 도구

argparse 기반 CLI. 도구 4종을 터미널에서 실행하고 스키마를 확인합니다.

사용법:
    python palette_cli.py palette "#3B82F6" --name primary --format css
    python palette_cli.py scheme triadic --hue 200 --names brand accent muted
    python palette_cli.py gradient "#FF0000" "#0000FF" --steps 5 --direction to-br
    python palette_cli.py analyze coral
    python palette_cli.py tools --json
"""

from __future__ import annotations

import argparse
import json
import sys

from dotenv import load_dotenv

from colorgen.gradient import DIRECTIONS
from colorgen.scheme import STRATEGIES
from config import get_config
from core import ToolManager, handle_request
from logging_config import setup_logging_from_config


def build_parser() -> argparse.ArgumentParser:
    """argparse 파서 구성"""
    parser = argparse.ArgumentParser(
        prog="palette",
        description="Tailwind 색상 팔레트 생성기",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="서브커맨드")

    # ========== palette ==========
    palette_parser = subparsers.add_parser("palette", help="기준 색상으로 팔레트 생성")
    palette_parser.add_argument("base_color", help="기준 색상 (예: #3B82F6, blue)")
    palette_parser.add_argument("--name", help="팔레트 이름")
    palette_parser.add_argument("--format", choices=["js", "css", "json"], help="출력 형식")

    # ========== scheme ==========
    scheme_parser = subparsers.add_parser("scheme", help="색상 조화 스킴 생성")
    scheme_parser.add_argument("strategy", choices=list(STRATEGIES), help="조화 전략")
    scheme_parser.add_argument("--hue", type=float, help="기준 색상각 (0~360)")
    scheme_parser.add_argument("--names", nargs="+", help="팔레트 이름 목록")
    scheme_parser.add_argument("--format", choices=["js", "css", "json"], help="출력 형식")

    # ========== gradient ==========
    gradient_parser = subparsers.add_parser("gradient", help="그라디언트 생성")
    gradient_parser.add_argument("colors", nargs="+", help="색상 목록 (2개 이상)")
    gradient_parser.add_argument("--steps", type=int, help="정지점 개수 (2~50)")
    gradient_parser.add_argument("--direction", choices=list(DIRECTIONS), help="방향")
    gradient_parser.add_argument("--format", choices=["js", "css", "json", "gradient"], help="출력 형식")

    # ========== analyze ==========
    analyze_parser = subparsers.add_parser("analyze", help="색상 분석")
    analyze_parser.add_argument("color", help="분석할 색상")

    # ========== tools ==========
    tools_parser = subparsers.add_parser("tools", help="등록된 도구 스키마 목록")
    tools_parser.add_argument("--json", action="store_true", help="JSON 형식 출력")

    return parser


def _request_from_args(args) -> dict:
    """서브커맨드 인자 → {"name", "arguments"} 요청"""
    if args.command == "palette":
        name = "generate_tailwind_palette"
        arguments = {"baseColor": args.base_color, "name": args.name, "format": args.format}
    elif args.command == "scheme":
        name = "generate_color_scheme"
        arguments = {
            "strategy": args.strategy,
            "baseHue": args.hue,
            "colorNames": args.names,
            "format": args.format,
        }
    elif args.command == "gradient":
        name = "generate_gradient"
        arguments = {
            "colors": args.colors,
            "steps": args.steps,
            "direction": args.direction,
            "format": args.format,
        }
    else:
        name = "analyze_color"
        arguments = {"color": args.color}
    return {"name": name, "arguments": {k: v for k, v in arguments.items() if v is not None}}


def cmd_tools(args, tool_mgr) -> int:
    if args.json:
        print(json.dumps(tool_mgr.schemas, indent=2, ensure_ascii=False))
        return 0
    for schema in tool_mgr.schemas:
        params = schema.get("input_schema", {}).get("properties", {})
        required = set(schema.get("input_schema", {}).get("required", []))
        param_text = ", ".join(f"{p}*" if p in required else p for p in params)
        print(f"{schema['name']}({param_text})")
        print(f"  {schema['description']}")
    return 0


def main(argv=None) -> int:
    """CLI 엔트리포인트"""
    load_dotenv()
    setup_logging_from_config(get_config())

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    tool_mgr = ToolManager()
    if args.command == "tools":
        return cmd_tools(args, tool_mgr)

    response = handle_request(_request_from_args(args), tool_mgr)
    text = response["content"][0]["text"]
    if response["isError"]:
        print(text, file=sys.stderr)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
