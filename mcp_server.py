"""
tailwind-color-generator MCP 서버 (stdio)

클라이언트가 자식 프로세스로 실행하고 stdin/stdout으로 통신합니다.
도구 4종은 core.handle_request를 통해 인프로세스 도구와 같은 코드를 실행합니다.

사용법:
    python mcp_server.py
    LOG_LEVEL=DEBUG python mcp_server.py
"""

import sys
from typing import Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from config import get_config
from core import ToolManager, handle_request
from logging_config import get_logger, setup_logging_from_config

logger = get_logger("mcp_server")


def create_server(cfg=None, tool_mgr=None) -> FastMCP:
    """도구 4종이 등록된 FastMCP 서버 생성"""
    cfg = cfg or get_config()
    tool_mgr = tool_mgr or ToolManager()
    server = FastMCP(cfg.server_name)

    def _run(tool_name, **arguments):
        args = {k: v for k, v in arguments.items() if v is not None}
        response = handle_request({"name": tool_name, "arguments": args}, tool_mgr)
        text = response["content"][0]["text"]
        if response["isError"]:
            raise ToolError(text)
        return text

    @server.tool
    def generate_tailwind_palette(
        baseColor: str,
        name: Optional[str] = None,
        format: Optional[Literal["js", "css", "json"]] = None,
    ) -> str:
        """기준 색상으로 Tailwind 호환 색상 팔레트(50~950)를 생성합니다.

        Args:
            baseColor: 기준 색상 (예: '#3B82F6', 'hsl(220, 91%, 65%)', 'blue')
            name: 팔레트 이름 (기본값: primary)
            format: 출력 형식 (기본값: js)
        """
        return _run("generate_tailwind_palette", baseColor=baseColor, name=name, format=format)

    @server.tool
    def generate_color_scheme(
        strategy: Literal["complementary", "analogous", "monochromatic", "triadic"],
        baseHue: Optional[float] = None,
        colorNames: Optional[list[str]] = None,
        format: Optional[Literal["js", "css", "json"]] = None,
    ) -> str:
        """색상 조화 전략으로 여러 팔레트를 가진 컬러 스킴을 생성합니다.

        Args:
            strategy: 사용할 색상 조화 전략
            baseHue: 기준 색상각 (0~360도). 생략하면 무작위
            colorNames: 생성할 팔레트 이름 목록
            format: 출력 형식 (기본값: js)
        """
        return _run(
            "generate_color_scheme",
            strategy=strategy,
            baseHue=baseHue,
            colorNames=colorNames,
            format=format,
        )

    @server.tool
    def generate_gradient(
        colors: list[str],
        steps: Optional[int] = None,
        direction: Optional[Literal["to-t", "to-tr", "to-r", "to-br", "to-b", "to-bl", "to-l", "to-tl"]] = None,
        format: Optional[Literal["js", "css", "json", "gradient"]] = None,
    ) -> str:
        """2개 이상의 색상을 RGB 선형 보간하여 그라디언트를 생성합니다.

        Args:
            colors: 그라디언트 색상 목록 (2개 이상)
            steps: 정지점 개수 (2~50, 기본값: 10)
            direction: 그라디언트 방향 (기본값: to-r)
            format: 출력 형식 (기본값: gradient)
        """
        return _run("generate_gradient", colors=colors, steps=steps, direction=direction, format=format)

    @server.tool
    def analyze_color(color: str) -> str:
        """색상의 형식 변환, 휘도, 색온도, 접근성 대비를 분석합니다.

        Args:
            color: 분석할 색상 (HEX, rgb(), hsl(), CSS 색상명)
        """
        return _run("analyze_color", color=color)

    return server


def main() -> int:
    """stdio 서버 실행. 시작 실패 시 1 반환"""
    load_dotenv()
    cfg = get_config()
    setup_logging_from_config(cfg)

    try:
        server = create_server(cfg)
    except Exception:
        logger.exception("서버 초기화 실패")
        return 1

    logger.info("%s MCP 서버 실행 중 (stdio)", cfg.server_name)
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("서버 종료")
    except Exception:
        logger.exception("서버 오류")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
