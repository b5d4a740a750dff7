"""
tailwind-color-generator 공유 코어 모듈

mcp_server.py, palette_cli.py 및 인프로세스 호스트에서 공통으로 사용하는
도구 로딩/실행 로직을 단일 모듈로 모았습니다.

포함 기능:
- ToolManager (고정 도구 4종 로드)
- 도구 입력 필터링 및 타입 검증
- 도구 실행 헬퍼 (Anthropic tool_result 형식)
- 요청/응답 디스패처 ({"name", "arguments"} → {"content": [...]})
"""

import os
import importlib.util

from colorgen.errors import PaletteError, UnknownOperation
from logging_config import get_logger

logger = get_logger("core")

__all__ = [
    "TOOL_FILES",
    "ToolManager",
    "_TYPE_MAP",
    "_filter_tool_input",
    "execute_tool",
    "call_tool",
    "handle_request",
    "text_response",
]

# 등록 순서 = 노출 순서
TOOL_FILES = (
    "generate_tailwind_palette.py",
    "generate_color_scheme.py",
    "generate_gradient.py",
    "analyze_color.py",
)

_DEFAULT_TOOLS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "tools")


# ============================================================
# ToolManager
# ============================================================

class ToolManager:
    """tools/ 폴더의 고정 도구 모듈을 로드하여 스키마와 함수를 보관"""

    def __init__(self, tools_dir=None, tool_files=TOOL_FILES):
        self.tools_dir = tools_dir or _DEFAULT_TOOLS_DIR
        self.tool_files = tuple(tool_files)
        self.schemas = []
        self.functions = {}
        self._load_all()

    def _load_module(self, filename):
        """단일 .py 파일을 로드하여 (schema, func) 또는 None 반환"""
        filepath = os.path.join(self.tools_dir, filename)
        module_name = f"colorgen_tool_{filename[:-3]}"
        if not os.path.isfile(filepath):
            logger.warning("도구 파일 없음: %s", filepath)
            return None

        try:
            module_spec = importlib.util.spec_from_file_location(module_name, filepath)
            module = importlib.util.module_from_spec(module_spec)
            module_spec.loader.exec_module(module)
        except Exception as e:
            logger.error("도구 로드 실패: %s: %s", filename, e)
            return None
        if hasattr(module, "SCHEMA") and hasattr(module, "main"):
            return module.SCHEMA, module.main
        logger.warning("SCHEMA/main 없음: %s", filename)
        return None

    def _load_all(self):
        """고정 도구 목록을 순서대로 로드"""
        self.schemas = []
        self.functions = {}
        for fname in self.tool_files:
            result = self._load_module(fname)
            if result:
                schema, func = result
                self.schemas.append(schema)
                self.functions[schema["name"]] = func
        logger.info("도구 %d개 로드됨: %s", len(self.functions), ", ".join(self.functions.keys()))

    def get_schema(self, name):
        return next((s for s in self.schemas if s["name"] == name), None)

    def __contains__(self, name):
        return name in self.functions


# ============================================================
# 도구 입력 필터링
# ============================================================

_TYPE_MAP = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "array": (list, tuple),
    "object": dict,
}


def _filter_tool_input(tool_input, schema):
    """도구 입력을 스키마에 정의된 키로만 필터링 + 타입 검증"""
    properties = schema.get("input_schema", {}).get("properties", {})
    if not properties:
        return tool_input
    filtered = {}
    for k, v in tool_input.items():
        if k not in properties:
            continue
        expected_type = properties[k].get("type")
        if expected_type and expected_type in _TYPE_MAP:
            if not isinstance(v, _TYPE_MAP[expected_type]):
                continue  # 타입 불일치 → 무시
            # bool은 int의 하위 타입
            if expected_type in ("integer", "number") and isinstance(v, bool):
                continue
        filtered[k] = v
    return filtered


# ============================================================
# 도구 실행 헬퍼
# ============================================================

def call_tool(name, arguments, tool_mgr):
    """도구 이름과 인자로 실행하여 텍스트 결과 반환

    Raises:
        UnknownOperation: 등록되지 않은 도구
        PaletteError: 필수 인자 누락 등 도구 호출 자체가 불가능할 때
    """
    fn = tool_mgr.functions.get(name)
    if not fn:
        raise UnknownOperation(name)

    schema = tool_mgr.get_schema(name)
    filtered_input = _filter_tool_input(arguments or {}, schema) if schema else (arguments or {})

    required = schema.get("input_schema", {}).get("required", []) if schema else []
    missing = [k for k in required if k not in filtered_input]
    if missing:
        raise PaletteError(f"필수 인자 누락: {', '.join(missing)}")

    return str(fn(**filtered_input))


def text_response(text, is_error=False):
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


def handle_request(request, tool_mgr):
    """파이프 요청 하나를 처리

    Args:
        request: {"name": 도구 이름, "arguments": {...}}
        tool_mgr: ToolManager 인스턴스

    Returns:
        dict: {"content": [{"type": "text", "text": ...}], "isError": bool}
    """
    if not isinstance(request, dict):
        return text_response("Error: 요청은 JSON 객체여야 합니다.", is_error=True)

    name = request.get("name")
    arguments = request.get("arguments") or {}
    if not isinstance(arguments, dict):
        return text_response("Error: arguments는 JSON 객체여야 합니다.", is_error=True)

    try:
        result = call_tool(name, arguments, tool_mgr)
    except PaletteError as e:
        logger.info("요청 거부: %s: %s", name, e)
        return text_response(f"Error: {e}", is_error=True)
    except Exception:
        logger.exception("도구 실행 실패: %s", name)
        return text_response(f"Error: {name} 실행 실패", is_error=True)

    return text_response(result, is_error=result.startswith("Error:"))


def execute_tool(tool_use, tool_mgr):
    """도구 호출 실행 및 결과 반환

    Args:
        tool_use: Claude API tool_use 블록 (name, id, input 속성)
        tool_mgr: ToolManager 인스턴스

    Returns:
        dict: tool_result 형식의 딕셔너리
    """
    response = handle_request({"name": tool_use.name, "arguments": tool_use.input}, tool_mgr)
    result = {
        "type": "tool_result",
        "tool_use_id": tool_use.id,
        "content": response["content"][0]["text"],
    }
    if response["isError"]:
        result["is_error"] = True
    return result
