"""ToolManager / 요청 디스패처 테스트"""
import shutil
import pytest
from types import SimpleNamespace

from colorgen.errors import PaletteError, UnknownOperation
from core import (
    TOOL_FILES,
    ToolManager,
    _DEFAULT_TOOLS_DIR,
    call_tool,
    execute_tool,
    handle_request,
    text_response,
)


EXPECTED_NAMES = [
    "generate_tailwind_palette",
    "generate_color_scheme",
    "generate_gradient",
    "analyze_color",
]


class TestToolManager:
    """도구 로딩 테스트"""

    def test_loads_four_tools_in_order(self, tool_mgr):
        assert [s["name"] for s in tool_mgr.schemas] == EXPECTED_NAMES
        assert list(tool_mgr.functions) == EXPECTED_NAMES

    def test_contains_and_get_schema(self, tool_mgr):
        assert "analyze_color" in tool_mgr
        assert "web_search" not in tool_mgr
        assert tool_mgr.get_schema("generate_gradient")["input_schema"]["required"] == ["colors"]
        assert tool_mgr.get_schema("missing") is None

    def test_missing_file_skipped(self, tmp_path):
        """없는 도구 파일은 건너뛰고 나머지만 로드"""
        shutil.copy(f"{_DEFAULT_TOOLS_DIR}/analyze_color.py", tmp_path / "analyze_color.py")
        mgr = ToolManager(tools_dir=str(tmp_path))
        assert list(mgr.functions) == ["analyze_color"]

    def test_module_without_schema_skipped(self, tmp_path):
        (tmp_path / "analyze_color.py").write_text("def main(color):\n    return color\n")
        mgr = ToolManager(tools_dir=str(tmp_path), tool_files=["analyze_color.py"])
        assert mgr.functions == {}

    def test_broken_module_skipped(self, tmp_path):
        (tmp_path / "analyze_color.py").write_text("raise RuntimeError('boom')\n")
        mgr = ToolManager(tools_dir=str(tmp_path), tool_files=["analyze_color.py"])
        assert mgr.schemas == []

    def test_only_allowlisted_files_loaded(self, tmp_path):
        """목록에 없는 파일은 로드하지 않음"""
        for fname in TOOL_FILES:
            shutil.copy(f"{_DEFAULT_TOOLS_DIR}/{fname}", tmp_path / fname)
        (tmp_path / "extra.py").write_text(
            "SCHEMA = {'name': 'extra', 'description': '', 'input_schema': {}}\n"
            "def main():\n    return 'x'\n"
        )
        mgr = ToolManager(tools_dir=str(tmp_path))
        assert "extra" not in mgr


class TestCallTool:
    """call_tool 테스트"""

    def test_success(self, tool_mgr):
        text = call_tool("analyze_color", {"color": "#ffffff"}, tool_mgr)
        assert "- Hex: #ffffff" in text

    def test_unknown_operation(self, tool_mgr):
        with pytest.raises(UnknownOperation):
            call_tool("shout", {}, tool_mgr)

    def test_missing_required(self, tool_mgr):
        with pytest.raises(PaletteError) as exc_info:
            call_tool("generate_gradient", {"steps": 3}, tool_mgr)
        assert "colors" in str(exc_info.value)

    def test_wrong_type_treated_as_missing(self, tool_mgr):
        """타입이 틀린 필수 인자는 필터링되어 누락으로 처리"""
        with pytest.raises(PaletteError):
            call_tool("analyze_color", {"color": 123}, tool_mgr)

    def test_extra_keys_ignored(self, tool_mgr):
        text = call_tool("analyze_color", {"color": "black", "verbose": True}, tool_mgr)
        assert "- Hex: #000000" in text


class TestHandleRequest:
    """handle_request 응답 형태 테스트"""

    def test_text_response_shape(self):
        assert text_response("ok") == {"content": [{"type": "text", "text": "ok"}], "isError": False}

    def test_success(self, tool_mgr):
        response = handle_request(
            {"name": "generate_gradient", "arguments": {"colors": ["#FF0000", "#0000FF"], "steps": 3}},
            tool_mgr,
        )
        assert response["isError"] is False
        assert response["content"][0]["type"] == "text"
        assert "#800080" in response["content"][0]["text"]

    def test_unknown_tool(self, tool_mgr):
        response = handle_request({"name": "nope", "arguments": {}}, tool_mgr)
        assert response["isError"] is True
        assert response["content"][0]["text"].startswith("Error:")
        assert "nope" in response["content"][0]["text"]

    def test_domain_error_is_error(self, tool_mgr):
        response = handle_request({"name": "analyze_color", "arguments": {"color": "nope"}}, tool_mgr)
        assert response["isError"] is True
        assert response["content"][0]["text"].startswith("Error:")

    def test_missing_arguments_key(self, tool_mgr):
        response = handle_request({"name": "analyze_color"}, tool_mgr)
        assert response["isError"] is True

    def test_non_dict_request(self, tool_mgr):
        assert handle_request(["analyze_color"], tool_mgr)["isError"] is True

    def test_non_dict_arguments(self, tool_mgr):
        response = handle_request({"name": "analyze_color", "arguments": "red"}, tool_mgr)
        assert response["isError"] is True

    def test_unexpected_exception_contained(self, tool_mgr):
        """도구 내부 예외는 오류 응답으로 변환"""
        def explode(color):
            raise RuntimeError("boom")

        tool_mgr.functions["analyze_color"] = explode
        response = handle_request({"name": "analyze_color", "arguments": {"color": "red"}}, tool_mgr)
        assert response["isError"] is True
        assert response["content"][0]["text"] == "Error: analyze_color 실행 실패"


class TestExecuteTool:
    """tool_result 변환 테스트"""

    def test_success(self, tool_mgr):
        tool_use = SimpleNamespace(name="analyze_color", id="toolu_1", input={"color": "white"})
        result = execute_tool(tool_use, tool_mgr)
        assert result["type"] == "tool_result"
        assert result["tool_use_id"] == "toolu_1"
        assert "is_error" not in result
        assert "- Hex: #ffffff" in result["content"]

    def test_error(self, tool_mgr):
        tool_use = SimpleNamespace(name="generate_color_scheme", id="toolu_2", input={"strategy": "x"})
        result = execute_tool(tool_use, tool_mgr)
        assert result["is_error"] is True
        assert result["content"].startswith("Error:")
