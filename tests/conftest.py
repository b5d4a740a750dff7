import os
import sys
import random
import pytest

# 프로젝트 루트를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import reset_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch, tmp_path):
    """작업 디렉토리의 config.json / 환경변수 영향 제거"""
    monkeypatch.chdir(tmp_path)
    for name in (
        "PALETTE_DEFAULT_NAME", "PALETTE_DEFAULT_FORMAT", "PALETTE_COLOR_NAMES",
        "GRADIENT_DEFAULT_STEPS", "GRADIENT_MIN_STEPS", "GRADIENT_MAX_STEPS",
        "GRADIENT_DEFAULT_DIRECTION", "GRADIENT_DEFAULT_FORMAT", "PALETTE_SERVER_NAME",
        "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "LOG_MAX_BYTES", "LOG_BACKUP_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def tool_mgr():
    """고정 도구 4종이 로드된 ToolManager"""
    from core import ToolManager
    return ToolManager()


@pytest.fixture
def rng():
    """결정적 난수 생성기"""
    return random.Random(42)
