"""
tailwind-color-generator 중앙 집중식 설정 모듈

모든 설정값을 단일 모듈로 통합합니다.
우선순위: 환경변수 > config.json > 기본값

사용법:
    from config import get_config
    cfg = get_config()
    print(cfg.default_gradient_steps)  # 10
"""

import os
import json
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """중앙 집중식 설정 (불변 객체)"""

    # 서버
    server_name: str = "Tailwind Color Generator"

    # 팔레트 / 스킴 기본값
    default_palette_name: str = "primary"
    default_format: str = "js"                            # js | css | json
    default_color_names: str = "primary,secondary,accent"  # 쉼표 구분

    # 그라디언트
    default_gradient_steps: int = 10
    min_gradient_steps: int = 2
    max_gradient_steps: int = 50
    default_gradient_direction: str = "to-r"
    default_gradient_format: str = "gradient"

    # 로깅
    log_level: str = "INFO"
    log_format: str = "text"           # "text" | "json"
    log_file: str = ""                 # 비어 있으면 stderr만
    log_max_bytes: int = 10_485_760    # 10MB
    log_backup_count: int = 5

    @property
    def color_names(self) -> list:
        return [n.strip() for n in self.default_color_names.split(",") if n.strip()]


# 환경변수 매핑 (ENV_NAME -> (field_name, type_converter))
_ENV_MAP = {
    "PALETTE_SERVER_NAME": ("server_name", str),
    "PALETTE_DEFAULT_NAME": ("default_palette_name", str),
    "PALETTE_DEFAULT_FORMAT": ("default_format", str),
    "PALETTE_COLOR_NAMES": ("default_color_names", str),
    "GRADIENT_DEFAULT_STEPS": ("default_gradient_steps", int),
    "GRADIENT_MIN_STEPS": ("min_gradient_steps", int),
    "GRADIENT_MAX_STEPS": ("max_gradient_steps", int),
    "GRADIENT_DEFAULT_DIRECTION": ("default_gradient_direction", str),
    "GRADIENT_DEFAULT_FORMAT": ("default_gradient_format", str),
    "LOG_LEVEL": ("log_level", str),
    "LOG_FORMAT": ("log_format", str),
    "LOG_FILE": ("log_file", str),
    "LOG_MAX_BYTES": ("log_max_bytes", int),
    "LOG_BACKUP_COUNT": ("log_backup_count", int),
}


# 설정 필드 범위 제한
_FIELD_BOUNDS = {
    "default_gradient_steps": (2, 50),
    "min_gradient_steps": (2, 50),
    "max_gradient_steps": (2, 50),
    "log_backup_count": (0, 100),
}


def _clamp(field_name, value):
    """설정값의 범위를 제한"""
    if field_name in _FIELD_BOUNDS:
        lo, hi = _FIELD_BOUNDS[field_name]
        return type(value)(max(lo, min(hi, value)))
    return value


def _load_config_file(path: str = "config.json") -> dict:
    """config.json 로드 (없으면 빈 dict 반환)"""
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except (json.JSONDecodeError, OSError):
        return {}


def load_config(config_path: str = "config.json") -> Config:
    """설정 로드 (환경변수 > config.json > 기본값)"""
    file_config = _load_config_file(config_path)
    overrides = {}

    for env_name, (field_name, converter) in _ENV_MAP.items():
        # 1. 환경변수 확인
        env_val = os.environ.get(env_name)
        if env_val is not None:
            try:
                overrides[field_name] = _clamp(field_name, converter(env_val))
            except (ValueError, TypeError):
                pass  # 변환 실패 시 무시
            continue

        # 2. config.json 확인
        if field_name in file_config:
            try:
                overrides[field_name] = _clamp(field_name, converter(file_config[field_name]))
            except (ValueError, TypeError):
                pass

    # 최소/최대 단계 역전 방지
    lo = overrides.get("min_gradient_steps", Config.min_gradient_steps)
    hi = overrides.get("max_gradient_steps", Config.max_gradient_steps)
    if lo > hi:
        overrides["min_gradient_steps"], overrides["max_gradient_steps"] = hi, lo

    return Config(**overrides)


# 싱글턴 캐시
_cached_config: Optional[Config] = None


def get_config(config_path: str = "config.json") -> Config:
    """설정 싱글턴 반환 (최초 호출 시 로드)"""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config(config_path)
    return _cached_config


def reset_config() -> None:
    """설정 캐시 초기화 (테스트용)"""
    global _cached_config
    _cached_config = None
