"""
tailwind-color-generator 구조화된 로깅 설정

text/JSON 포맷 지원, 로그 회전, 제어문자 이스케이프.
stdio 서버는 stdout을 프로토콜 채널로 쓰므로 콘솔 로그는 항상 stderr로 보냅니다.

사용법:
    from logging_config import setup_logging, get_logger
    setup_logging(level="INFO", log_format="text")
    logger = get_logger("my_module")
    logger.info("작업 완료")
"""

import os
import sys
import json
import logging
import logging.handlers
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = "tailwind-color-generator"


def _escape_control(text: str) -> str:
    """개행/캐리지리턴 이스케이프 (로그 인젝션 방지)"""
    return str(text).replace("\r", "\\r").replace("\n", "\\n")


class ControlCharFilter(logging.Filter):
    """로그 인자(사용자 입력)의 개행 문자 이스케이프"""
    def filter(self, record):
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: _escape_control(v) if isinstance(v, str) else v
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    _escape_control(a) if isinstance(a, str) else a
                    for a in record.args
                )
        return True


class JSONFormatter(logging.Formatter):
    """JSON 구조화 로그 포매터"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """텍스트 로그 포매터"""

    def __init__(self):
        super().__init__(
            fmt="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


_initialized = False


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: Optional[str] = None,
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
) -> None:
    """전역 로깅 설정

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        log_format: 포맷 ("text" 또는 "json")
        log_file: 로그 파일 경로 (None이면 stderr만)
        max_bytes: 로그 파일 최대 크기 (기본 10MB)
        backup_count: 보관할 백업 파일 수
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    control_filter = ControlCharFilter()

    # 콘솔 핸들러 (stdout은 프로토콜 채널)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(control_filter)
    root_logger.addHandler(console_handler)

    # 파일 핸들러 (선택적)
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(control_filter)
        root_logger.addHandler(file_handler)


def setup_logging_from_config(cfg) -> None:
    """Config 객체의 로깅 필드로 setup_logging 호출"""
    setup_logging(
        level=cfg.log_level,
        log_format=cfg.log_format,
        log_file=cfg.log_file or None,
        max_bytes=cfg.log_max_bytes,
        backup_count=cfg.log_backup_count,
    )


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 반환

    Args:
        name: 모듈 이름 (예: "core", "shades", "mcp_server")

    Returns:
        tailwind-color-generator.{name} 로거
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """로깅 설정 초기화 (테스트용)"""
    global _initialized
    _initialized = False
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
