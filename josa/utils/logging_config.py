"""
로깅 설정 모듈
라이브러리 전용 'josa' 로거를 구성합니다.

기본값으로는 NullHandler만 붙으므로 라이브러리를 가져다 쓰는 쪽의
로깅 설정을 건드리지 않습니다. 콘솔/파일 출력은 설정으로 켭니다.
"""

import json
import logging
import sys
import threading
import time
import uuid
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Dict

from josa.config.settings import config


ROOT_LOGGER_NAME = 'josa'


class LogCategory(Enum):
    """로그 카테고리 열거형"""
    TEMPLATE = "template"
    SYSTEM = "system"


class JSONFormatter(logging.Formatter):
    """JSON 형식 로그 포매터"""

    def __init__(self, include_extra_fields: bool = True):
        super().__init__()
        self.include_extra_fields = include_extra_fields

    def format(self, record: logging.LogRecord) -> str:
        """JSON 형식으로 포맷팅"""
        log_entry = {
            'id': str(uuid.uuid4()),
            'timestamp': datetime.fromtimestamp(record.created, config.get_timezone()).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'source': {
                'file': record.pathname,
                'line': record.lineno,
                'function': record.funcName
            }
        }

        # 추가 필드 포함
        if self.include_extra_fields:
            for field in ('category', 'duration', 'success', 'request_id'):
                value = getattr(record, field, None)
                if value is not None:
                    log_entry[field] = value

            # 예외 정보 포함
            if record.exc_info:
                log_entry['exception'] = {
                    'type': record.exc_info[0].__name__,
                    'message': str(record.exc_info[1]),
                    'traceback': self.formatException(record.exc_info)
                }

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class LogManager:
    """로그 관리자"""

    _instance: Optional['LogManager'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'LogManager':
        """싱글톤 패턴 구현 (스레드 안전)"""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """로그 관리자 초기화"""
        if not hasattr(self, '_initialized'):
            self._handlers: Dict[str, logging.Handler] = {}
            self._setup_main_logger()
            self._initialized = True

    def _setup_main_logger(self) -> None:
        """메인 로거 설정"""
        self._main_logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._main_logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING))

        # 핸들러 중복 방지
        for handler in list(self._main_logger.handlers):
            self._main_logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()

        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """핸들러 설정"""
        null_handler = logging.NullHandler()
        self._main_logger.addHandler(null_handler)
        self._handlers['null'] = null_handler

        if config.ENABLE_CONSOLE_LOG:
            self._setup_console_handler()

        if config.LOG_FILE_PATH:
            self._setup_file_handler()

    def _setup_file_handler(self) -> None:
        """파일 핸들러 설정 (text 또는 json)"""
        try:
            log_path = Path(config.LOG_FILE_PATH)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                filename=str(log_path),
                maxBytes=config.LOG_MAX_BYTES,
                backupCount=config.LOG_BACKUP_COUNT,
                encoding='utf-8'
            )

            if config.get_log_format() == 'json':
                formatter = JSONFormatter()
            else:
                formatter = logging.Formatter(
                    fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S'
                )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)

            self._main_logger.addHandler(file_handler)
            self._handlers['file'] = file_handler

        except OSError as e:
            print(f"⚠️ 파일 핸들러 설정 실패: {e}", file=sys.stderr)

    def _setup_console_handler(self) -> None:
        """콘솔 핸들러 설정"""
        console_handler = logging.StreamHandler(sys.stderr)

        if config.is_debug():
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%H:%M:%S'
            )
        else:
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(message)s',
                datefmt='%H:%M:%S'
            )

        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING))

        self._main_logger.addHandler(console_handler)
        self._handlers['console'] = console_handler

    @property
    def logger(self) -> logging.Logger:
        """메인 로거 반환"""
        return self._main_logger

    @property
    def handlers(self) -> Dict[str, logging.Handler]:
        return dict(self._handlers)

    def get_logger(self, name: str) -> logging.Logger:
        """하위 로거 반환 (josa.<name>)"""
        if not name or name == ROOT_LOGGER_NAME:
            return self._main_logger
        if name.startswith(ROOT_LOGGER_NAME + '.'):
            return logging.getLogger(name)
        return self._main_logger.getChild(name)

    def reconfigure(self) -> None:
        """설정 변경 후 핸들러를 다시 구성"""
        with self._lock:
            self._setup_main_logger()
        log_info(f"로깅 재구성: 레벨 {config.LOG_LEVEL}, 핸들러 {', '.join(self._handlers)}")

    def shutdown(self) -> None:
        """핸들러 정리"""
        for handler in self._handlers.values():
            handler.flush()
            handler.close()


# 전역 로그 관리자 인스턴스
log_manager = LogManager()
logger = log_manager.logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """로거 반환"""
    return log_manager.get_logger(name)


def log_info(message: str, **kwargs) -> None:
    """정보 로그"""
    logger.info(message, **kwargs)


def log_warning(message: str, **kwargs) -> None:
    """경고 로그"""
    logger.warning(message, **kwargs)


def log_error(message: str, exc_info: bool = None, **kwargs) -> None:
    """에러 로그"""
    if exc_info is None:
        exc_info = config.is_debug()
    logger.error(message, exc_info=exc_info, **kwargs)


def log_debug(message: str, **kwargs) -> None:
    """디버그 로그"""
    logger.debug(message, **kwargs)


@contextmanager
def log_context(operation: str, category: LogCategory = LogCategory.SYSTEM, **context):
    """로깅 컨텍스트 매니저"""
    start_time = time.time()
    request_id = str(uuid.uuid4())
    extra = {'category': category.value, 'request_id': request_id}

    context_str = " | ".join(f"{k}: {v}" for k, v in context.items())
    log_debug(f"시작: {operation} | {context_str}", extra=extra)

    try:
        yield
        duration = time.time() - start_time
        log_debug(
            f"완료: {operation} | 소요시간: {duration:.3f}s",
            extra={**extra, 'duration': duration, 'success': True}
        )
    except Exception as e:
        duration = time.time() - start_time
        log_error(
            f"실패: {operation} | 소요시간: {duration:.3f}s | 오류: {e}",
            extra={**extra, 'duration': duration, 'success': False}
        )
        raise
