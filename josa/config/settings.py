"""
설정 관리 모듈
환경 변수를 로드하고 라이브러리 전반의 설정을 관리합니다.
"""

import os
from pathlib import Path
from typing import Optional, Tuple, Dict
from functools import lru_cache

import pytz


def _parse_env_line(line: str) -> Tuple[Optional[str], Optional[str]]:
    """환경 변수 라인을 파싱하는 헬퍼 함수"""
    if not line or line.startswith('#') or '=' not in line:
        return None, None

    key, value = line.split('=', 1)
    key = key.strip()
    value = value.strip()

    # 따옴표 제거
    if (value.startswith('"') and value.endswith('"')) or \
       (value.startswith("'") and value.endswith("'")):
        value = value[1:-1]

    return key, value


def _load_env_file(env_path: Path, encoding: str) -> bool:
    """지정된 인코딩으로 .env 파일을 로드하는 함수"""
    try:
        with open(env_path, 'r', encoding=encoding) as f:
            for line in f:
                key, value = _parse_env_line(line.strip())
                if key and value:
                    os.environ.setdefault(key, value)
        return True
    except UnicodeDecodeError:
        return False


def _load_env() -> None:
    """환경 변수를 먼저 로드하는 함수"""
    env_path = Path(os.getenv('JOSA_ENV_FILE', Path.cwd() / '.env'))

    if not env_path.is_file():
        return

    # UTF-8로 먼저 시도
    if _load_env_file(env_path, 'utf-8'):
        return

    # UTF-8 실패시 여러 인코딩으로 시도
    encodings = ['cp949', 'euc-kr', 'latin-1']
    for encoding in encodings:
        if _load_env_file(env_path, encoding):
            break


# 환경변수 먼저 로드
_load_env()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


def _env_int(name: str, default: int) -> int:
    """정수 환경 변수. 값이 잘못되었으면 기본값을 쓴다."""
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


class Config:
    """라이브러리 설정 클래스"""

    # 로그 설정
    LOG_LEVEL: str = os.getenv('JOSA_LOG_LEVEL', 'WARNING')
    LOG_FILE_PATH: str = os.getenv('JOSA_LOG_FILE_PATH', '')
    LOG_FORMAT: str = os.getenv('JOSA_LOG_FORMAT', 'text').lower()
    LOG_MAX_BYTES: int = _env_int('JOSA_LOG_MAX_BYTES', 10485760)  # 10MB
    LOG_BACKUP_COUNT: int = _env_int('JOSA_LOG_BACKUP_COUNT', 5)

    # 개발/디버그 설정
    DEBUG_MODE: bool = _env_flag('JOSA_DEBUG_MODE', 'False')
    ENABLE_CONSOLE_LOG: bool = _env_flag('JOSA_ENABLE_CONSOLE_LOG', 'False')

    # 로그와 오류 타임스탬프에 쓰는 시간대
    TIMEZONE: str = os.getenv('JOSA_TIMEZONE', 'Asia/Seoul')

    # 템플릿 치환 시 값에서 HTML 태그를 걷어내고 조사를 고를지 여부
    TEMPLATE_STRIP_MARKUP: bool = _env_flag('JOSA_TEMPLATE_STRIP_MARKUP', 'False')

    LOG_FORMATS = ('text', 'json')

    @classmethod
    @lru_cache(maxsize=1)
    def _get_error_messages(cls) -> Dict[str, str]:
        """에러 메시지 딕셔너리를 반환합니다 (캐싱 적용)"""
        return {
            'UNSUPPORTED_INPUT_TYPE': '문자열이나 정수만 조사를 붙일 수 있습니다.',
            'UNKNOWN_PARTICLE_TYPE': '알 수 없는 조사 타입입니다.',
            'UNKNOWN_ERROR': '알 수 없는 오류가 발생했습니다.',
        }

    @classmethod
    def get_error_message(cls, key: str) -> str:
        """
        에러 메시지 키에 해당하는 메시지를 반환합니다.

        Args:
            key: 에러 메시지 키

        Returns:
            str: 에러 메시지
        """
        error_messages = cls._get_error_messages()
        return error_messages.get(key, error_messages['UNKNOWN_ERROR'])

    @classmethod
    def get_timezone(cls) -> pytz.BaseTzInfo:
        """
        설정된 시간대를 반환합니다. 잘못된 이름이면 UTC로 대체합니다.
        """
        try:
            return pytz.timezone(cls.TIMEZONE)
        except pytz.UnknownTimeZoneError:
            return pytz.utc

    @classmethod
    def get_log_format(cls) -> str:
        """지원하지 않는 로그 형식은 text로 취급"""
        if cls.LOG_FORMAT in cls.LOG_FORMATS:
            return cls.LOG_FORMAT
        return 'text'

    @classmethod
    def is_debug(cls) -> bool:
        return cls.DEBUG_MODE


# 설정 인스턴스 (싱글톤 패턴)
config = Config()
