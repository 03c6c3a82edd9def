"""
에러 핸들링 기본 타입과 상수 정의
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from josa.config.settings import config


class ErrorSeverity(Enum):
    """에러 심각도"""
    LOW = 1          # 호출자 입력 오류 등
    MEDIUM = 2       # 처리 중 오류


class ErrorCategory(Enum):
    """에러 카테고리"""
    USER_INPUT = "user_input"           # 호출자 입력 오류
    UNKNOWN = "unknown"                 # 분류되지 않은 오류


@dataclass
class ErrorContext:
    """에러 컨텍스트"""
    operation: str
    value: Any = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(config.get_timezone()))
    additional_data: Dict[str, Any] = field(default_factory=dict)

    def add_data(self, **kwargs) -> None:
        """컨텍스트 데이터 추가"""
        self.additional_data.update(kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'operation': self.operation,
            'value': repr(self.value),
            'timestamp': self.timestamp.isoformat(),
            **self.additional_data
        }


class JosaException(Exception):
    """라이브러리 기본 예외 클래스"""

    def __init__(self, message: str, error_code: str = None,
                 severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                 category: ErrorCategory = ErrorCategory.UNKNOWN,
                 context: ErrorContext = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 'UNKNOWN_ERROR'
        self.severity = severity
        self.category = category
        self.context = context or ErrorContext("unknown")
        self.timestamp = datetime.now(config.get_timezone())

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환 (로깅용)"""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'severity': self.severity.name,
            'category': self.category.value,
            'timestamp': self.timestamp.isoformat(),
            'context': self.context.to_dict() if self.context else None
        }
