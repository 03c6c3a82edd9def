"""
특화된 예외 클래스들 정의
"""

from typing import Any

from .types import (
    JosaException, ErrorContext, ErrorSeverity, ErrorCategory, config
)


class UnsupportedInputTypeError(JosaException, TypeError):
    """문자열/정수가 아닌 값에 조사를 붙이려 한 경우"""

    def __init__(self, value: Any, operation: str = "to_text"):
        context = ErrorContext(
            operation=operation,
            value=value,
            additional_data={'value_type': type(value).__name__}
        )
        super().__init__(
            message=f"{config.get_error_message('UNSUPPORTED_INPUT_TYPE')} ({type(value).__name__})",
            error_code='UNSUPPORTED_INPUT_TYPE',
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.USER_INPUT,
            context=context
        )
        self.value = value


class UnknownParticleTypeError(JosaException, ValueError):
    """등록되지 않은 조사 타입 키"""

    def __init__(self, key: Any):
        context = ErrorContext(operation="particle_lookup", value=key)
        super().__init__(
            message=f"{config.get_error_message('UNKNOWN_PARTICLE_TYPE')} ({key!r})",
            error_code='UNKNOWN_PARTICLE_TYPE',
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.USER_INPUT,
            context=context
        )
        self.key = key
