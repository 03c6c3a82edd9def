"""
에러 핸들링 패키지
"""

from .types import ErrorSeverity, ErrorCategory, ErrorContext, JosaException

from .exceptions import UnsupportedInputTypeError, UnknownParticleTypeError

__all__ = [
    # 핵심 타입들
    'ErrorSeverity', 'ErrorCategory', 'ErrorContext', 'JosaException',

    # 특화 예외들
    'UnsupportedInputTypeError', 'UnknownParticleTypeError',
]
