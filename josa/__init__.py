"""
josa - 한국어 조사 자동 선택

단어의 끝소리(받침 여부)에 맞춰 '이/가', '을/를' 같은 조사를 고릅니다.
한글, 로마자, 숫자가 섞인 이름도 처리합니다.
"""

from .postposition import (
    josa,
    attach,
    Postposition,
    detect_korean_particle,
    format_with_particle,
    get_all_particles,
)
from .templates import process_template_with_particles, find_unresolved_particles
from .models.enums import EndingClass, ParticleType
from .utils.korean_particles import classify_ending, ends_with_consonant
from .utils.text_processing import clean_text
from .utils.error_handling import (
    JosaException, UnsupportedInputTypeError, UnknownParticleTypeError
)

__version__ = "1.0.0"

__all__ = [
    'josa',
    'attach',
    'Postposition',
    'detect_korean_particle',
    'format_with_particle',
    'get_all_particles',
    'process_template_with_particles',
    'find_unresolved_particles',
    'EndingClass',
    'ParticleType',
    'classify_ending',
    'ends_with_consonant',
    'clean_text',
    'JosaException',
    'UnsupportedInputTypeError',
    'UnknownParticleTypeError',
]
