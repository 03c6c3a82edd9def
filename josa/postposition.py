"""
Postposition selection

단어 뒤에 붙일 조사를 받침 여부에 따라 고르고 붙입니다.

    >>> josa("홍길동", "이", "가")
    '이'
    >>> attach("Yuna", "아", "야")
    'Yuna야'
    >>> josa("こんにちは", "을", "를")
    ''
"""

from typing import Dict, Optional, Union

from josa.models.enums.ending_class import EndingClass
from josa.models.enums.particle_type import ParticleType
from josa.utils.korean_particles import classify_ending
from josa.utils.logging_config import get_logger
from josa.utils.text_processing import safe_string_operation, to_text

logger = get_logger('postposition')

Word = Union[str, int]


def josa(word: Word, consonant: str, vowel: str) -> str:
    """
    받침이 있으면 consonant, 없으면 vowel을 반환

    지원하지 않는 문자로만 이루어졌거나 빈 입력이면 빈 문자열을 반환합니다.
    영어는 가능한 범위에서만 지원합니다.

    Args:
        word: 조사를 붙일 단어 (문자열 또는 정수)
        consonant: 받침 뒤에 오는 형태 (예: '이')
        vowel: 모음 뒤에 오는 형태 (예: '가')

    Returns:
        str: consonant, vowel 중 하나 또는 ''

    Raises:
        UnsupportedInputTypeError: 문자열/정수가 아닌 word
    """
    ending = classify_ending(to_text(word))
    if ending is None:
        return ""
    return consonant if ending is EndingClass.CONSONANT else vowel


def attach(word: Word, consonant: str, vowel: str) -> str:
    """
    단어 뒤에 알맞은 조사를 붙여 반환

    조사를 고를 수 없으면 단어를 그대로 (문자열로) 돌려줍니다.
    """
    text = to_text(word)
    postposition = josa(text, consonant, vowel)
    if not postposition:
        return text
    return f"{text}{postposition}"


class Postposition:
    """
    값에 조사 관련 메서드를 붙여 쓰는 래퍼

        >>> Postposition(3).attached("과", "와")
        '3과'
    """

    __slots__ = ('value', 'text')

    def __init__(self, value: Word):
        self.value = value
        self.text = to_text(value)

    def __repr__(self) -> str:
        return f"Postposition({self.value!r})"

    def __str__(self) -> str:
        return self.text

    @property
    def ending(self) -> Optional[EndingClass]:
        return classify_ending(self.text)

    def josa(self, consonant: str, vowel: str) -> str:
        return josa(self.text, consonant, vowel)

    def attached(self, consonant: str, vowel: str) -> str:
        return attach(self.text, consonant, vowel)

    def particle(self, particle_type: Union[ParticleType, str]) -> str:
        particle_type = ParticleType.from_key(particle_type)
        return self.josa(*particle_type.forms)

    def with_particle(self, particle_type: Union[ParticleType, str]) -> str:
        particle_type = ParticleType.from_key(particle_type)
        return self.attached(*particle_type.forms)


@safe_string_operation(default="")
def detect_korean_particle(word: Word, particle_type: Union[ParticleType, str] = ParticleType.OBJECT) -> str:
    """
    단어의 받침 여부에 따른 조사 결정

    Args:
        word: 분석할 단어
        particle_type: 조사 타입
            - 'object' 또는 'eul_reul': 을/를 (목적격 조사)
            - 'subject' 또는 'i_ga': 이/가 (주격 조사)
            - 'topic' 또는 'eun_neun': 은/는 (보조사, 주제 표시)
            - 'with' 또는 'wa_gwa': 과/와 (부사격 조사, ~와 함께)
            - 'vocative', 'or', 'and' 및 '을/를' 같은 슬래시 표기

    Returns:
        str: 적절한 조사. 알 수 없는 타입이나 판별 불가면 ''
    """
    return Postposition(word).particle(particle_type)


@safe_string_operation(default="")
def format_with_particle(word: Word, particle_type: Union[ParticleType, str]) -> str:
    """
    단어와 조사를 합쳐서 반환

    Returns:
        str: "단어+조사" 형태의 문자열
    """
    return Postposition(word).with_particle(particle_type)


@safe_string_operation(default=dict)
def get_all_particles(word: Word) -> Dict[str, str]:
    """
    한 단어에 대한 모든 조사 변형을 반환

    Returns:
        Dict[str, str]: {타입 값: 조사}. 판별할 수 없는 단어면 {}
    """
    wrapped = Postposition(word)
    if wrapped.ending is None:
        return {}
    return {particle_type.value: wrapped.particle(particle_type) for particle_type in ParticleType}
