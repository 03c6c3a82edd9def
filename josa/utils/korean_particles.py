"""
Korean final consonant (받침) detection

정리된 문자열의 마지막 '발음'이 받침으로 끝나는지 판별합니다.
한글 음절은 유니코드 조합 규칙으로, 숫자는 한국어/영어로 읽었을 때의
끝소리로, 영어 단어는 어림 규칙으로 판단합니다. 영어 규칙은 완전하지 않으며
가능한 범위에서만 맞춥니다.
"""

import re
from typing import Callable, Optional, Tuple

from josa.models.enums.ending_class import EndingClass
from josa.utils.logging_config import get_logger
from josa.utils.text_processing import clean_text

logger = get_logger('korean_particles')

HANGUL_BASE = 0xAC00
FINAL_CONSONANT_COUNT = 28

# 한국어로 읽을 때 받침으로 끝나는 숫자: 영, 일, 삼, 육, 칠, 팔
KOREAN_FINAL_CONSONANT_DIGITS = frozenset('013678')
# 영어로 읽을 때 자음으로 끝나는 숫자: one, seven, eight, nine
ENGLISH_FINAL_CONSONANT_DIGITS = frozenset('1789')
# 한 글자로 읽을 때 받침이 생기는 로마자: 엘, 엔, 엠, 알
CONSONANT_LETTERS = frozenset('lnmr')

HANGUL_END_REGEX = re.compile(r'[가-힣]$')
KOREAN_NUMBER_REGEX = re.compile(r'[가-힣][0-9]*[013678]$')
ENGLISH_NUMBER_REGEX = re.compile(r'[a-zA-Z][0-9]*[1789]$')
ENGLISH_FINAL_CONSONANT_REGEX = re.compile(r'([clmnp]|[blnt](e)|[co](k)|[aeiou](t)|mb|ng|lert)$')
DIGITS_REGEX = re.compile(r'[0-9]+')


def has_final_consonant(char: str) -> bool:
    """
    한글 음절 한 글자의 받침(종성) 여부 확인

    Args:
        char: 완성형 한글 음절 (가-힣)

    Returns:
        bool: 받침이 있으면 True
    """
    return (ord(char) - HANGUL_BASE) % FINAL_CONSONANT_COUNT != 0


def _ends_with_final_hangul(text: str) -> bool:
    """한글 음절로 끝나고 그 음절에 받침이 있음"""
    return bool(HANGUL_END_REGEX.search(text)) and has_final_consonant(text[-1])


def _ends_with_korean_number(text: str) -> bool:
    """한글 뒤에 오는 숫자를 한국어로 읽을 때 받침으로 끝남 (100점 → 백점, 폰11 → 십일)"""
    return bool(KOREAN_NUMBER_REGEX.search(text))


def _ends_with_english_number(text: str) -> bool:
    """로마자 뒤에 오는 숫자를 영어로 읽을 때 자음으로 끝남 (A1 → 에이 원)"""
    return bool(ENGLISH_NUMBER_REGEX.search(text))


def _ends_with_english_consonant(text: str) -> bool:
    """영어 단어가 자음 소리로 끝남 (두 글자 이상일 때만)"""
    return len(text) > 1 and bool(ENGLISH_FINAL_CONSONANT_REGEX.search(text))


def _is_consonant_letter(text: str) -> bool:
    """로마자 한 글자를 읽을 때 받침이 생김 (l, n, m, r)"""
    return len(text) == 1 and text in CONSONANT_LETTERS


def _ends_with_consonant_digit(text: str) -> bool:
    """마지막 어절이 숫자로만 이루어져 있고 끝자리를 읽으면 받침이 있음"""
    words = text.split()
    if not words:
        return False
    return bool(DIGITS_REGEX.fullmatch(words[-1])) and text[-1] in KOREAN_FINAL_CONSONANT_DIGITS


ENDING_RULES: Tuple[Callable[[str], bool], ...] = (
    _ends_with_final_hangul,
    _ends_with_korean_number,
    _ends_with_english_number,
    _ends_with_english_consonant,
    _is_consonant_letter,
    _ends_with_consonant_digit,
)


def ends_with_consonant(text: str) -> bool:
    """
    정리된 문자열이 받침(자음) 소리로 끝나는지 판별

    규칙 중 하나라도 맞으면 받침으로 끝나는 것으로 봅니다.

    Args:
        text: clean_text()를 거친 비어 있지 않은 문자열

    Returns:
        bool: 받침으로 끝나면 True, 모음으로 끝나면 False
    """
    for rule in ENDING_RULES:
        if rule(text):
            logger.debug(f"받침 규칙 일치: {rule.__name__} ({text!r})")
            return True
    return False


def classify_ending(text: str) -> Optional[EndingClass]:
    """
    원본 입력의 끝소리 분류

    Args:
        text: 원본 입력

    Returns:
        Optional[EndingClass]: 판별할 수 없으면 None
    """
    cleaned = clean_text(text)
    if not cleaned:
        logger.debug(f"판별 불가 입력: {text!r}")
        return None
    return EndingClass.from_bool(ends_with_consonant(cleaned))
