"""
텍스트 처리 유틸리티
받침 판별 전에 입력을 정리하는 함수들을 정의합니다.
"""

import functools
import re
from typing import Any, Callable, Union

from bs4 import BeautifulSoup

from josa.utils.error_handling import UnsupportedInputTypeError
from josa.utils.logging_config import log_warning


# 한글 음절, 한글 호환 자모, 로마자, 아라비아 숫자 이외의 문자 (공백 포함)
UNKNOWN_CHARS_PATTERN = r'[^ㄱ-ㅎㅏ-ㅣ가-힣a-zA-Z0-9]'
UNKNOWN_CHARS_REGEX = re.compile(UNKNOWN_CHARS_PATTERN)

# 미완성 자모 → 읽는 이름
# 겹받침은 구성 자모로만 풀어 쓰며, 치환 결과는 다시 치환하지 않는다.
INCOMPLETE_JAMO_NAMES = {
    # 겹받침
    'ㄳ': 'ㄱㅅ', 'ㄵ': 'ㄴㅈ', 'ㄶ': 'ㄴㅎ', 'ㄺ': 'ㄹㄱ', 'ㄻ': 'ㄹㅁ',
    'ㄼ': 'ㄹㅂ', 'ㄽ': 'ㄹㅅ', 'ㄾ': 'ㄹㅌ', 'ㄿ': 'ㄹㅍ', 'ㅀ': 'ㄹㅎ',
    'ㅄ': 'ㅂㅅ',
    # 자음
    'ㄱ': '기역', 'ㄴ': '니은', 'ㄷ': '디귿', 'ㄹ': '리을', 'ㅁ': '미음',
    'ㅂ': '비읍', 'ㅅ': '시옷', 'ㅇ': '이응', 'ㅈ': '지읒', 'ㅊ': '치읓',
    'ㅋ': '키읔', 'ㅌ': '티읕', 'ㅍ': '피읖', 'ㅎ': '히읗',
    # 쌍자음
    'ㄲ': '쌍기역', 'ㄸ': '쌍디귿', 'ㅃ': '쌍비읍', 'ㅆ': '쌍시옷', 'ㅉ': '쌍지읒',
    # 모음
    'ㅏ': '아', 'ㅓ': '어', 'ㅗ': '오', 'ㅜ': '우', 'ㅡ': '으', 'ㅣ': '이',
    'ㅐ': '애', 'ㅔ': '에', 'ㅚ': '외', 'ㅟ': '위', 'ㅑ': '야', 'ㅕ': '여',
    'ㅛ': '요', 'ㅠ': '유', 'ㅒ': '얘', 'ㅖ': '예', 'ㅘ': '와', 'ㅙ': '왜',
    'ㅝ': '워', 'ㅞ': '웨', 'ㅢ': '의',
}

# str.translate는 한 번만 훑으므로 치환 결과가 다시 치환되지 않는다
INCOMPLETE_JAMO_TABLE = str.maketrans(INCOMPLETE_JAMO_NAMES)


def safe_string_operation(default: Any = "") -> Callable:
    """
    문자열 연산을 안전하게 수행하는 데코레이터

    Args:
        default: 오류 시 반환할 기본값

    Returns:
        데코레이터
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (TypeError, ValueError, AttributeError) as e:
                log_warning(f"문자열 연산 오류 in {func.__name__}: {e}")
                return default() if callable(default) else default
        return wrapper
    return decorator


def to_text(value: Union[str, int]) -> str:
    """
    조사를 붙일 값을 문자열로 변환

    문자열(한 글자 포함)과 정수만 받습니다. bool은 int의 하위 타입이지만
    'True'/'False'에 조사를 붙이는 일은 의도가 아닐 가능성이 높아 거부합니다.

    Raises:
        UnsupportedInputTypeError: 그 외 타입
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise UnsupportedInputTypeError(value)


def clean_text(text: str) -> str:
    """
    받침 판별용으로 입력을 정리

    앞뒤 공백을 지우고, 지원하지 않는 문자(공백 포함)를 모두 제거한 뒤
    미완성 자모를 읽는 이름으로 바꿉니다.

    Args:
        text: 원본 입력

    Returns:
        str: 정리된 문자열. 비어 있으면 판별 불가를 뜻함
    """
    text = text.strip()
    if not text:
        return ""

    cleaned = UNKNOWN_CHARS_REGEX.sub('', text)
    return cleaned.translate(INCOMPLETE_JAMO_TABLE)


def extract_text_from_html(html_content: str) -> str:
    """
    HTML 태그 제거하여 텍스트 추출

    Args:
        html_content: HTML 콘텐츠

    Returns:
        str: 순수 텍스트
    """
    if not html_content:
        return ""

    # 태그가 없으면 파서를 거치지 않는다
    if '<' not in html_content and '&' not in html_content:
        return html_content

    soup = BeautifulSoup(html_content, 'html.parser')
    return soup.get_text(separator=' ', strip=True)
