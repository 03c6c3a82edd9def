"""
템플릿 치환

'{name}이/가 도착했습니다' 같은 템플릿의 변수를 값으로 바꾸면서
바로 뒤에 적힌 조사 표기를 값에 맞는 조사 하나로 정리합니다.
"""

import re
from typing import Any, List, Mapping, Optional, Tuple

from josa.config.settings import config
from josa.models.enums.particle_type import ParticleType
from josa.postposition import josa
from josa.utils.logging_config import LogCategory, get_logger, log_context
from josa.utils.text_processing import extract_text_from_html, to_text

logger = get_logger('templates')


def _preset_notation_pattern() -> str:
    """등록된 조사 표기 ('을/를', '를/을', ...)를 긴 것부터 나열한 패턴"""
    notations = set()
    for particle_type in ParticleType:
        consonant, vowel = particle_type.forms
        notations.add(f"{consonant}/{vowel}")
        notations.add(f"{vowel}/{consonant}")
    ordered = sorted(notations, key=lambda notation: (-len(notation), notation))
    return '|'.join(re.escape(notation) for notation in ordered)


# 등록된 표기를 먼저 시도하고, 없으면 임의의 'A/B' 표기로 읽는다
PLACEHOLDER_PATTERN = (
    r'\{(?P<name>[^{}\s]+)\}'
    r'(?:(?P<preset>' + _preset_notation_pattern() + r')'
    r'|(?P<first>[가-힣]+)/(?P<second>[가-힣]+))?'
)
PLACEHOLDER_REGEX = re.compile(PLACEHOLDER_PATTERN)


def _split_notation(match: 're.Match[str]') -> Optional[Tuple[str, str, str]]:
    """
    변수 뒤의 조사 표기를 (받침 있을 때, 받침 없을 때, 뒤에 이어지는 글자)로 나눔

    등록된 조사 쌍은 어느 순서로 적어도 되며 ('와/과', '과/와'),
    그 밖의 쌍은 받침 있는 형태가 앞에 온다고 본다 ('으로/로').
    받침 없는 형태는 받침 있는 형태보다 길지 않으므로 그보다 긴 부분은
    조사 뒤에 붙은 글자로 돌려준다 ('{x}으로/로도' → '로' + '도').

    Returns:
        표기가 없으면 None
    """
    preset = match.group('preset')
    if preset:
        first, second = preset.split('/')
        return ParticleType.from_pair(first, second).forms + ('',)

    first, second = match.group('first'), match.group('second')
    if first is None:
        return None
    return first, second[:len(first)], second[len(first):]


def process_template_with_particles(template: str, replacements: Mapping[str, Any],
                                    strip_markup: Optional[bool] = None) -> str:
    """
    템플릿 문자열에서 변수를 치환하고 한국어 조사를 맞춤

    Args:
        template: 처리할 템플릿 ('{name}이/가 왔다')
        replacements: {"name": "철수"} 형태의 값 (문자열 또는 정수)
        strip_markup: 값에 HTML이 섞여 있을 때 태그를 뺀 텍스트로 조사를
            고를지 여부. None이면 config.TEMPLATE_STRIP_MARKUP을 따름.
            값 자체는 태그 그대로 들어간다.

    Returns:
        str: 처리된 문자열. 값이 없는 변수는 그대로 남는다.

    Raises:
        UnsupportedInputTypeError: 문자열/정수가 아닌 값
    """
    if not template:
        return template

    if strip_markup is None:
        strip_markup = config.TEMPLATE_STRIP_MARKUP

    def _replace(match: 're.Match[str]') -> str:
        name = match.group('name')
        if name not in replacements:
            return match.group(0)

        value = to_text(replacements[name])
        notation = _split_notation(match)
        if notation is None:
            return value

        consonant, vowel, rest = notation
        basis = extract_text_from_html(value) if strip_markup else value
        particle = josa(basis, consonant, vowel)
        if not particle:
            logger.debug(f"조사를 고를 수 없어 생략: {name}={value!r}")
        return f"{value}{particle}{rest}"

    with log_context("process_template", LogCategory.TEMPLATE, variables=len(replacements)):
        return PLACEHOLDER_REGEX.sub(_replace, template)


def find_unresolved_particles(text: str) -> List[str]:
    """
    치환되지 않고 남은 '{name}이/가' 패턴 목록

    Args:
        text: 검사할 텍스트

    Returns:
        List[str]: 발견된 패턴 (등장 순서)
    """
    if not text:
        return []

    unresolved = []
    for match in PLACEHOLDER_REGEX.finditer(text):
        notation = _split_notation(match)
        if notation is None:
            continue
        pattern = match.group(0)
        rest = notation[2]
        unresolved.append(pattern[:len(pattern) - len(rest)])
    return unresolved
