"""
Particle type enumeration
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from josa.utils.error_handling import UnknownParticleTypeError


class ParticleType(Enum):
    """자주 쓰는 조사 쌍 (받침 있을 때 / 없을 때)"""
    OBJECT = "object"        # 을/를 (목적격 조사)
    SUBJECT = "subject"      # 이/가 (주격 조사)
    TOPIC = "topic"          # 은/는 (보조사, 주제 표시)
    WITH = "with"            # 과/와 (부사격 조사, ~와 함께)
    VOCATIVE = "vocative"    # 아/야 (호격 조사)
    OR = "or"                # 이나/나
    AND = "and"              # 이랑/랑

    @property
    def forms(self) -> Tuple[str, str]:
        """(받침 있을 때, 받침 없을 때)"""
        return _PARTICLE_FORMS[self]

    @property
    def consonant_form(self) -> str:
        return self.forms[0]

    @property
    def vowel_form(self) -> str:
        return self.forms[1]

    @property
    def notation(self) -> str:
        """'을/를' 형태의 표기"""
        return '/'.join(self.forms)

    @classmethod
    def from_key(cls, key: Union['ParticleType', str]) -> 'ParticleType':
        """
        조사 타입 키를 ParticleType으로 변환

        Args:
            key: ParticleType, 값('object'), 별칭('eul_reul', '을를', '_을를'),
                 또는 슬래시 표기('을/를', '를/을')

        Raises:
            UnknownParticleTypeError: 알 수 없는 키
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            particle_type = _PARTICLE_ALIASES.get(key.strip().lower())
            if particle_type is not None:
                return particle_type
        raise UnknownParticleTypeError(key)

    @classmethod
    def from_pair(cls, first: str, second: str) -> Optional['ParticleType']:
        """두 형태가 등록된 쌍이면 순서와 관계없이 해당 타입을 반환"""
        return _PARTICLE_PAIRS.get(frozenset((first, second)))


_PARTICLE_FORMS: Dict[ParticleType, Tuple[str, str]] = {
    ParticleType.OBJECT: ('을', '를'),
    ParticleType.SUBJECT: ('이', '가'),
    ParticleType.TOPIC: ('은', '는'),
    ParticleType.WITH: ('과', '와'),
    ParticleType.VOCATIVE: ('아', '야'),
    ParticleType.OR: ('이나', '나'),
    ParticleType.AND: ('이랑', '랑'),
}

_ROMANIZED_ALIASES: Dict[ParticleType, str] = {
    ParticleType.OBJECT: 'eul_reul',
    ParticleType.SUBJECT: 'i_ga',
    ParticleType.TOPIC: 'eun_neun',
    ParticleType.WITH: 'wa_gwa',
    ParticleType.VOCATIVE: 'a_ya',
    ParticleType.OR: 'ina_na',
    ParticleType.AND: 'irang_rang',
}


def _build_aliases() -> Dict[str, ParticleType]:
    aliases: Dict[str, ParticleType] = {}
    for particle_type, (consonant, vowel) in _PARTICLE_FORMS.items():
        aliases[particle_type.value] = particle_type
        aliases[_ROMANIZED_ALIASES[particle_type]] = particle_type
        for first, second in ((consonant, vowel), (vowel, consonant)):
            aliases[f"{first}{second}"] = particle_type
            aliases[f"_{first}{second}"] = particle_type
            aliases[f"{first}/{second}"] = particle_type
    return aliases


_PARTICLE_ALIASES = _build_aliases()
_PARTICLE_PAIRS = {frozenset(forms): particle_type for particle_type, forms in _PARTICLE_FORMS.items()}
