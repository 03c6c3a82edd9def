"""
Ending class enumeration
"""

from enum import Enum


class EndingClass(Enum):
    """마지막 발음의 받침 여부"""
    CONSONANT = "consonant"
    VOWEL = "vowel"

    @classmethod
    def from_bool(cls, has_final_consonant: bool) -> 'EndingClass':
        return cls.CONSONANT if has_final_consonant else cls.VOWEL
