"""
Models 패키지
"""

from .enums import EndingClass, ParticleType

__all__ = [
    'EndingClass',
    'ParticleType'
]
