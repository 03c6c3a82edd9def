"""
Enums for ending classes and particle presets
"""

from .ending_class import EndingClass
from .particle_type import ParticleType

__all__ = [
    'EndingClass',
    'ParticleType'
]
