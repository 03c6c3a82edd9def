"""
설정 패키지
"""

from .settings import Config, config

__all__ = ['Config', 'config']
