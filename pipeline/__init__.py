"""
Pipeline module exports
"""

from .session import LyricMode, LyricSession, apply_mode

__all__ = [
    'LyricMode',
    'LyricSession',
    'apply_mode',
]
