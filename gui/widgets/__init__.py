"""
GUI 元件公開介面
"""

from .lyric_view import LyricView
from .preview_player import PreviewPlayer

__all__ = [
    'LyricView',
    'PreviewPlayer',
]
