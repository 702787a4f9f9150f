"""
Configuration for lyric-sync-player
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
LOG_FILE = 'lyric-player.log'

# Lyric parsing
CREDIT_MARKERS = ('作词', '作曲', '编曲', '演唱')  # 逐行歌詞過濾用
INSTRUMENTAL_MARKERS = ('作词', '作曲', '编曲', '制作')  # 純音樂判斷用
TRANSLATION_BRACKETS = ('〖', '〗')
METADATA_ITEM_MAX_DURATION = 50  # 毫秒

# File loading
LYRIC_ENCODINGS = ['utf-8-sig', 'utf-8', 'gbk']
TRANSLATION_SUFFIX = '.tlyric'
ROMAJI_SUFFIX = '.romalrc'

# UI settings
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 600
LYRIC_FONT_SIZE = 22
HIGHLIGHT_COLOR = '#FFD54F'
TEXT_COLOR = '#F5F5F5'
DIM_COLOR = '#8A8A8A'
