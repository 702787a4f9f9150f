"""
歌詞模組公開介面
"""

from .assembler import create_lyric_state, empty_lyric_state
from .loader import LyricLoader
from .metadata import parse_metadata_json
from .model import (
    LyricData,
    LyricItem,
    LyricLine,
    LyricMetadata,
    LyricParseResult,
    LyricSource,
    LyricState,
    LyricTrack,
    LyricType,
    RawLyricResponse,
    SourceType,
    TrackType,
)
from .parser import (
    LyricParser,
    is_instrumental,
    is_metadata_line,
    parse,
    parse_lrc,
    parse_romaji,
    parse_translation,
    parse_yrc,
)
from .sync import (
    KaraokeProgress,
    NeighborLine,
    get_current_line_index,
    get_current_lyrics,
    get_highlight_progress,
    get_highlighted_word_indices,
    get_karaoke_progress,
    get_line_word_timings,
    get_next_line_info,
    get_previous_line_info,
    seek_to_line,
    seek_to_time,
    sync_by_time,
    toggle_track,
)
from .timecode import format_timestamp, parse_timestamp
from .validator import LyricValidator, ValidationError

__all__ = [
    'LyricType',
    'TrackType',
    'SourceType',
    'LyricItem',
    'LyricLine',
    'LyricData',
    'LyricTrack',
    'LyricState',
    'LyricMetadata',
    'LyricParseResult',
    'LyricSource',
    'RawLyricResponse',
    'LyricParser',
    'LyricLoader',
    'LyricValidator',
    'ValidationError',
    'KaraokeProgress',
    'NeighborLine',
    'parse',
    'parse_lrc',
    'parse_yrc',
    'parse_translation',
    'parse_romaji',
    'parse_metadata_json',
    'parse_timestamp',
    'format_timestamp',
    'is_instrumental',
    'is_metadata_line',
    'create_lyric_state',
    'empty_lyric_state',
    'sync_by_time',
    'get_current_line_index',
    'get_current_lyrics',
    'get_highlight_progress',
    'get_karaoke_progress',
    'get_highlighted_word_indices',
    'get_line_word_timings',
    'get_next_line_info',
    'get_previous_line_info',
    'seek_to_line',
    'seek_to_time',
    'toggle_track',
]
