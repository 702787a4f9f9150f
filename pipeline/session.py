"""
歌詞播放狀態管理

持有目前歌曲的歌詞狀態，並依使用者選擇的附加模式（無/翻譯/羅馬音）
決定各軌的啟用狀態。播放時鐘由外部（播放器）透過 set_current_time 驅動。
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union
import logging

from core.lyric import (
    LyricLine,
    LyricLoader,
    LyricMetadata,
    LyricParser,
    LyricState,
    RawLyricResponse,
    SourceType,
    TrackType,
    empty_lyric_state,
    get_current_lyrics,
    get_highlight_progress,
    get_highlighted_word_indices,
    get_karaoke_progress,
    get_next_line_info,
    get_previous_line_info,
    seek_to_line,
    seek_to_time,
    sync_by_time,
)

logger = logging.getLogger(__name__)


class LyricMode(str, Enum):
    """歌詞附加模式（三態）"""

    NONE = 'none'
    TRANSLATION = 'translation'
    ROMAJI = 'romaji'


def apply_mode(state: LyricState, mode: LyricMode) -> LyricState:
    """依模式設定各軌啟用狀態：原文永遠啟用，翻譯/羅馬音擇一"""
    enabled_by_type = {
        TrackType.ORIGINAL: True,
        TrackType.TRANSLATION: mode == LyricMode.TRANSLATION,
        TrackType.ROMAJI: mode == LyricMode.ROMAJI,
    }
    tracks = tuple(replace(track, enabled=enabled_by_type[track.type]) for track in state.tracks)
    return replace(state, tracks=tracks)


@dataclass
class LyricSession:
    """單一播放器的歌詞狀態"""

    state: LyricState = field(default_factory=empty_lyric_state)
    metadata: List[LyricMetadata] = field(default_factory=list)
    is_instrumental: bool = True
    source_type: SourceType = SourceType.NONE
    mode: LyricMode = LyricMode.NONE
    parser: LyricParser = field(default_factory=LyricParser, repr=False)
    loader: LyricLoader = field(default_factory=LyricLoader, repr=False)

    @property
    def lines(self) -> List[LyricLine]:
        return self.state.original_lines

    @property
    def has_translation(self) -> bool:
        return self.state.get_track(TrackType.TRANSLATION) is not None

    @property
    def has_romaji(self) -> bool:
        return self.state.get_track(TrackType.ROMAJI) is not None

    def load(self, raw: Union[RawLyricResponse, Dict[str, Any], None]):
        """載入歌詞（保留使用者目前選擇的模式）"""
        result = self.parser.parse(raw)
        self.state = apply_mode(result.state, self.mode)
        self.metadata = result.metadata
        self.is_instrumental = result.is_instrumental
        self.source_type = result.source_type
        logger.info(
            f"Lyric loaded: source={self.source_type.value}, lines={len(self.lines)}, "
            f"instrumental={self.is_instrumental}"
        )

    def load_file(self, file_path: str):
        """從檔案載入歌詞，失敗時清空狀態並拋出"""
        try:
            raw = self.loader.load_file(file_path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load lyric: {e}")
            self.clear()
            raise
        self.load(raw)

    def clear(self):
        """清空歌詞（不重置模式）"""
        self.state = empty_lyric_state()
        self.metadata = []
        self.is_instrumental = True
        self.source_type = SourceType.NONE

    def set_current_time(self, time_ms: int):
        """更新播放時間並同步焦點行"""
        self.state = sync_by_time(self.state, time_ms)

    def seek(self, time_ms: int):
        """跳轉到指定時間（播放狀態不變）"""
        self.state = seek_to_time(self.state, time_ms)

    def seek_line(self, line_index: int) -> Optional[int]:
        """跳轉到指定行，回傳該行開始時間（索引無效時為 None）"""
        new_state = seek_to_line(self.state, line_index)
        if new_state is self.state:
            return None
        self.state = new_state
        return new_state.current_time

    def set_playing(self, playing: bool):
        self.state = replace(self.state, is_playing=playing)

    def set_mode(self, mode: Union[LyricMode, str]):
        """切換附加模式"""
        self.mode = LyricMode(mode)
        self.state = apply_mode(self.state, self.mode)
        logger.info(f"Lyric mode: {self.mode.value}")

    def snapshot(self) -> Dict[str, Any]:
        """供畫面使用的目前狀態"""
        next_line = get_next_line_info(self.state)
        previous_line = get_previous_line_info(self.state)
        karaoke = get_karaoke_progress(self.state)
        return {
            'current_time': self.state.current_time,
            'line_index': self.state.current_line_index,
            'word_index': self.state.current_word_index,
            'lyrics': get_current_lyrics(self.state),
            'progress': get_highlight_progress(self.state),
            'highlighted': karaoke.highlighted,
            'remaining': karaoke.remaining,
            'highlighted_words': get_highlighted_word_indices(self.state),
            'next_text': next_line.text if next_line else '',
            'previous_text': previous_line.text if previous_line else '',
            'is_instrumental': self.is_instrumental,
            'is_playing': self.state.is_playing,
        }
