"""
多軌歌詞狀態組裝
"""

from typing import Optional

from .model import LyricData, LyricState, LyricTrack, TrackType


def create_lyric_state(
    original: LyricData,
    translation: Optional[LyricData] = None,
    romaji: Optional[LyricData] = None,
) -> LyricState:
    """建立歌詞狀態：原文軌必定存在且啟用，翻譯/羅馬音軌有內容才加入且預設關閉"""
    tracks = [LyricTrack(type=TrackType.ORIGINAL, data=original, enabled=True)]

    if translation is not None and translation.lines:
        tracks.append(LyricTrack(type=TrackType.TRANSLATION, data=translation, enabled=False))

    if romaji is not None and romaji.lines:
        tracks.append(LyricTrack(type=TrackType.ROMAJI, data=romaji, enabled=False))

    return LyricState(
        current_time=0,
        current_line_index=-1,
        current_word_index=-1,
        tracks=tuple(tracks),
        is_playing=False,
    )


def empty_lyric_state() -> LyricState:
    """尚未載入歌詞（或已清空）時的狀態"""
    return LyricState()
