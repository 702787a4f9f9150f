"""
播放時間同步

作用：
- 依播放時間計算焦點行與目前字（純函數，回傳新狀態）
- 提供各軌目前歌詞、卡拉OK進度、前後行等查詢

焦點行規則：
- 行區間為 [start, end)，end 為 start + duration；duration 為 0 時以下一行開始為界，
  最後一行則無限延伸
- 最後一個字唱完到下一行開始之間，仍保持該行為焦點行，目前字固定為最後一個字
- 未命中任何行時，若上一個焦點行已開始且下一行尚未開始，沿用上一個焦點行
"""

import math
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from .model import LyricItem, LyricLine, LyricState, TrackType


@dataclass
class KaraokeProgress:
    """目前行的已唱/未唱文字"""

    highlighted: str = ''
    remaining: str = ''
    highlighted_count: int = 0
    total_count: int = 0


@dataclass
class NeighborLine:
    """相鄰行資訊"""

    index: int
    start_time: int
    end_time: int
    text: str


def effective_end_time(lines: List[LyricLine], index: int) -> float:
    """行的實際結束時間（duration 未知時以下一行開始為界）"""
    line = lines[index]
    if line.duration > 0:
        return line.start_time + line.duration
    if index + 1 < len(lines):
        return lines[index + 1].start_time
    return math.inf


def _find_word_index(line: LyricLine, next_line: Optional[LyricLine], current_time: int) -> int:
    word_index = -1
    for i, item in enumerate(line.items):
        if current_time < item.end_time:
            word_index = i
            break
        if i == len(line.items) - 1:
            word_index = i

    # 行尾空窗期：最後一個字已唱完但下一行尚未開始
    if line.items:
        last_end = line.items[-1].end_time
        if current_time >= last_end and next_line is not None and current_time < next_line.start_time:
            word_index = len(line.items) - 1

    return word_index


def _search_line(lines: List[LyricLine], current_time: int) -> Tuple[int, int]:
    """二分搜尋包含目前時間的行，回傳 (行索引, 字索引)"""
    left = 0
    right = len(lines) - 1

    while left <= right:
        mid = (left + right) // 2
        line = lines[mid]
        next_line = lines[mid + 1] if mid + 1 < len(lines) else None

        if line.start_time <= current_time < effective_end_time(lines, mid):
            return mid, _find_word_index(line, next_line, current_time)

        if current_time < line.start_time:
            right = mid - 1
        else:
            left = mid + 1

    return -1, -1


def _hold_previous_line(lines: List[LyricLine], previous_index: int, current_time: int) -> Tuple[int, int]:
    """未命中任何行時，是否沿用上一個焦點行"""
    if previous_index < 0 or previous_index >= len(lines):
        return -1, -1

    prev_line = lines[previous_index]
    next_line = lines[previous_index + 1] if previous_index + 1 < len(lines) else None

    if current_time < prev_line.start_time:
        return -1, -1
    if next_line is not None:
        holding = current_time < next_line.start_time
    else:
        holding = current_time >= prev_line.end_time
    if not holding:
        return -1, -1

    word_index = len(prev_line.items) - 1 if prev_line.items else -1
    return previous_index, word_index


def sync_by_time(state: LyricState, current_time: int) -> LyricState:
    """依播放時間計算新狀態，不修改原狀態"""
    lines = state.original_lines
    line_index, word_index = -1, -1

    if lines:
        line_index, word_index = _search_line(lines, current_time)
        if line_index < 0:
            line_index, word_index = _hold_previous_line(lines, state.current_line_index, current_time)

    return replace(
        state,
        current_time=current_time,
        current_line_index=line_index,
        current_word_index=word_index,
    )


def get_current_line_index(state: LyricState, current_time: int) -> int:
    return sync_by_time(state, current_time).current_line_index


def seek_to_time(state: LyricState, time_ms: int) -> LyricState:
    """跳轉到指定時間"""
    return sync_by_time(state, time_ms)


def seek_to_line(state: LyricState, line_index: int) -> LyricState:
    """跳轉到指定行，索引超出範圍時原樣回傳"""
    lines = state.original_lines
    if line_index < 0 or line_index >= len(lines):
        return state

    return replace(
        state,
        current_time=lines[line_index].start_time,
        current_line_index=line_index,
        current_word_index=-1,
    )


def toggle_track(state: LyricState, track_type: TrackType, enabled: bool) -> LyricState:
    """切換軌道啟用狀態，回傳新狀態"""
    if state.get_track(track_type) is None:
        return state

    tracks = tuple(
        replace(track, enabled=enabled) if track.type == track_type else track
        for track in state.tracks
    )
    return replace(state, tracks=tracks)


def _current_original_line(state: LyricState) -> Optional[LyricLine]:
    lines = state.original_lines
    if 0 <= state.current_line_index < len(lines):
        return lines[state.current_line_index]
    return None


def get_current_lyrics(state: LyricState) -> Dict[str, str]:
    """各啟用軌在目前行索引的文字，key 為軌類型"""
    result: Dict[str, str] = {}
    line_index = state.current_line_index
    if line_index < 0:
        return result

    for track in state.tracks:
        if not track.enabled or not track.data.lines:
            continue
        if line_index >= len(track.data.lines):
            continue
        result[track.type.value] = track.data.lines[line_index].text

    return result


def get_highlight_progress(state: LyricState, current_time: Optional[int] = None) -> float:
    """目前行的進度（0~1）"""
    line = _current_original_line(state)
    if line is None or not line.items:
        return 0.0

    if current_time is None:
        current_time = state.current_time
    elapsed = current_time - line.start_time

    duration = line.duration
    if duration <= 0:
        end_time = effective_end_time(state.original_lines, state.current_line_index)
        if math.isinf(end_time):
            return 1.0 if elapsed > 0 else 0.0
        duration = end_time - line.start_time
        if duration <= 0:
            return 1.0 if elapsed >= 0 else 0.0

    return max(0.0, min(1.0, elapsed / duration))


def get_line_word_timings(state: LyricState, line_index: int) -> List[LyricItem]:
    """原文軌指定行的所有字"""
    lines = state.original_lines
    if 0 <= line_index < len(lines):
        return lines[line_index].items
    return []


def get_highlighted_word_indices(state: LyricState) -> List[int]:
    """已唱完的字索引（不含正在唱的字）"""
    if state.current_line_index < 0 or state.current_word_index < 0:
        return []

    line = _current_original_line(state)
    if line is None:
        return []

    return [
        i
        for i, item in enumerate(line.items[:state.current_word_index + 1])
        if state.current_time >= item.end_time
    ]


def get_karaoke_progress(state: LyricState) -> KaraokeProgress:
    """逐字卡拉OK：分出已唱與未唱文字"""
    line = _current_original_line(state)
    if line is None:
        return KaraokeProgress()

    progress = KaraokeProgress(total_count=len(line.items))
    highlighted = []
    remaining = []
    for item in line.items:
        if state.current_time >= item.end_time:
            highlighted.append(item.text)
            progress.highlighted_count += 1
        else:
            remaining.append(item.text)

    progress.highlighted = ''.join(highlighted)
    progress.remaining = ''.join(remaining)
    return progress


def _neighbor(state: LyricState, index: int) -> Optional[NeighborLine]:
    lines = state.original_lines
    if index < 0 or index >= len(lines):
        return None
    line = lines[index]
    return NeighborLine(index=index, start_time=line.start_time, end_time=line.end_time, text=line.text)


def get_next_line_info(state: LyricState) -> Optional[NeighborLine]:
    """下一行資訊（尚無焦點行時為第一行）"""
    return _neighbor(state, state.current_line_index + 1)


def get_previous_line_info(state: LyricState) -> Optional[NeighborLine]:
    """上一行資訊"""
    if state.current_line_index < 1:
        return None
    return _neighbor(state, state.current_line_index - 1)
