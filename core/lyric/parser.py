"""
歌詞解析器

作用：
- 解析逐行歌詞（LRC）與逐字歌詞（YRC）
- 解析翻譯、羅馬音歌詞
- 統一入口 parse()，轉換為多軌歌詞狀態

格式：
- 逐行：[mm:ss.xx]內容 或 [mm:ss.xxx]內容
- 逐字：[行開始,行時長](字開始,字時長,0)字(字開始,字時長,0)字...
- 逐字歌詞中以 { 開頭的行為 JSON 元資訊

個別格式錯誤的行/字一律略過，解析不會拋出例外。
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from config import (
    CREDIT_MARKERS,
    INSTRUMENTAL_MARKERS,
    METADATA_ITEM_MAX_DURATION,
    TRANSLATION_BRACKETS,
)

from .assembler import create_lyric_state
from .metadata import is_metadata_json_line, parse_metadata_json
from .model import (
    LyricData,
    LyricItem,
    LyricLine,
    LyricMetadata,
    LyricParseResult,
    LyricType,
    RawLyricResponse,
    SourceType,
)
from .timecode import fraction_to_ms

logger = logging.getLogger(__name__)

LINE_TIMESTAMP_PATTERN = re.compile(r'\[(\d{2}):(\d{2})\.(\d{2,3})\]')
LRC_LINE_PATTERN = re.compile(r'\[(\d{2}):(\d{2})\.(\d{2,3})\](.*)')
YRC_HEADER_PATTERN = re.compile(r'^\[(\d+),(\d+)\]')
YRC_WORD_PATTERN = re.compile(
    r'\((\d+),(\d+),(\d+)\)(.*?)(?=\(\d+,\d+,\d+\)|\Z)',
    re.DOTALL,
)


def _timestamp_groups_to_ms(minutes: str, seconds: str, fraction: str) -> int:
    return (int(minutes) * 60 + int(seconds)) * 1000 + fraction_to_ms(fraction)


def _sort_lines(lines: List[LyricLine]) -> List[LyricLine]:
    # sorted() 為穩定排序，同時間的行維持原順序
    return sorted(lines, key=lambda line: line.start_time)


def _single_item_line(text: str, start_time: int) -> LyricLine:
    return LyricLine(
        items=[LyricItem(text=text, start_time=start_time, duration=0)],
        start_time=start_time,
        duration=0,
        original_text=text,
    )


class LyricParser:
    """歌詞解析器"""

    def __init__(
        self,
        credit_markers: Sequence[str] = CREDIT_MARKERS,
        instrumental_markers: Sequence[str] = INSTRUMENTAL_MARKERS,
        metadata_max_duration: int = METADATA_ITEM_MAX_DURATION,
    ):
        # 逐行歌詞中需過濾的製作人員標記
        self.credit_markers = tuple(credit_markers)
        # 判斷純音樂時視為非歌詞的標記
        self.instrumental_markers = tuple(instrumental_markers)
        # 元資訊行判斷門檻（毫秒）
        self.metadata_max_duration = metadata_max_duration

    def parse(self, raw: Union[RawLyricResponse, Dict[str, Any], None]) -> LyricParseResult:
        """統一解析入口：優先逐字，其次逐行，皆無則為空歌詞"""
        if not isinstance(raw, RawLyricResponse):
            raw = RawLyricResponse.from_dict(raw)

        has_yrc = raw.yrc is not None and raw.yrc.has_text
        has_lrc = raw.lrc is not None and raw.lrc.has_text
        has_translation = raw.tlyric is not None and raw.tlyric.has_text
        has_romaji = raw.romalrc is not None and raw.romalrc.has_text

        if not has_yrc and not has_lrc:
            state = create_lyric_state(LyricData(type=LyricType.LINE, lines=[]))
            logger.debug("No lyric source available")
            return LyricParseResult(
                state=state,
                metadata=[],
                is_instrumental=True,
                source_type=SourceType.NONE,
            )

        translation = self.parse_translation(raw.tlyric.lyric) if has_translation else None
        romaji = self.parse_romaji(raw.romalrc.lyric) if has_romaji else None

        metadata: List[LyricMetadata] = []
        if has_yrc:
            original, metadata = self.parse_yrc(raw.yrc.lyric)
            source_type = SourceType.YRC
        else:
            original = self.parse_lrc(raw.lrc.lyric)
            source_type = SourceType.LRC

        state = create_lyric_state(original, translation, romaji)
        logger.debug(
            f"Parsed {source_type.value} lyric: {len(original.lines)} lines, "
            f"{len(state.tracks)} tracks, {len(metadata)} metadata"
        )
        return LyricParseResult(
            state=state,
            metadata=metadata,
            is_instrumental=self.is_instrumental(original),
            source_type=source_type,
        )

    def parse_lrc(self, text: str) -> LyricData:
        """解析逐行歌詞（過濾作詞、作曲等製作人員行）"""
        lines: List[LyricLine] = []

        for raw_line in (text or '').split('\n'):
            match = LRC_LINE_PATTERN.search(raw_line)
            if not match:
                continue

            minutes_str, seconds_str, fraction_str, content = match.groups()
            if any(marker in content for marker in self.credit_markers):
                continue

            content = content.strip()
            if not content:
                continue

            start_time = _timestamp_groups_to_ms(minutes_str, seconds_str, fraction_str)
            lines.append(_single_item_line(content, start_time))

        return LyricData(type=LyricType.LINE, lines=_sort_lines(lines))

    def parse_yrc(self, text: str) -> Tuple[LyricData, List[LyricMetadata]]:
        """解析逐字歌詞，回傳 (歌詞資料, 元資訊列表)"""
        lines: List[LyricLine] = []
        metadata: List[LyricMetadata] = []

        for raw_line in (text or '').split('\n'):
            line = raw_line.strip()
            if not line:
                continue

            if is_metadata_json_line(line):
                metadata.extend(parse_metadata_json(line))
                continue

            parsed = self.parse_yrc_line(line)
            if parsed is not None:
                lines.append(parsed)

        return LyricData(type=LyricType.WORD, lines=_sort_lines(lines)), metadata

    def parse_yrc_line(self, line: str) -> Optional[LyricLine]:
        """解析逐字歌詞中的一行"""
        if is_metadata_json_line(line):
            return None

        header = YRC_HEADER_PATTERN.match(line)
        if not header:
            logger.debug(f"Skip yrc line without header: {line[:40]}")
            return None

        line_start = int(header.group(1))
        header_duration = int(header.group(2))
        content = line[header.end():]

        items: List[LyricItem] = []
        for word_match in YRC_WORD_PATTERN.finditer(content):
            word_start, word_duration, _flag, word_text = word_match.groups()
            if not word_text:
                continue
            items.append(LyricItem(text=word_text, start_time=int(word_start), duration=int(word_duration)))

        if not items:
            return None

        # 行時長至少延伸到最後一個字結束，避免行尾被提前視為結束
        duration = max(header_duration, items[-1].end_time - line_start)
        original_text = ''.join(item.text for item in items).strip()

        return LyricLine(
            items=items,
            start_time=line_start,
            duration=duration,
            original_text=original_text or content,
        )

    def parse_translation(self, text: str) -> LyricData:
        """解析翻譯歌詞（移除〖〗包裹符號）"""
        return self._parse_auxiliary(text, strip_chars=TRANSLATION_BRACKETS)

    def parse_romaji(self, text: str) -> LyricData:
        """解析羅馬音歌詞"""
        return self._parse_auxiliary(text)

    def _parse_auxiliary(self, text: str, strip_chars: Sequence[str] = ()) -> LyricData:
        """翻譯與羅馬音共用：取第一個時間戳，移除全部時間戳後的文字為內容"""
        lines: List[LyricLine] = []
        if not text:
            return LyricData(type=LyricType.LINE, lines=lines)

        for raw_line in text.split('\n'):
            match = LINE_TIMESTAMP_PATTERN.search(raw_line)
            if not match:
                continue

            start_time = _timestamp_groups_to_ms(*match.groups())
            content = LINE_TIMESTAMP_PATTERN.sub('', raw_line)
            for char in strip_chars:
                content = content.replace(char, '')
            content = content.strip()
            if not content:
                continue

            lines.append(_single_item_line(content, start_time))

        return LyricData(type=LyricType.LINE, lines=_sort_lines(lines))

    def is_instrumental(self, data: LyricData) -> bool:
        """沒有任何可唱內容時視為純音樂"""
        if not data.lines:
            return True
        return all(
            self._is_non_lyric_text(item.text)
            for line in data.lines
            for item in line.items
        )

    def is_metadata_line(self, line: LyricLine) -> bool:
        """所有字都極短（小於門檻）時視為元資訊行"""
        return bool(line.items) and all(
            item.duration < self.metadata_max_duration for item in line.items
        )

    def _is_non_lyric_text(self, text: str) -> bool:
        if not text.strip():
            return True
        return any(marker in text for marker in self.instrumental_markers)


_default_parser = LyricParser()

parse = _default_parser.parse
parse_lrc = _default_parser.parse_lrc
parse_yrc = _default_parser.parse_yrc
parse_translation = _default_parser.parse_translation
parse_romaji = _default_parser.parse_romaji
is_instrumental = _default_parser.is_instrumental
is_metadata_line = _default_parser.is_metadata_line
