"""
歌詞資料結構定義

作用：
- 定義逐行/逐字歌詞的統一資料結構
- 定義多軌歌詞狀態（原文、翻譯、羅馬音）
- 定義原始歌詞來源（API 回應）的結構

時間單位一律為整數毫秒。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class LyricType(str, Enum):
    """歌詞原始類型"""

    LINE = 'line'  # 逐行
    WORD = 'word'  # 逐字


class TrackType(str, Enum):
    """歌詞軌類型"""

    ORIGINAL = 'original'
    TRANSLATION = 'translation'
    ROMAJI = 'romaji'


class SourceType(str, Enum):
    """解析所使用的主要來源"""

    YRC = 'yrc'  # 逐字
    LRC = 'lrc'  # 逐行
    NONE = 'none'


@dataclass
class LyricItem:
    """歌詞內容項（逐字時為一個字，逐行時為整行）"""

    text: str  # 內容文字（保留尾端空白）
    start_time: int  # 開始時間（毫秒）
    duration: int = 0  # 持續時間（毫秒），0 表示未知

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration


@dataclass
class LyricLine:
    """一行歌詞"""

    items: List[LyricItem] = field(default_factory=list)  # 內容項列表
    start_time: int = 0  # 行開始時間
    duration: int = 0  # 行持續時間（可能大於最後一個字的結束）
    original_text: str = ''  # 不含時間標記的原始文字

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration

    @property
    def text(self) -> str:
        """整行文字（各內容項直接串接）"""
        return ''.join(item.text for item in self.items)


@dataclass
class LyricData:
    """解析後的歌詞資料"""

    type: LyricType = LyricType.LINE
    lines: List[LyricLine] = field(default_factory=list)


@dataclass(frozen=True)
class LyricTrack:
    """歌詞軌（多軌同步用）"""

    type: TrackType
    data: LyricData
    enabled: bool = False


@dataclass(frozen=True)
class LyricState:
    """播放器歌詞狀態，只能透過整體替換更新"""

    current_time: int = 0  # 目前播放時間（毫秒）
    current_line_index: int = -1  # 目前焦點行，-1 表示無
    current_word_index: int = -1  # 焦點行內的目前字，-1 表示無
    tracks: Tuple[LyricTrack, ...] = ()
    is_playing: bool = False

    def get_track(self, track_type: TrackType) -> Optional[LyricTrack]:
        """依類型取得歌詞軌"""
        for track in self.tracks:
            if track.type == track_type:
                return track
        return None

    @property
    def original_lines(self) -> List[LyricLine]:
        """原文軌的歌詞行（無原文軌時為空列表）"""
        track = self.get_track(TrackType.ORIGINAL)
        if track is None:
            return []
        return track.data.lines


@dataclass
class LyricMetadata:
    """歌詞附帶的元資訊（作詞、作曲等）"""

    type: str  # 類別，目前只有 'lyrics_info'
    time: int  # 出現時間（毫秒）
    text: str
    image_url: Optional[str] = None
    orpheus_url: Optional[str] = None


@dataclass
class LyricParseResult:
    """一次解析的完整結果"""

    state: LyricState
    metadata: List[LyricMetadata] = field(default_factory=list)
    is_instrumental: bool = True
    source_type: SourceType = SourceType.NONE


@dataclass
class LyricSource:
    """單一歌詞欄位，對應 API 的 {lyric, version}"""

    lyric: str = ''
    version: int = 0

    @property
    def has_text(self) -> bool:
        return bool(self.lyric and self.lyric.strip())

    @classmethod
    def from_value(cls, value: Any) -> Optional['LyricSource']:
        """接受 None、字串、dict 或 LyricSource"""
        if value is None:
            return None
        if isinstance(value, LyricSource):
            return value
        if isinstance(value, str):
            return cls(lyric=value)
        if isinstance(value, dict):
            lyric = value.get('lyric') or ''
            version = value.get('version') or 0
            if not isinstance(lyric, str):
                return None
            return cls(lyric=lyric, version=int(version) if isinstance(version, (int, float)) else 0)
        return None


RAW_LYRIC_FIELDS = ('lrc', 'tlyric', 'romalrc', 'yrc', 'ytlrc', 'yromalrc')


@dataclass
class RawLyricResponse:
    """原始歌詞回應（各欄位皆可缺省）"""

    lrc: Optional[LyricSource] = None  # 逐行原文
    tlyric: Optional[LyricSource] = None  # 逐行翻譯
    romalrc: Optional[LyricSource] = None  # 逐行羅馬音
    yrc: Optional[LyricSource] = None  # 逐字原文
    ytlrc: Optional[LyricSource] = None  # 逐字翻譯（目前未使用）
    yromalrc: Optional[LyricSource] = None  # 逐字羅馬音（目前未使用）

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RawLyricResponse':
        """由 API 回應 dict 建立，多餘欄位忽略"""
        if not data:
            return cls()
        return cls(**{name: LyricSource.from_value(data.get(name)) for name in RAW_LYRIC_FIELDS})
