"""
歌詞資料驗證器

作用：
- 驗證行內字的時間順序
- 驗證行與行之間的時間順序
- 驗證時間與時長不可為負數
"""

from dataclasses import dataclass
from typing import List, Tuple

from .model import LyricData


@dataclass
class ValidationError:
    """驗證錯誤資訊"""

    line_index: int  # 行索引
    word_index: int  # 字索引（整行問題為 -1）
    error_type: str  # 錯誤類型代碼
    message: str  # 錯誤訊息


class LyricValidator:
    """歌詞資料驗證器"""

    def validate(self, data: LyricData) -> Tuple[bool, List[ValidationError]]:
        """驗證歌詞資料"""
        errors: List[ValidationError] = []
        previous_line_start = None  # 前一行的開始時間

        for line_idx, line in enumerate(data.lines):
            if not line.items:
                errors.append(ValidationError(line_idx, -1, 'EMPTY_LINE', '歌詞行為空'))
                continue

            if line.start_time < 0 or line.duration < 0:
                errors.append(ValidationError(line_idx, -1, 'TIME_NEGATIVE', '行時間不可為負數'))

            if previous_line_start is not None and line.start_time < previous_line_start:
                errors.append(ValidationError(line_idx, -1, 'LINE_ORDER', '行時間倒序'))
            previous_line_start = line.start_time

            if line.duration > 0 and line.items[-1].end_time > line.end_time:
                errors.append(ValidationError(line_idx, -1, 'LINE_RANGE', '行時長短於最後一個字的結束'))

            previous_word_start = None  # 前一個字的開始時間
            for word_idx, item in enumerate(line.items):
                if item.start_time < 0 or item.duration < 0:
                    errors.append(ValidationError(line_idx, word_idx, 'TIME_NEGATIVE', '時間戳不可為負數'))
                if previous_word_start is not None and item.start_time < previous_word_start:
                    errors.append(ValidationError(line_idx, word_idx, 'WORD_ORDER', '字時間倒序'))
                previous_word_start = item.start_time

        return len(errors) == 0, errors
