"""
時間戳轉換

作用：
- [mm:ss.xx] / [mm:ss.xxx] 轉為毫秒
- 毫秒轉為 mm:ss 顯示字串
"""

import re

# 分、秒、小數（2 或 3 位）
TIMESTAMP_PATTERN = re.compile(r'\[?(\d{2}):(\d{2})\.(\d{2,3})\]?')


def fraction_to_ms(fraction: str) -> int:
    """小數部分轉毫秒：2 位為百分秒，3 位為毫秒"""
    if len(fraction) == 2:
        return int(fraction) * 10
    return int(fraction.ljust(3, '0')[:3])


def parse_timestamp(text: str) -> int:
    """將 mm:ss.xx 或 [mm:ss.xxx] 轉為毫秒"""
    match = TIMESTAMP_PATTERN.fullmatch(text.strip())
    if not match:
        raise ValueError(f'Invalid timestamp: {text!r}')
    minutes_str, seconds_str, fraction_str = match.groups()
    return (int(minutes_str) * 60 + int(seconds_str)) * 1000 + fraction_to_ms(fraction_str)


def format_timestamp(ms: int) -> str:
    """毫秒轉為 mm:ss（捨去秒以下）"""
    ms = max(0, int(ms))
    minutes = ms // 60000
    seconds = (ms % 60000) // 1000
    return f"{minutes:02d}:{seconds:02d}"
