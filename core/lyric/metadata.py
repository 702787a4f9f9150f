"""
逐字歌詞的 JSON 元資訊解析

逐字歌詞開頭可能夾帶如下格式的行：
    {"t":0,"c":[{"tx":"作词: "},{"tx":"某人","li":"http://...","or":"orpheus://..."}]}
每個 c 項目產生一筆 LyricMetadata。解析失敗時直接略過，不影響歌詞解析。
"""

import json
import logging
from typing import List

from .model import LyricMetadata

logger = logging.getLogger(__name__)

LYRICS_INFO = 'lyrics_info'


def is_metadata_json_line(line: str) -> bool:
    """判斷是否為 JSON 元資訊行"""
    return line.strip().startswith('{')


def parse_metadata_json(line: str) -> List[LyricMetadata]:
    """解析單行 JSON 元資訊"""
    try:
        parsed = json.loads(line)
    except ValueError:
        logger.debug(f"Skip malformed metadata line: {line[:40]}")
        return []

    if not isinstance(parsed, dict) or 't' not in parsed or not isinstance(parsed.get('c'), list):
        logger.debug(f"Skip metadata line with unexpected shape: {line[:40]}")
        return []

    time_ms = parsed['t']
    records = []
    for entry in parsed['c']:
        if not isinstance(entry, dict):
            continue
        records.append(
            LyricMetadata(
                type=LYRICS_INFO,
                time=time_ms,
                text=entry.get('tx') or '',
                image_url=entry.get('li'),
                orpheus_url=entry.get('or'),
            )
        )
    return records
