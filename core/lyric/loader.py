"""
歌詞檔案載入

作用：
- 依副檔名讀取歌詞檔案並轉為 RawLyricResponse
- .json 為 API 回應格式；.lrc / .yrc 為單一原文歌詞
- 同名的 .tlyric.lrc / .romalrc.lrc 會作為翻譯、羅馬音一併載入
"""

import json
import logging
import os
from typing import Dict, Optional

from config import LYRIC_ENCODINGS, ROMAJI_SUFFIX, TRANSLATION_SUFFIX

from .model import LyricSource, RawLyricResponse

logger = logging.getLogger(__name__)


class LyricLoader:
    """歌詞檔案載入器"""

    def load_file(self, file_path: str) -> RawLyricResponse:
        """依副檔名自動載入"""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f'Lyric file not found: {file_path}')

        ext = os.path.splitext(file_path)[1].lower()
        if ext == '.json':
            return self.load_json_file(file_path)
        if ext in ('.lrc', '.yrc'):
            return self.load_text_file(file_path)
        raise ValueError(f'Unsupported format: {ext}')

    def load_json_file(self, file_path: str) -> RawLyricResponse:
        """載入 API 回應 JSON"""
        content = self._read_text_file(file_path)
        try:
            data = json.loads(content)
        except ValueError as exc:
            raise ValueError(f'Invalid lyric json: {file_path}') from exc
        if not isinstance(data, dict):
            raise ValueError(f'Invalid lyric json: {file_path}')
        return RawLyricResponse.from_dict(data)

    def load_text_file(self, file_path: str) -> RawLyricResponse:
        """載入 .lrc / .yrc 與同名的翻譯、羅馬音檔案"""
        base, ext = os.path.splitext(file_path)
        field_name = 'yrc' if ext.lower() == '.yrc' else 'lrc'
        fields: Dict[str, Optional[LyricSource]] = {
            field_name: LyricSource(lyric=self._read_text_file(file_path)),
        }

        translation_path = self._find_sibling(base, TRANSLATION_SUFFIX)
        if translation_path:
            fields['tlyric'] = LyricSource(lyric=self._read_text_file(translation_path))

        romaji_path = self._find_sibling(base, ROMAJI_SUFFIX)
        if romaji_path:
            fields['romalrc'] = LyricSource(lyric=self._read_text_file(romaji_path))

        logger.info(f"Lyric file loaded: {file_path} ({', '.join(sorted(fields))})")
        return RawLyricResponse(**fields)

    def _find_sibling(self, base: str, suffix: str) -> Optional[str]:
        candidate = f'{base}{suffix}.lrc'
        if os.path.isfile(candidate):
            return candidate
        return None

    def _read_text_file(self, file_path: str) -> str:
        """讀取文字檔案並嘗試編碼"""
        for encoding in LYRIC_ENCODINGS:
            try:
                with open(file_path, 'r', encoding=encoding) as file_handle:
                    return file_handle.read()
            except UnicodeDecodeError:
                continue
        with open(file_path, 'r', encoding='utf-8', errors='replace') as file_handle:
            return file_handle.read()
