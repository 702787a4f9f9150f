"""
歌詞顯示元件

作用：
- 顯示上一行、目前行（已唱/未唱分色）、下一行
- 顯示啟用中的翻譯或羅馬音
"""

import html
from typing import Any, Dict

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from config import DIM_COLOR, HIGHLIGHT_COLOR, LYRIC_FONT_SIZE, TEXT_COLOR


class LyricView(QWidget):
    """歌詞顯示區"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self.show_placeholder()

    def _setup_ui(self):
        """設置 UI"""
        layout = QVBoxLayout()

        self.previous_label = self._make_label(int(LYRIC_FONT_SIZE * 0.7), DIM_COLOR)
        layout.addWidget(self.previous_label)

        self.current_label = self._make_label(LYRIC_FONT_SIZE, TEXT_COLOR)
        self.current_label.setTextFormat(Qt.RichText)
        layout.addWidget(self.current_label)

        self.extra_label = self._make_label(int(LYRIC_FONT_SIZE * 0.7), TEXT_COLOR)
        layout.addWidget(self.extra_label)

        self.next_label = self._make_label(int(LYRIC_FONT_SIZE * 0.7), DIM_COLOR)
        layout.addWidget(self.next_label)

        self.setStyleSheet("background-color: #2a2a2a;")
        self.setLayout(layout)

    def _make_label(self, font_size: int, color: str) -> QLabel:
        label = QLabel("")
        label.setAlignment(Qt.AlignCenter)
        label.setWordWrap(True)
        label.setStyleSheet(f"color: {color}; padding: 8px; font-size: {font_size}px;")
        return label

    def show_placeholder(self, text: str = "歌詞將在此顯示"):
        """無歌詞時的提示"""
        self.previous_label.setText("")
        self.current_label.setText(html.escape(text))
        self.extra_label.setText("")
        self.next_label.setText("")

    def update_snapshot(self, snapshot: Dict[str, Any]):
        """依歌詞狀態快照更新畫面"""
        if snapshot['is_instrumental']:
            self.show_placeholder("純音樂，請欣賞")
            return

        self.previous_label.setText(snapshot['previous_text'])
        self.next_label.setText(snapshot['next_text'])

        if snapshot['line_index'] < 0:
            self.current_label.setText("")
            self.extra_label.setText("")
            return

        self.current_label.setText(
            f'<span style="color: {HIGHLIGHT_COLOR};">{html.escape(snapshot["highlighted"])}</span>'
            f'<span style="color: {TEXT_COLOR};">{html.escape(snapshot["remaining"])}</span>'
        )

        lyrics = snapshot['lyrics']
        self.extra_label.setText(lyrics.get('translation') or lyrics.get('romaji') or '')
