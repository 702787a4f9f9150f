"""
預覽播放器元件

播放器的播放位置即為歌詞同步的時鐘來源。
"""

import logging
from typing import Optional

from PyQt5.QtCore import Qt, QUrl, pyqtSignal
from PyQt5.QtMultimedia import QMediaContent, QMediaPlayer
from PyQt5.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from core.lyric import format_timestamp
from gui.widgets.lyric_view import LyricView
from pipeline.session import LyricMode, LyricSession

logger = logging.getLogger(__name__)

MODE_LABELS = [
    ("僅原文", LyricMode.NONE),
    ("翻譯", LyricMode.TRANSLATION),
    ("羅馬音", LyricMode.ROMAJI),
]


class PreviewPlayer(QWidget):
    """預覽播放器"""

    position_changed = pyqtSignal(int)  # 當前播放位置（毫秒）

    def __init__(self, session: Optional[LyricSession] = None, parent=None):
        super().__init__(parent)
        # 歌詞狀態
        self.session = session or LyricSession()
        # 播放器
        self.player = QMediaPlayer()
        self.player.setNotifyInterval(50)
        # 初始化 UI
        self._setup_ui()
        # 設置信號
        self._setup_signals()

    def _setup_ui(self):
        """設置 UI"""
        layout = QVBoxLayout()

        # 歌詞顯示
        self.lyric_view = LyricView(self)
        layout.addWidget(self.lyric_view, 1)

        # 控制欄
        control_layout = QHBoxLayout()

        self.play_btn = QPushButton("播放")
        self.play_btn.clicked.connect(self._on_play)
        control_layout.addWidget(self.play_btn)

        self.progress_slider = QSlider(Qt.Horizontal)
        self.progress_slider.sliderMoved.connect(self._on_seek)
        control_layout.addWidget(self.progress_slider)

        self.time_label = QLabel("00:00 / 00:00")
        control_layout.addWidget(self.time_label)

        self.mode_combo = QComboBox()
        for label, mode in MODE_LABELS:
            self.mode_combo.addItem(label, mode.value)
        self.mode_combo.currentIndexChanged.connect(self._on_mode_change)
        control_layout.addWidget(self.mode_combo)

        layout.addLayout(control_layout)
        self.setLayout(layout)

    def _setup_signals(self):
        """設置信號"""
        self.player.positionChanged.connect(self._on_position_changed)
        self.player.durationChanged.connect(self._on_duration_changed)
        self.player.stateChanged.connect(self._on_state_changed)

    def set_media(self, file_path: str):
        """設置音訊檔案"""
        self.player.setMedia(QMediaContent(QUrl.fromLocalFile(file_path)))
        logger.info(f"Media set: {file_path}")

    def load_lyric_file(self, file_path: str):
        """載入歌詞檔案（失敗時拋出，由呼叫端提示）"""
        try:
            self.session.load_file(file_path)
        finally:
            self.refresh()

    def clear_lyric(self):
        self.session.clear()
        self.refresh()

    def refresh(self):
        """以目前播放位置重新同步並更新畫面"""
        self.session.set_current_time(self.player.position())
        self._update_lyrics()
        self._update_mode_options()

    def _on_play(self):
        """播放/暫停"""
        if self.player.state() == QMediaPlayer.PlayingState:
            self.player.pause()
            self.play_btn.setText("播放")
        else:
            self.player.play()
            self.play_btn.setText("暫停")

    def _on_state_changed(self, state):
        self.session.set_playing(state == QMediaPlayer.PlayingState)

    def _on_position_changed(self, position_ms: int):
        """播放位置改變"""
        if not self.progress_slider.isSliderDown():
            self.progress_slider.setValue(position_ms)

        self.session.set_current_time(position_ms)
        self._update_time_label()
        self._update_lyrics()
        self.position_changed.emit(position_ms)

    def _on_duration_changed(self, duration_ms: int):
        """時長改變"""
        self.progress_slider.setMaximum(duration_ms)
        self._update_time_label()

    def _on_seek(self, position_ms: int):
        """拖動進度條"""
        self.player.setPosition(position_ms)
        self.session.seek(position_ms)
        self._update_lyrics()

    def seek_to_line(self, line_index: int):
        """跳到指定歌詞行"""
        start_time = self.session.seek_line(line_index)
        if start_time is None:
            return
        self.player.setPosition(start_time)
        self._update_lyrics()

    def _on_mode_change(self, index: int):
        """切換翻譯/羅馬音"""
        self.session.set_mode(self.mode_combo.itemData(index))
        self._update_lyrics()

    def _update_mode_options(self):
        """依可用軌道啟用/停用模式選項"""
        model = self.mode_combo.model()
        model.item(1).setEnabled(self.session.has_translation)
        model.item(2).setEnabled(self.session.has_romaji)

    def _update_time_label(self):
        """更新時間顯示"""
        current_str = format_timestamp(self.player.position())
        duration_str = format_timestamp(self.player.duration())
        self.time_label.setText(f"{current_str} / {duration_str}")

    def _update_lyrics(self):
        """更新歌詞顯示"""
        if not self.session.state.tracks:
            self.lyric_view.show_placeholder()
            return
        self.lyric_view.update_snapshot(self.session.snapshot())
