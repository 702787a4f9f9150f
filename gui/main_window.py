"""
Main window for Lyric Sync Player
"""

import logging

from PyQt5.QtWidgets import QAction, QFileDialog, QMainWindow, QMessageBox

from config import WINDOW_HEIGHT, WINDOW_WIDTH
from gui.widgets.preview_player import PreviewPlayer
from pipeline.session import LyricSession

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """主視窗 - Lyric Sync Player"""

    def __init__(self):
        super().__init__()
        self.session = LyricSession()
        self.init_ui()
        self.setup_menu()
        logger.info("MainWindow initialized")

    def init_ui(self):
        """初始化 UI"""
        self.setWindowTitle('Lyric Sync Player')
        self.setGeometry(100, 100, WINDOW_WIDTH, WINDOW_HEIGHT)

        self.preview_player = PreviewPlayer(self.session, self)
        self.setCentralWidget(self.preview_player)

        self.statusBar().showMessage('就緒')

    def setup_menu(self):
        """設置菜單欄"""
        menubar = self.menuBar()

        file_menu = menubar.addMenu('檔案')

        open_audio_action = QAction('開啟音訊', self)
        open_audio_action.triggered.connect(self.on_open_audio)
        file_menu.addAction(open_audio_action)

        open_lyric_action = QAction('開啟歌詞', self)
        open_lyric_action.triggered.connect(self.on_open_lyric)
        file_menu.addAction(open_lyric_action)

        clear_lyric_action = QAction('清除歌詞', self)
        clear_lyric_action.triggered.connect(self.on_clear_lyric)
        file_menu.addAction(clear_lyric_action)

        file_menu.addSeparator()

        exit_action = QAction('離開', self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def on_open_audio(self):
        """載入音訊"""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "選擇音訊檔案",
            "",
            "音訊檔案 (*.wav *.mp3 *.flac *.m4a);;所有檔案 (*)",
        )
        if not file_path:
            return
        self.preview_player.set_media(file_path)
        self.statusBar().showMessage(f'音訊：{file_path}')

    def on_open_lyric(self):
        """載入歌詞"""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "選擇歌詞檔案",
            "",
            "歌詞檔案 (*.json *.lrc *.yrc);;所有檔案 (*)",
        )
        if not file_path:
            return

        try:
            self.preview_player.load_lyric_file(file_path)
        except (OSError, ValueError) as exc:
            QMessageBox.critical(self, "錯誤", f"載入歌詞失敗：\n{exc}")
            self.statusBar().showMessage('歌詞載入失敗')
            return

        self.statusBar().showMessage(self._format_lyric_status())

    def on_clear_lyric(self):
        self.preview_player.clear_lyric()
        self.statusBar().showMessage('歌詞已清除')

    def _format_lyric_status(self) -> str:
        """歌詞載入狀態文字"""
        source_text = {
            'yrc': '逐字歌詞',
            'lrc': '逐行歌詞',
            'none': '無歌詞',
        }[self.session.source_type.value]
        extras = []
        if self.session.has_translation:
            extras.append('翻譯')
        if self.session.has_romaji:
            extras.append('羅馬音')
        suffix = f"（{'、'.join(extras)}）" if extras else ''
        return f'{source_text}{suffix}，共 {len(self.session.lines)} 行'

    def closeEvent(self, event):
        """關閉應用"""
        self.preview_player.player.stop()
        logger.info("Application closed")
        event.accept()
