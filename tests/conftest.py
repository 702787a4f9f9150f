"""Test configuration and fixtures"""

import os

import pytest

# GUI 測試不需要實體顯示器
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture
def sample_lrc():
    """逐行歌詞"""
    return (
        "[00:24.00]なぜか悲しい\n"
        "[00:29.00]ことがあっても\n"
        "[00:34.00]笑ってみせる\n"
        "[00:38.00]あなたを見てた"
    )


@pytest.fixture
def sample_translation():
    """翻譯歌詞（〖〗包裹）"""
    return (
        "[00:24.00]〖我不懂为什么〗\n"
        "[00:29.00]〖即使你在感到〗\n"
        "[00:34.00]〖悲伤的时候也〗\n"
        "[00:38.00]〖可以露出笑容〗"
    )


@pytest.fixture
def sample_romaji():
    """羅馬音歌詞"""
    return (
        "[00:24.00]naze ka kanashii\n"
        "[00:29.00]koto ga atte mo"
    )


@pytest.fixture
def simple_yrc():
    """兩行逐字歌詞：第一行標頭時長 500，但最後一個字在 1600 結束"""
    return (
        "[1000,500](1000,200,0)a(1200,400,0)b\n"
        "[3000,1000](3000,500,0)c(3500,500,0)d"
    )


@pytest.fixture
def yrc_with_metadata():
    """帶 JSON 元資訊的逐字歌詞"""
    return (
        '{"t":0,"c":[{"tx":"作词: "},{"tx":"刘一乐"}]}\n'
        '{"t":2000,"c":[{"tx":"编曲: "},{"tx":"AntChannel","li":"http://p1.music.126.net/x.jpg","or":"orpheus://x"}]}\n'
        "[28410,4320](28410,270,0)女(28680,180,0)孩(28860,150,0)你(29010,240,0)为"
        "(29250,300,0)何(29550,250,0)踮(29800,340,0)脚(30140,220,0)尖(30360,200,0)\n"
        "[32950,4380](32950,300,0)马(33250,200,0)戏(33450,120,0)团"
    )
