"""
測試共用工具

StaticReadingProvider 以固定的讀音表取代 fugashi，
讓母音骨架與比對邏輯的測試不依賴 MeCab 辭典的輸出波動。
"""

from __future__ import annotations

import pytest

from phonorhyme.core.errors import ProviderInitializationFailed
from phonorhyme.core.protocols.reading import PhoneticToken

# 讀音 -> 母音骨架 (只保留獨立母音假名與ン)
READINGS = {
    "青い": "アオイ",  # アオイ
    "赤い": "アカイ",  # アイ
    "上": "ウエ",  # ウエ
    "家": "イエ",  # イエ
    "絵": "エ",  # エ
    "案": "アン",  # アン
    "胃": "イ",  # イ
    "鵜": "ウ",  # ウ
    "会う": "アウ",  # アウ
    "東京": "トウキョウ",  # ウウ
    "空": "ソラ",  # (空)
    "あい": "アイ",  # アイ
    "らめん": "ラーメン",  # ン
    "おい": "オーイ",  # オイ
}


class StaticReadingProvider:
    """
    測試用讀音提供者：
    - 以空白切分 token
    - 讀音表中沒有的 token 視為未知讀音 (reading=None)
    - 記錄每次收到的文本，便於確認正規化結果
    """

    def __init__(self, readings: dict | None = None):
        self.readings = dict(READINGS if readings is None else readings)
        self.calls: list[str] = []

    def segment_and_read(self, text: str):
        self.calls.append(text)
        return [PhoneticToken(surface=chunk, reading=self.readings.get(chunk)) for chunk in text.split()]


class BrokenReadingProvider:
    """模擬辭典無法載入的提供者"""

    def __init__(self):
        self.calls = 0

    def segment_and_read(self, text: str):
        self.calls += 1
        raise ProviderInitializationFailed("dictionary not found")


@pytest.fixture
def provider() -> StaticReadingProvider:
    return StaticReadingProvider()


@pytest.fixture
def engine(provider):
    from phonorhyme import JapaneseRhymeEngine

    return JapaneseRhymeEngine(provider=provider)
