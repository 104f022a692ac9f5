"""
日文配置模組

定義假名轉換表與分詞器相關的配置參數。
"""

from dataclasses import dataclass


@dataclass
class JapaneseKanaConfig:
    """
    日文假名配置

    Attributes:
        tagger_args (str): 傳給 fugashi.Tagger 的 MeCab 參數 (例如 "-d /path/to/dic")。
                           預設為空字串，使用已安裝的 unidic-lite。
    """

    tagger_args: str = ""

    # =========================================================================
    # 1. 片假名 -> 平假名 (Script Normalization)
    # =========================================================================
    # ァ (U+30A1) ~ ン (U+30F3) 與 ぁ (U+3041) ~ ん (U+3093) 一一對應，差距固定
    KATAKANA_START = 0x30A1
    KATAKANA_END = 0x30F3
    KANA_OFFSET = 0x60

    # 長音符號 (ー) 沒有獨立的母音類別，比對前一律移除
    LONG_VOWEL_MARK = "ー"

    # =========================================================================
    # 2. 母音骨架字母表 (Vowel Skeleton Alphabet)
    # =========================================================================
    # 只保留獨立的母音假名與撥音，子音+母音的音節不拆解
    VOWEL_KANA = "アイウエオ"
    NASAL_KANA = "ン"
