"""
日文文字正規化模組

把片假名統一轉成平假名並移除長音符號，讓分詞器看到一致的書寫形式。
"""

from .config import JapaneseKanaConfig

_KATAKANA_TO_HIRAGANA = {
    code: code - JapaneseKanaConfig.KANA_OFFSET
    for code in range(JapaneseKanaConfig.KATAKANA_START, JapaneseKanaConfig.KATAKANA_END + 1)
}
_KATAKANA_TO_HIRAGANA[ord(JapaneseKanaConfig.LONG_VOWEL_MARK)] = None

_STRIP_LONG_VOWEL = {ord(JapaneseKanaConfig.LONG_VOWEL_MARK): None}


def to_hiragana(text: str) -> str:
    """
    片假名 (ァ~ン) 轉平假名，並刪除長音符號 (ー)

    其他字元 (漢字、拉丁字母、標點、ヴ 等範圍外字元) 原樣保留。

    Args:
        text: 任意文本，可為空字串

    Returns:
        str: 正規化後的文本 (長度可能因刪除長音符號而變短)
    """
    return text.translate(_KATAKANA_TO_HIRAGANA)


def strip_long_vowel_marks(text: str) -> str:
    """只刪除長音符號 (ー)"""
    return text.translate(_STRIP_LONG_VOWEL)

