"""
Phonetic Reading Provider Protocol

定義讀音提供者的最小介面（text -> [(surface, reading)]）。
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class PhoneticToken:
    """
    分詞後的單一 token

    Attributes:
        surface: 原文表層形式
        reading: 片假名讀音；未知時為 None
    """

    surface: str
    reading: Optional[str] = None


@runtime_checkable
class PhoneticReadingProvider(Protocol):
    def segment_and_read(self, text: str) -> Sequence[PhoneticToken]:
        """
        分詞並回傳每個 token 的片假名讀音

        Raises:
            ProviderInitializationFailed: 底層資源 (辭典等) 無法載入
        """
        ...
