"""
FugashiReadingProvider 測試

- 以假的 tagger factory 驗證延遲載入、single-flight 初始化與失敗記憶
- 實際 fugashi/unidic 的測試在未安裝時跳過
"""

import importlib.util
import logging
import threading
import time
from types import SimpleNamespace

import pytest

from phonorhyme.core.errors import ProviderInitializationFailed
from phonorhyme.core.protocols.reading import PhoneticReadingProvider, PhoneticToken
from phonorhyme.languages.japanese.config import JapaneseKanaConfig
import phonorhyme.languages.japanese.provider as provider_module
from phonorhyme.languages.japanese.provider import FugashiReadingProvider, get_fugashi_provider, reset_fugashi_provider

HAS_JAPANESE_DEPS = (
    importlib.util.find_spec("fugashi") is not None and importlib.util.find_spec("unidic_lite") is not None
)


def _word(surface, kana):
    return SimpleNamespace(surface=surface, feature=SimpleNamespace(kana=kana))


class FakeTagger:
    TABLE = {
        "そらをみあげて": [
            _word("そら", "ソラ"),
            _word("を", "ヲ"),
            _word("みあげ", "ミアゲ"),
            _word("て", "テ"),
        ],
        "ぴよ": [_word("ぴよ", "*")],
        "記号": [SimpleNamespace(surface="記号", feature=None)],
    }

    def __call__(self, text):
        return list(self.TABLE.get(text, []))


class CountingFactory:
    def __init__(self, delay: float = 0.0, error: Exception | None = None):
        self.delay = delay
        self.error = error
        self.calls = 0
        self.args = []
        self._lock = threading.Lock()

    def __call__(self, tagger_args: str):
        with self._lock:
            self.calls += 1
            self.args.append(tagger_args)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return FakeTagger()


class TestFugashiReadingProviderWithFakeTagger:
    def test_lazy_initialization(self):
        factory = CountingFactory()
        provider = FugashiReadingProvider(tagger_factory=factory)
        assert not provider.is_initialized()
        assert factory.calls == 0

        provider.segment_and_read("そらをみあげて")
        assert provider.is_initialized()
        assert factory.calls == 1

    def test_tokens_and_readings(self):
        provider = FugashiReadingProvider(tagger_factory=CountingFactory())
        tokens = provider.segment_and_read("そらをみあげて")
        assert tokens[0] == PhoneticToken(surface="そら", reading="ソラ")
        assert "".join(t.reading for t in tokens) == "ソラヲミアゲテ"

    def test_unknown_readings_are_none(self):
        """'*' 或缺少 feature 的 token 讀音為 None"""
        provider = FugashiReadingProvider(tagger_factory=CountingFactory())
        assert provider.segment_and_read("ぴよ") == [PhoneticToken(surface="ぴよ", reading=None)]
        assert provider.segment_and_read("記号") == [PhoneticToken(surface="記号", reading=None)]

    def test_empty_text_returns_no_tokens(self):
        provider = FugashiReadingProvider(tagger_factory=CountingFactory())
        assert provider.segment_and_read("") == []

    def test_tagger_args_forwarded(self):
        factory = CountingFactory()
        provider = FugashiReadingProvider(config=JapaneseKanaConfig(tagger_args="-r /dev/null"), tagger_factory=factory)
        provider.initialize()
        assert factory.args == ["-r /dev/null"]

    def test_single_flight_initialization(self):
        """多執行緒同時首次呼叫只初始化一次"""
        factory = CountingFactory(delay=0.05)
        provider = FugashiReadingProvider(tagger_factory=factory)

        barrier = threading.Barrier(8)
        errors = []

        def worker():
            try:
                barrier.wait()
                provider.initialize()
            except Exception as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert factory.calls == 1
        assert provider.is_initialized()

    def test_each_thread_gets_own_tagger(self):
        factory = CountingFactory()
        provider = FugashiReadingProvider(tagger_factory=factory)
        provider.segment_and_read("そらをみあげて")

        thread = threading.Thread(target=provider.segment_and_read, args=("そらをみあげて",))
        thread.start()
        thread.join()

        assert factory.calls == 2
        stats = provider.get_stats()
        assert stats["taggers"] == 2
        assert "calls" not in stats
        assert stats["initialized"] is True

    def test_initialization_failure_is_remembered(self):
        factory = CountingFactory(error=RuntimeError("Failed initializing MeCab"))
        provider = FugashiReadingProvider(tagger_factory=factory)

        with pytest.raises(ProviderInitializationFailed) as exc_info:
            provider.segment_and_read("そら")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

        with pytest.raises(ProviderInitializationFailed):
            provider.segment_and_read("そら")
        assert factory.calls == 1
        assert not provider.is_initialized()

    def test_missing_library_is_initialization_failure(self):
        provider = FugashiReadingProvider(tagger_factory=CountingFactory(error=ImportError("no fugashi")))
        with pytest.raises(ProviderInitializationFailed):
            provider.initialize()

    def test_satisfies_protocol(self):
        assert isinstance(FugashiReadingProvider(tagger_factory=CountingFactory()), PhoneticReadingProvider)

    def test_tagger_load_is_timed(self, caplog):
        """每次建立 tagger 都會以 INFO 等級記錄載入時間"""
        provider = FugashiReadingProvider(tagger_factory=CountingFactory())
        with caplog.at_level(logging.INFO, logger="phonorhyme"):
            provider.initialize()
        assert any(
            "[Timing] FugashiReadingProvider._new_tagger:" in record.getMessage() for record in caplog.records
        )


class TestFugashiProviderSingleton:
    def test_reset_discards_remembered_failure(self, monkeypatch):
        """單例記住的初始化失敗可以透過 reset 清除"""
        monkeypatch.setattr(provider_module, "_instance", None)
        broken = get_fugashi_provider()
        broken._tagger_factory = CountingFactory(error=RuntimeError("no dictionary"))
        with pytest.raises(ProviderInitializationFailed):
            broken.initialize()
        assert get_fugashi_provider() is broken

        reset_fugashi_provider()
        fresh = get_fugashi_provider()
        assert fresh is not broken
        assert not fresh.is_initialized()
        fresh._tagger_factory = CountingFactory()
        fresh.initialize()
        assert fresh.is_initialized()


@pytest.mark.skipif(not HAS_JAPANESE_DEPS, reason="需要安裝 fugashi 與 unidic-lite")
class TestFugashiReadingProviderWithUnidic:
    def test_kanji_reading(self):
        """漢字取得片假名讀音 (依賴 UniDic，可能會有細微差異)"""
        provider = FugashiReadingProvider()
        tokens = provider.segment_and_read("東京")
        reading = "".join(t.reading or "" for t in tokens)
        assert reading in ["トウキョウ", "トーキョー"]

    def test_engine_end_to_end(self):
        from phonorhyme import JapaneseRhymeEngine

        engine = JapaneseRhymeEngine(provider=FugashiReadingProvider())
        result = engine.compare_rhyme("愛", "愛")
        assert result.similarity == 1.0
        assert result.rhymes

        analysis = engine.analyze("アイス")
        assert analysis.normalized_text == "あいす"
        assert analysis.skeleton.startswith("アイ")
