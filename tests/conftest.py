"""Shared fixtures for the batch translator tests."""

from pathlib import Path
from typing import Callable, Optional

import pytest
from selenium.common.exceptions import WebDriverException

from i18n_batch.config import TranslationConfig
from i18n_batch.translation import (
    ProviderResponseError,
    ProviderUnavailableError,
    TranslationProvider,
)


class FakeProvider(TranslationProvider):
    """In-memory provider that records every call.

    Args:
        translate_fn: Maps (text, lang) to a translation. Identity by default.
        unavailable: Language codes whose session cannot be opened.
        fail_on: (text, lang) pairs that raise ProviderResponseError.
    """

    def __init__(
        self,
        translate_fn: Optional[Callable[[str, str], str]] = None,
        unavailable: tuple[str, ...] = (),
        fail_on: tuple[tuple[str, str], ...] = ()
    ):
        super().__init__()
        self.translate_fn = translate_fn or (lambda text, lang: text)
        self.unavailable = set(unavailable)
        self.fail_on = set(fail_on)
        self.sessions: list[str] = []
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def open_session(self, target_lang: str) -> None:
        if target_lang in self.unavailable:
            raise ProviderUnavailableError(f"cannot open {target_lang}")
        self.sessions.append(target_lang)
        self.current_language = target_lang

    def translate(self, text: str, target_lang: str) -> str:
        self.calls.append((text, target_lang))
        if (text, target_lang) in self.fail_on:
            raise ProviderResponseError(f"page changed while translating {text}")
        return self.translate_fn(text, target_lang)

    def close(self) -> None:
        self.closed = True
        super().close()

    def is_available(self) -> bool:
        return True


class FakeElement:
    def __init__(self, driver=None, text=""):
        self.driver = driver
        self.text = text

    def click(self):
        pass

    def clear(self):
        self.driver.typed = ""
        self.driver.result = ""

    def send_keys(self, text):
        self.driver.typed += text
        self.driver.sent.append(text)
        self.driver.result = self.driver.translations.get(self.driver.typed, "")


class FakeDriver:
    """Minimal WebDriver stand-in for a translation page."""

    def __init__(self, translations=None, broken_urls=()):
        self.translations = translations or {}
        self.broken_urls = broken_urls
        self.visited = []
        self.sent = []
        self.typed = ""
        self.result = ""
        self.quit_called = False
        self.source = FakeElement(self)

    def get(self, url):
        if any(part in url for part in self.broken_urls):
            raise WebDriverException("Reached error page")
        self.visited.append(url)

    def find_element(self, by, value):
        return self.source

    def find_elements(self, by, value):
        if not self.result:
            return []
        return [FakeElement(text=self.result)]

    def quit(self):
        self.quit_called = True


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Source file with a simple, a paired and an empty line."""
    path = tmp_path / "input.txt"
    path.write_text("hello\ngood#morning\n\n", encoding="utf-8")
    return path


@pytest.fixture
def config(tmp_path: Path) -> TranslationConfig:
    """Config writing into a temporary results directory."""
    return TranslationConfig(
        target_languages=["es"],
        output_dir=tmp_path / "Results",
        settle_seconds=0,
        poll_interval=0.01,
        response_timeout=1.0
    )
