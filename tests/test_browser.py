"""Tests for the Selenium-driven provider with a fake WebDriver."""

from unittest.mock import Mock, patch

import pytest
import requests
from selenium.common.exceptions import WebDriverException

from conftest import FakeDriver
from i18n_batch.translation import (
    BrowserProvider,
    ProviderResponseError,
    ProviderUnavailableError,
)


@pytest.fixture
def driver():
    return FakeDriver({"hello": "hola", "good": "buenos"})


@pytest.fixture
def provider(config, driver):
    config.response_timeout = 0.2
    return BrowserProvider(config, driver_factory=lambda cfg: driver)


class TestBrowserProvider:
    """Tests for BrowserProvider."""

    def test_open_session_navigates(self, provider, driver):
        """Test opening a session loads the language page."""
        provider.open_session("es")

        assert provider.current_language == "es"
        assert driver.visited == ["https://translate.google.com/?sl=auto&tl=es&op=translate"]

    def test_translate(self, provider, driver):
        """Test a segment is typed and the settled result is returned."""
        provider.open_session("es")

        assert provider.translate("hello", "es") == "hola"
        assert driver.sent == ["hello"]
        assert driver.result == ""

    def test_translate_opens_session_for_new_language(self, provider, driver):
        """Test translating into a different language switches the page."""
        provider.translate("hello", "es")
        provider.translate("good", "fr")

        assert [url.split("tl=")[1] for url in driver.visited] == ["es&op=translate", "fr&op=translate"]

    def test_blank_text_returned_unchanged(self, provider, driver):
        """Test whitespace-only text is returned without touching the page."""
        assert provider.translate("   ", "es") == "   "
        assert driver.sent == []
        assert driver.visited == []

    def test_lowercase_input(self, config, driver):
        """Test segments are lower-cased when configured."""
        config.lowercase_input = True
        provider = BrowserProvider(config, driver_factory=lambda cfg: driver)

        assert provider.translate("HELLO", "es") == "hola"
        assert driver.sent == ["hello"]

    def test_unsupported_language(self, provider, driver):
        """Test unknown codes fail before any navigation."""
        with pytest.raises(ProviderUnavailableError):
            provider.open_session("xx")
        assert driver.visited == []

    def test_unreachable_page(self, config):
        """Test a navigation error marks the language unavailable."""
        driver = FakeDriver(broken_urls=("tl=fr",))
        provider = BrowserProvider(config, driver_factory=lambda cfg: driver)

        with pytest.raises(ProviderUnavailableError):
            provider.open_session("fr")
        assert provider.current_language is None

    def test_browser_fails_to_start(self, config):
        """Test a driver start-up error is reported as unavailable."""
        def factory(cfg):
            raise WebDriverException("geckodriver not found")

        provider = BrowserProvider(config, driver_factory=factory)

        with pytest.raises(ProviderUnavailableError):
            provider.open_session("es")

    def test_no_result_times_out(self, provider):
        """Test a missing result raises a response error."""
        provider.open_session("es")

        with pytest.raises(ProviderResponseError):
            provider.translate("untranslatable", "es")

    def test_page_error_during_translate(self, provider, driver):
        """Test WebDriver errors mid-request become response errors."""
        provider.open_session("es")
        driver.source.send_keys = Mock(side_effect=WebDriverException("stale element"))

        with pytest.raises(ProviderResponseError):
            provider.translate("hello", "es")

    def test_close_quits_driver(self, provider, driver):
        """Test closing quits the browser and resets the session."""
        provider.open_session("es")
        provider.close()

        assert driver.quit_called
        assert provider.current_language is None

    def test_close_without_driver(self, config):
        """Test closing before any request does not start a browser."""
        factory = Mock()
        BrowserProvider(config, driver_factory=factory).close()
        factory.assert_not_called()

    def test_context_manager(self, provider, driver):
        with provider as p:
            p.open_session("es")
        assert driver.quit_called

    def test_is_available(self, provider):
        """Test the HTTP reachability check."""
        with patch('i18n_batch.translation.browser.requests.get') as mock_get:
            mock_get.return_value.raise_for_status.return_value = None
            assert provider.is_available() is True

    def test_is_not_available(self, provider):
        def mock_get(*args, **kwargs):
            raise requests.ConnectionError("offline")

        with patch('i18n_batch.translation.browser.requests.get', mock_get):
            assert provider.is_available() is False
