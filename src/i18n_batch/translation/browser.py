"""Translation provider that drives a web translation UI with Selenium."""

import time
from typing import Callable, Optional

import requests
from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from ..config import TranslationConfig, is_supported_language
from .provider import (
    ProviderResponseError,
    ProviderUnavailableError,
    TranslationProvider,
)

Locator = tuple[str, str]
DriverFactory = Callable[[TranslationConfig], WebDriver]

# Element locators for translate.google.com
SOURCE_LOCATOR: Locator = (By.CSS_SELECTOR, "textarea[aria-label='Source text']")
RESULT_LOCATOR: Locator = (By.CSS_SELECTOR, "span[jsname='W297wb']")


def create_driver(config: TranslationConfig) -> WebDriver:
    """Start a local browser for the configured browser name.

    Args:
        config: Translation configuration (browser, headless).

    Returns:
        A live Selenium WebDriver.
    """
    browser = config.browser.lower()
    if browser == "firefox":
        options = webdriver.FirefoxOptions()
        if config.headless:
            options.add_argument("-headless")
        return webdriver.Firefox(options=options)
    if browser == "chrome":
        options = webdriver.ChromeOptions()
        if config.headless:
            options.add_argument("--headless=new")
        options.add_argument("--window-size=1280,900")
        return webdriver.Chrome(options=options)
    raise ValueError(f"Unsupported browser: {config.browser}")


class _StableText:
    """Wait condition that yields the result text once two polls agree."""

    def __init__(self, locator: Locator):
        self.locator = locator
        self.last_seen: Optional[str] = None

    def __call__(self, driver: WebDriver):
        text = _read_text(driver, self.locator)
        if not text:
            self.last_seen = None
            return False
        if text == self.last_seen:
            return text
        self.last_seen = text
        return False


def _read_text(driver: WebDriver, locator: Locator) -> str:
    """Join the visible text of every element matching a locator."""
    elements = driver.find_elements(*locator)
    return " ".join(e.text.strip() for e in elements if e.text.strip())


class BrowserProvider(TranslationProvider):
    """Provider backed by a driven browser session on a public translation page.

    Each request types a segment into the source box, waits until the result
    text settles, reads it, then clears the box and waits for the result to
    disappear before returning.
    """

    def __init__(
        self,
        config: Optional[TranslationConfig] = None,
        driver_factory: Optional[DriverFactory] = None,
        source_locator: Locator = SOURCE_LOCATOR,
        result_locator: Locator = RESULT_LOCATOR
    ):
        """Initialize the browser provider.

        Args:
            config: Translation configuration. Uses defaults if not provided.
            driver_factory: Callable that starts a WebDriver (for tests or
                remote grids). Defaults to a local browser.
            source_locator: Locator of the text input element.
            result_locator: Locator of the translated text element(s).
        """
        super().__init__()
        self.config = config or TranslationConfig()
        self.driver_factory = driver_factory or create_driver
        self.source_locator = source_locator
        self.result_locator = result_locator
        self._driver: Optional[WebDriver] = None

    @property
    def driver(self) -> WebDriver:
        """Get or start the browser session."""
        if self._driver is None:
            try:
                self._driver = self.driver_factory(self.config)
            except WebDriverException as e:
                raise ProviderUnavailableError(
                    f"Could not start {self.config.browser}: {e.msg}"
                ) from e
        return self._driver

    def open_session(self, target_lang: str) -> None:
        """Navigate the browser to the page for a target language."""
        if not is_supported_language(target_lang):
            raise ProviderUnavailableError(
                f"Unsupported language code: {target_lang}"
            )

        url = self.config.page_url(target_lang)
        try:
            self.driver.get(url)
            self._wait(self.config.response_timeout).until(
                EC.presence_of_element_located(self.source_locator)
            )
        except TimeoutException as e:
            raise ProviderUnavailableError(
                f"Translation page did not load for {target_lang}: {url}"
            ) from e
        except WebDriverException as e:
            raise ProviderUnavailableError(
                f"Unable to open {url}: {e.msg}"
            ) from e

        self.current_language = target_lang

    def translate(self, text: str, target_lang: str) -> str:
        """Translate one segment through the web page."""
        if not text.strip():
            return text

        if self.current_language != target_lang:
            self.open_session(target_lang)

        if self.config.lowercase_input:
            text = text.lower()

        try:
            source = self.driver.find_element(*self.source_locator)
            source.click()
            source.clear()
            source.send_keys(text)

            result = self._wait_for_result()

            source.clear()
            self._wait_for_clear()
        except TimeoutException as e:
            raise ProviderResponseError(
                f"No translation for {text!r} within {self.config.response_timeout}s"
            ) from e
        except WebDriverException as e:
            raise ProviderResponseError(
                f"Unexpected page state while translating {text!r}: {e.msg}"
            ) from e

        return result

    def _wait(self, timeout: float) -> WebDriverWait:
        return WebDriverWait(
            self.driver,
            timeout,
            poll_frequency=self.config.poll_interval
        )

    def _wait_for_result(self) -> str:
        """Wait for the settling delay, then poll until the result is stable."""
        if self.config.settle_seconds > 0:
            time.sleep(self.config.settle_seconds)
        return self._wait(self.config.response_timeout).until(
            _StableText(self.result_locator)
        )

    def _wait_for_clear(self) -> None:
        locator = self.result_locator
        self._wait(self.config.response_timeout).until(
            lambda driver: not _read_text(driver, locator)
        )

    def close(self) -> None:
        """Quit the browser if one was started."""
        if self._driver is not None:
            try:
                self._driver.quit()
            finally:
                self._driver = None
        super().close()

    def is_available(self) -> bool:
        """Check that the translation page answers over HTTP."""
        try:
            response = requests.get(self.config.provider_url, timeout=5)
            response.raise_for_status()
            return True
        except requests.RequestException:
            return False
