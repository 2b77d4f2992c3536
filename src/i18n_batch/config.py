"""Configuration for the batch translator."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union


# Language codes accepted by the Google Translate web UI
LANGUAGE_NAMES = {
    "af": "Afrikaans",
    "sq": "Albanian",
    "ar": "Arabic",
    "hy": "Armenian",
    "az": "Azerbaijani",
    "eu": "Basque",
    "be": "Belarusian",
    "bn": "Bengali",
    "bs": "Bosnian",
    "bg": "Bulgarian",
    "ca": "Catalan",
    "ceb": "Cebuano",
    "zh-CN": "Chinese (Simplified)",
    "zh-TW": "Chinese (Traditional)",
    "hr": "Croatian",
    "cs": "Czech",
    "da": "Danish",
    "nl": "Dutch",
    "en": "English",
    "eo": "Esperanto",
    "et": "Estonian",
    "tl": "Filipino",
    "fi": "Finnish",
    "fr": "French",
    "gl": "Galician",
    "ka": "Georgian",
    "de": "German",
    "el": "Greek",
    "gu": "Gujarati",
    "ht": "Haitian Creole",
    "ha": "Hausa",
    "iw": "Hebrew",
    "hi": "Hindi",
    "hmn": "Hmong",
    "hu": "Hungarian",
    "is": "Icelandic",
    "ig": "Igbo",
    "id": "Indonesian",
    "ga": "Irish",
    "it": "Italian",
    "ja": "Japanese",
    "jw": "Javanese",
    "kn": "Kannada",
    "km": "Khmer",
    "ko": "Korean",
    "lo": "Lao",
    "la": "Latin",
    "lv": "Latvian",
    "lt": "Lithuanian",
    "mk": "Macedonian",
    "ms": "Malay",
    "mt": "Maltese",
    "mi": "Maori",
    "mr": "Marathi",
    "mn": "Mongolian",
    "ne": "Nepali",
    "no": "Norwegian",
    "fa": "Persian",
    "pl": "Polish",
    "pt": "Portuguese",
    "pa": "Punjabi",
    "ro": "Romanian",
    "ru": "Russian",
    "sr": "Serbian",
    "sk": "Slovak",
    "sl": "Slovenian",
    "so": "Somali",
    "es": "Spanish",
    "sw": "Swahili",
    "sv": "Swedish",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "vi": "Vietnamese",
    "cy": "Welsh",
    "yi": "Yiddish",
    "yo": "Yoruba",
    "zu": "Zulu",
}

SUPPORTED_LANGUAGES = frozenset(LANGUAGE_NAMES)

INPUT_SUFFIX = ".txt"


def is_supported_language(code: str) -> bool:
    """Check whether a language code is in the supported table."""
    return code in SUPPORTED_LANGUAGES


def validate_languages(codes: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split language codes into supported and unsupported, keeping order.

    Args:
        codes: Language codes to check.

    Returns:
        Tuple of (supported, unsupported) code lists.
    """
    supported = []
    unsupported = []
    for code in codes:
        if is_supported_language(code):
            supported.append(code)
        else:
            unsupported.append(code)
    return supported, unsupported


def is_valid_input_path(path: Union[str, Path, None]) -> bool:
    """Check that an input argument names a plain-text (.txt) file."""
    if not path:
        return False
    return str(path).endswith(INPUT_SUFFIX)


@dataclass
class TranslationConfig:
    """Configuration for a batch translation run.

    Attributes:
        target_languages: Language codes to produce output files for, in order.
        source_language: Source language code ("auto" lets the provider detect it).
        output_dir: Directory that receives one <code>.txt file per language.
        delimiter: Reserved character that splits a line into segments.
        lowercase_input: Lower-case each segment before sending it.
        browser: Browser driven by the web provider ("firefox" or "chrome").
        headless: Run the browser without a visible window.
        provider_url: Base URL of the web translation UI.
        url_template: Language-keyed page URL, formatted with base/source/target.
        settle_seconds: Minimum wait after typing before the result is read.
        poll_interval: Seconds between polls while waiting for a stable result.
        response_timeout: Seconds to wait for a result before giving up.
        parallel_languages: Worker count for concurrent language passes (0 = sequential).
        verbose: If True, print detailed output.
    """
    target_languages: list[str] = field(default_factory=lambda: ["es"])
    source_language: str = "auto"
    output_dir: Path = Path("Results")
    delimiter: str = "#"
    lowercase_input: bool = False
    browser: str = "firefox"
    headless: bool = False
    provider_url: str = "https://translate.google.com"
    url_template: str = "{base}/?sl={source}&tl={target}&op=translate"
    settle_seconds: float = 1.0
    poll_interval: float = 0.25
    response_timeout: float = 15.0
    parallel_languages: int = 0
    verbose: bool = False

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)
        if len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {self.delimiter!r}")

    def get_language_name(self, code: str) -> str:
        """Get the full language name for a language code.

        Args:
            code: Language code (e.g., "es").

        Returns:
            Full language name (e.g., "Spanish").
        """
        return LANGUAGE_NAMES.get(code, code)

    def page_url(self, target_lang: str) -> str:
        """Build the provider page URL for a target language."""
        return self.url_template.format(
            base=self.provider_url.rstrip('/'),
            source=self.source_language,
            target=target_lang
        )

    def output_path(self, target_lang: str) -> Path:
        """Get the output file path for a target language."""
        return self.output_dir / f"{target_lang}.txt"
