"""Main translation service orchestration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import TranslationConfig, is_valid_input_path, validate_languages
from ..lines import LineSplitter
from ..translation import BatchTranslator, BrowserProvider, TranslationProvider
from ..translation.batch import (
    BatchResult,
    LineProgressCallback,
    PassCompleteCallback,
    ProviderFactory,
)


class InvalidInputError(ValueError):
    """The input argument does not name an existing .txt file."""


@dataclass
class TranslationReport:
    """Report of a translation run.

    Attributes:
        source_file: Path to the source file.
        languages: Language codes requested for the run.
        unsupported_languages: Requested codes missing from the language table.
        batch_result: Per-language results of the run.
    """
    source_file: Path
    languages: list[str]
    unsupported_languages: list[str] = field(default_factory=list)
    batch_result: Optional[BatchResult] = None

    @property
    def files_written(self) -> list[Path]:
        if self.batch_result is None:
            return []
        return self.batch_result.output_files


class TranslationService:
    """Main service that wires configuration, provider and batch translator."""

    def __init__(
        self,
        config: Optional[TranslationConfig] = None,
        provider_factory: Optional[ProviderFactory] = None
    ):
        """Initialize the translation service.

        Args:
            config: Translation configuration.
            provider_factory: Callable returning a translation provider.
                Defaults to a browser-driven provider built from the config.
        """
        self.config = config or TranslationConfig()
        self.provider_factory = provider_factory or self._create_browser_provider
        self.splitter = LineSplitter(self.config.delimiter)
        self.batch_translator = BatchTranslator(
            self.provider_factory,
            config=self.config,
            splitter=self.splitter
        )

    def _create_browser_provider(self) -> TranslationProvider:
        return BrowserProvider(self.config)

    def validate_input(self, source_file: Optional[Path]) -> Path:
        """Check the input argument before any processing starts.

        Args:
            source_file: Path given on the command line.

        Returns:
            The validated path.

        Raises:
            InvalidInputError: If the path is missing, not a .txt file, or absent.
        """
        if not is_valid_input_path(source_file):
            raise InvalidInputError(
                f"Expected a plain text (.txt) file, got: {source_file or 'nothing'}"
            )
        path = Path(source_file)
        if not path.is_file():
            raise InvalidInputError(f"File not found: {path}")
        return path

    def translate_file(
        self,
        source_file: Path,
        progress_callback: Optional[LineProgressCallback] = None,
        on_pass_complete: Optional[PassCompleteCallback] = None
    ) -> TranslationReport:
        """Translate a source file into all configured target languages.

        Args:
            source_file: Path to the source .txt file.
            progress_callback: Optional callback for per-line progress.
            on_pass_complete: Optional callback for per-language results.

        Returns:
            TranslationReport with results.
        """
        path = self.validate_input(source_file)
        languages = list(self.config.target_languages)
        _, unsupported = validate_languages(languages)

        batch_result = self.batch_translator.translate_file(
            path,
            languages=languages,
            progress_callback=progress_callback,
            on_pass_complete=on_pass_complete
        )

        return TranslationReport(
            source_file=path,
            languages=languages,
            unsupported_languages=unsupported,
            batch_result=batch_result
        )

    def is_ready(self) -> tuple[bool, str]:
        """Check if the service is ready to translate.

        Returns:
            Tuple of (is_ready, message).
        """
        provider = self.provider_factory()
        try:
            available = provider.is_available()
        finally:
            provider.close()

        if not available:
            return False, (
                f"Translation page not reachable at {self.config.provider_url}"
            )
        return True, "Ready"
