"""Per-language batch translation of a source file."""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from ..config import TranslationConfig, is_supported_language
from ..lines import LineSplitter
from .provider import ProviderError, ProviderUnavailableError, TranslationProvider

PARTIAL_SUFFIX = ".partial"


class PassStatus(Enum):
    """Outcome of one language pass."""
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class LineProgress:
    """Progress information for a single translated line.

    Attributes:
        language: Target language code of the pass.
        line_number: Line number in the source file (1-indexed).
        total_lines: Number of lines in the source file.
        source_text: Original line.
        translated_text: Line written to the output file.
    """
    language: str
    line_number: int
    total_lines: int
    source_text: str
    translated_text: str

    @property
    def percent_complete(self) -> float:
        """Calculate percentage complete."""
        if self.total_lines == 0:
            return 100.0
        return (self.line_number / self.total_lines) * 100


@dataclass
class PassResult:
    """Result of one language pass.

    Attributes:
        language: Target language code.
        status: Whether the pass completed, was skipped or failed mid-way.
        output_path: File written for the language (None unless completed).
        lines_written: Number of output lines written.
        error: Diagnostic message for skipped or failed passes.
        elapsed_seconds: Wall time spent on the pass.
    """
    language: str
    status: PassStatus
    output_path: Optional[Path] = None
    lines_written: int = 0
    error: Optional[str] = None
    elapsed_seconds: float = 0.0

    @property
    def elapsed_formatted(self) -> str:
        """Format elapsed time as mm:ss or hh:mm:ss."""
        total_secs = int(self.elapsed_seconds)
        hours, remainder = divmod(total_secs, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"


@dataclass
class BatchResult:
    """Result of a batch run across all requested languages.

    Attributes:
        source_file: Path to the source file.
        results: Pass results in the order languages were requested.
    """
    source_file: Path
    results: list[PassResult] = field(default_factory=list)

    def _count(self, status: PassStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def completed(self) -> int:
        return self._count(PassStatus.COMPLETED)

    @property
    def skipped(self) -> int:
        return self._count(PassStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(PassStatus.FAILED)

    @property
    def output_files(self) -> list[Path]:
        """Files written by completed passes."""
        return [r.output_path for r in self.results if r.output_path is not None]


ProviderFactory = Callable[[], TranslationProvider]
LineProgressCallback = Callable[[LineProgress], None]
PassCompleteCallback = Callable[[PassResult], None]


class BatchTranslator:
    """Runs one translation pass per target language over a source file."""

    def __init__(
        self,
        provider_factory: ProviderFactory,
        config: Optional[TranslationConfig] = None,
        splitter: Optional[LineSplitter] = None
    ):
        """Initialize the batch translator.

        Args:
            provider_factory: Callable returning a fresh translation provider.
                Sequential runs share one provider across languages; parallel
                runs create one per worker.
            config: Translation configuration. Uses defaults if not provided.
            splitter: Line splitter. Built from the configured delimiter if not provided.
        """
        self.provider_factory = provider_factory
        self.config = config or TranslationConfig()
        self.splitter = splitter or LineSplitter(self.config.delimiter)

    def translate_file(
        self,
        source_file: Path,
        languages: Optional[list[str]] = None,
        progress_callback: Optional[LineProgressCallback] = None,
        on_pass_complete: Optional[PassCompleteCallback] = None
    ) -> BatchResult:
        """Translate a source file into every requested language.

        A language that cannot be engaged, or whose provider fails part-way,
        is recorded as skipped or failed and the run moves on to the next one.

        Args:
            source_file: Path to the plain-text source file.
            languages: Target language codes. Uses the configured list if not provided.
            progress_callback: Optional callback called after each line is written.
            on_pass_complete: Optional callback called after each language pass.

        Returns:
            BatchResult with one PassResult per requested language.
        """
        source_file = Path(source_file)
        languages = list(languages if languages is not None else self.config.target_languages)
        batch = BatchResult(source_file=source_file)

        if not languages:
            return batch

        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        parallel = self.config.parallel_languages

        if parallel > 0 and len(languages) > 1:
            by_language = {}
            with ThreadPoolExecutor(max_workers=parallel) as executor:
                futures = {
                    executor.submit(
                        self._run_isolated_pass, source_file, lang, progress_callback
                    ): lang
                    for lang in languages
                }

                for future in as_completed(futures):
                    result = future.result()
                    by_language[futures[future]] = result
                    if on_pass_complete:
                        on_pass_complete(result)

            batch.results = [by_language[lang] for lang in languages]
        else:
            with self.provider_factory() as provider:
                for lang in languages:
                    result = self.translate_language(
                        provider, source_file, lang, progress_callback
                    )
                    batch.results.append(result)
                    if on_pass_complete:
                        on_pass_complete(result)

        return batch

    def _run_isolated_pass(
        self,
        source_file: Path,
        lang: str,
        progress_callback: Optional[LineProgressCallback]
    ) -> PassResult:
        with self.provider_factory() as provider:
            return self.translate_language(provider, source_file, lang, progress_callback)

    def translate_language(
        self,
        provider: TranslationProvider,
        source_file: Path,
        lang: str,
        progress_callback: Optional[LineProgressCallback] = None
    ) -> PassResult:
        """Run a single language pass.

        Any output left by an earlier run is removed first. Output goes to a
        ``.partial`` file that is renamed into place once every line is
        written; if the provider fails the partial file is closed and removed,
        so no output exists for that language.

        Args:
            provider: Provider to use for this pass.
            source_file: Path to the plain-text source file.
            lang: Target language code.
            progress_callback: Optional callback called after each line is written.

        Returns:
            PassResult describing the outcome.
        """
        start_time = time.time()

        if not is_supported_language(lang):
            return PassResult(
                language=lang,
                status=PassStatus.SKIPPED,
                error=f"Unable to translate the following language code: {lang}"
            )

        output_path = self.config.output_path(lang)
        partial_path = output_path.with_name(output_path.name + PARTIAL_SUFFIX)
        output_path.unlink(missing_ok=True)

        try:
            provider.open_session(lang)
        except ProviderUnavailableError as e:
            return PassResult(
                language=lang,
                status=PassStatus.SKIPPED,
                error=f"Unable to translate the following language code: {lang}. {e}",
                elapsed_seconds=time.time() - start_time
            )

        lines = self.splitter.read_file(source_file)
        total = len(lines)
        written = 0

        def translate_segment(segment: str) -> str:
            return provider.translate(segment, lang)

        try:
            with partial_path.open('w', encoding='utf-8', newline='\n') as output:
                for line_number, line in enumerate(lines, 1):
                    translated = self.splitter.translate_line(line, translate_segment)
                    output.write(translated + '\n')
                    written += 1

                    if progress_callback:
                        progress_callback(LineProgress(
                            language=lang,
                            line_number=line_number,
                            total_lines=total,
                            source_text=line,
                            translated_text=translated
                        ))
        except ProviderError as e:
            partial_path.unlink(missing_ok=True)
            return PassResult(
                language=lang,
                status=PassStatus.FAILED,
                lines_written=written,
                error=f"Translation into {lang} stopped at line {written + 1}: {e}",
                elapsed_seconds=time.time() - start_time
            )
        except BaseException:
            partial_path.unlink(missing_ok=True)
            raise

        partial_path.replace(output_path)

        return PassResult(
            language=lang,
            status=PassStatus.COMPLETED,
            output_path=output_path,
            lines_written=written,
            elapsed_seconds=time.time() - start_time
        )
