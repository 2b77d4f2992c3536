"""Splitting lines into segments and putting translated segments back together."""

from pathlib import Path
from typing import Callable

from .models import LineRecord

DEFAULT_DELIMITER = "#"

SegmentTranslator = Callable[[str], str]


class LineSplitter:
    """Classifies source lines and recombines translated segments.

    All operations are side-effect free apart from ``read_file``; the
    delimiter is a single reserved character, ``#`` by default.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        """Initialize the splitter.

        Args:
            delimiter: Character that separates segments within a line.
        """
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter

    def classify(self, line: str) -> LineRecord:
        """Break a line into its segments.

        Args:
            line: A source line without its line terminator.

        Returns:
            Simple record if the delimiter is absent, paired record if it occurs
            once, and a record with every part otherwise.
        """
        if self.delimiter not in line:
            return LineRecord.simple(line)
        return LineRecord(tuple(line.split(self.delimiter)))

    def recombine(self, record: LineRecord) -> str:
        """Join a record's segments back into a single line."""
        return self.delimiter.join(record.segments)

    def translate_record(
        self,
        record: LineRecord,
        translate: SegmentTranslator
    ) -> LineRecord:
        """Translate each segment of a record, left to right.

        Empty or blank segments are kept as they are and never sent to
        ``translate``, so an empty line costs no provider round trip.

        Args:
            record: Record to translate.
            translate: Callable mapping one segment to its translation.

        Returns:
            New record with the same shape holding translated segments.
        """
        translated = []
        for segment in record.segments:
            translated.append(translate(segment) if segment.strip() else segment)
        return LineRecord(tuple(translated))

    def translate_line(self, line: str, translate: SegmentTranslator) -> str:
        """Classify, translate and recombine one line."""
        return self.recombine(self.translate_record(self.classify(line), translate))

    def read_file(self, path: Path) -> list[str]:
        """Read a UTF-8 text file into lines.

        A UTF-8 byte order mark is dropped, CRLF and CR endings read as LF, and
        a trailing line terminator does not produce an extra empty line.

        Args:
            path: Path to the source file.

        Returns:
            List of lines without terminators.
        """
        content = Path(path).read_text(encoding='utf-8-sig')
        lines = content.split('\n')
        if lines[-1] == '':
            lines.pop()
        return lines
