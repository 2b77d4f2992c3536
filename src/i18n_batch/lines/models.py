"""Data models for source lines."""

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """How a source line decomposes into segments."""
    SIMPLE = "simple"
    PAIRED = "paired"
    MULTI = "multi"


@dataclass(frozen=True)
class LineRecord:
    """A source (or translated) line broken into delimiter-separated segments.

    A line with no delimiter is a single segment; a line with one delimiter
    holds exactly two. Lines with more delimiters keep every part in order.

    Attributes:
        segments: Ordered segments of the line, never empty.
    """
    segments: tuple[str, ...]

    def __post_init__(self):
        if not self.segments:
            raise ValueError("A line record needs at least one segment")

    @classmethod
    def simple(cls, text: str) -> "LineRecord":
        """Create a single-segment record."""
        return cls((text,))

    @classmethod
    def paired(cls, first: str, second: str) -> "LineRecord":
        """Create a two-segment record."""
        return cls((first, second))

    @property
    def kind(self) -> LineKind:
        """Classify the record by its segment count."""
        if len(self.segments) == 1:
            return LineKind.SIMPLE
        if len(self.segments) == 2:
            return LineKind.PAIRED
        return LineKind.MULTI

    @property
    def is_empty(self) -> bool:
        """True for the record of an empty line."""
        return self.segments == ("",)

    @property
    def first(self) -> str:
        return self.segments[0]

    @property
    def second(self) -> str:
        """Second segment of a paired record."""
        if len(self.segments) < 2:
            raise AttributeError("Simple line records have no second segment")
        return self.segments[1]
