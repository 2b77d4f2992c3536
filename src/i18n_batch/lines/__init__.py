"""Line classification and recombination."""

from .models import LineKind, LineRecord
from .splitter import LineSplitter

__all__ = ["LineKind", "LineRecord", "LineSplitter"]
