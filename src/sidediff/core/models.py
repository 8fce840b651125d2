"""Data models for alignment segments, stats, and assembled comparison results"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SegmentKind(str, Enum):
    """Restrict segment labels to the four alignment outcomes"""
    unchanged = "unchanged"
    added = "added"
    deleted = "deleted"
    modified = "modified"


class CompareMode(str, Enum):
    """Alignment granularity: whitespace-delimited tokens or single characters"""
    words = "words"
    bytes = "bytes"


@dataclass
class Segment:
    """A labeled contiguous run of one side's text.

    position and length are character offsets into the owning side's original text.
    """
    kind: SegmentKind
    content: str
    position: int
    length: int


@dataclass
class ComparisonStats:
    """Summary counters; kind counters are segment counts (words) or character sums (bytes)."""
    unchanged: int = 0
    modified: int = 0
    added: int = 0
    deleted: int = 0
    total1: int = 0             # len(diffs1), never text length
    total2: int = 0             # len(diffs2)

    @property
    def total_changes(self) -> int:
        return self.added + self.deleted + self.modified


class ComparisonResult(BaseModel):
    """Composite handed to the presentation layer; built per comparison, never cached."""
    id1:       Optional[int] = None
    id2:       Optional[int] = None
    source1:   Optional[str] = None
    source2:   Optional[str] = None
    length1:   int
    length2:   int
    diffs1:    list[Segment]
    diffs2:    list[Segment]
    mode:      CompareMode
    stats:     ComparisonStats
    timestamp: datetime
