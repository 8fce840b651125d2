"""Comparison orchestration: engine dispatch, stats, and result assembly"""

import logging
from datetime import datetime

from sidediff.core.align import Alignment, compare_by_bytes, compare_by_words
from sidediff.core.models import CompareMode, ComparisonResult, ComparisonStats, Segment
from sidediff.core.stats import generate_stats
from sidediff.crud.store import CompareStore, panel_name
from sidediff.crud.tables import CompareItem


logger = logging.getLogger(__name__)


def align(text1: str, text2: str, mode: CompareMode) -> Alignment:
    """Dispatch to the word or byte aligner."""
    if CompareMode(mode) == CompareMode.bytes:
        return compare_by_bytes(text1, text2)
    return compare_by_words(text1, text2)


def compare_texts(
    text1: str,
    text2: str,
    mode: CompareMode = CompareMode.words,
    ) -> tuple[list[Segment], list[Segment], ComparisonStats]:
    """Store-free comparison. Returns (diffs1, diffs2, stats)."""
    diffs1, diffs2 = align(text1, text2, mode)
    stats = generate_stats(diffs1, diffs2, mode)
    logger.debug(
        "Compared %d vs %d chars by %s: %d/%d segments",
        len(text1), len(text2), CompareMode(mode).value, stats.total1, stats.total2,
    )
    return diffs1, diffs2, stats


def build_result(
    text1: str,
    text2: str,
    mode: CompareMode,
    source1: str | None = None,
    source2: str | None = None,
    id1: int | None = None,
    id2: int | None = None,
    ) -> ComparisonResult:
    """Compare two texts and wrap the output with identifiers, sources, and a timestamp."""
    diffs1, diffs2, stats = compare_texts(text1, text2, mode)
    return ComparisonResult(
        id1=id1,
        id2=id2,
        source1=source1,
        source2=source2,
        length1=len(text1),
        length2=len(text2),
        diffs1=diffs1,
        diffs2=diffs2,
        mode=mode,
        stats=stats,
        timestamp=datetime.now(),
    )


def assemble_result(item1: CompareItem, item2: CompareItem, mode: CompareMode) -> ComparisonResult:
    """Compare two stored items and wrap the output with their metadata."""
    return build_result(
        item1.data, item2.data, mode,
        source1=item1.source, source2=item2.source,
        id1=item1.id, id2=item2.id,
    )


def run_compare(store: CompareStore, id1: int, id2: int, mode: CompareMode) -> ComparisonResult:
    """Compare Original item id1 against Modified item id2. Raises ValueError if either is missing."""
    item1 = store.get_item(1, id1)
    if item1 is None:
        raise ValueError(f"Item {id1} not found in {panel_name(1)}")
    item2 = store.get_item(2, id2)
    if item2 is None:
        raise ValueError(f"Item {id2} not found in {panel_name(2)}")
    logger.info("Performing %s comparison of items %d and %d", CompareMode(mode).value, id1, id2)
    return assemble_result(item1, item2, mode)
