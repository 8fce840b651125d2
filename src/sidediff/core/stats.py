"""Mode-aware summary counters over two segment lists"""

from sidediff.core.models import CompareMode, ComparisonStats, Segment, SegmentKind


def generate_stats(diffs1: list[Segment], diffs2: list[Segment], mode: CompareMode) -> ComparisonStats:
    """Count segments (words) or sum segment lengths (bytes) per kind.

    unchanged/modified/deleted come from side 1, added from side 2 only.
    total1/total2 are always the segment list lengths.
    """
    stats = ComparisonStats(total1=len(diffs1), total2=len(diffs2))
    by_length = CompareMode(mode) == CompareMode.bytes

    for seg in diffs1:
        step = seg.length if by_length else 1
        if seg.kind == SegmentKind.unchanged:
            stats.unchanged += step
        elif seg.kind == SegmentKind.modified:
            stats.modified += step
        elif seg.kind == SegmentKind.deleted:
            stats.deleted += step

    for seg in diffs2:
        if seg.kind == SegmentKind.added:
            stats.added += seg.length if by_length else 1

    return stats
