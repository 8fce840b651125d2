"""Terminal rendering of segment lists and summary stats"""

import typer

from sidediff.core.models import CompareMode, ComparisonStats, Segment, SegmentKind


STYLES = {
    SegmentKind.added:    {"fg": typer.colors.GREEN, "bold": True},
    SegmentKind.deleted:  {"fg": typer.colors.RED, "strikethrough": True},
    SegmentKind.modified: {"fg": typer.colors.YELLOW, "underline": True},
}

MARKERS = {
    SegmentKind.added:    ("[+", "]"),
    SegmentKind.deleted:  ("[-", "]"),
    SegmentKind.modified: ("[~", "]"),
}


def render_segments(segments: list[Segment], color: bool = True) -> str:
    """Rebuild one side's text with changed segments styled (ANSI) or bracket-marked."""
    parts = []
    for seg in segments:
        if seg.kind == SegmentKind.unchanged or not seg.content:
            parts.append(seg.content)
        elif color:
            parts.append(typer.style(seg.content, **STYLES[seg.kind]))
        else:
            open_, close = MARKERS[seg.kind]
            parts.append(f"{open_}{seg.content}{close}")
    return "".join(parts)


def render_summary(stats: ComparisonStats, mode: CompareMode) -> str:
    unit = "chars" if CompareMode(mode) == CompareMode.bytes else "segments"
    return (
        f"{stats.unchanged} unchanged, "
        f"{stats.modified} modified, "
        f"{stats.added} added, "
        f"{stats.deleted} deleted ({unit}); "
        f"{stats.total1}/{stats.total2} segments; "
        f"{stats.total_changes} changed"
    )
