"""Bounded-lookahead greedy aligners for word and byte comparison modes.

Both aligners walk two sequences with a pair of cursors. On a mismatch they
search a small window ahead for the other side's current element; sequence 1
is checked first at every distance, so a tie resolves as deleted tokens on
side 1 rather than added tokens on side 2. This is not a minimal edit script.
"""

from sidediff.core.models import Segment, SegmentKind
from sidediff.core.tokenize import tokenize


WORD_LOOKAHEAD = 5
BYTE_LOOKAHEAD = 10

Alignment = tuple[list[Segment], list[Segment]]


def _emit(out: list[Segment], kind: SegmentKind, content: str, position: int) -> int:
    """Append a segment and return the position just past it."""
    out.append(Segment(kind=kind, content=content, position=position, length=len(content)))
    return position + len(content)


def compare_by_words(text1: str, text2: str) -> Alignment:
    """Align two texts token by token. Returns (diffs1, diffs2)."""
    words1, words2 = tokenize(text1), tokenize(text2)
    n1, n2 = len(words1), len(words2)
    diffs1: list[Segment] = []
    diffs2: list[Segment] = []
    pos1 = pos2 = 0
    i = j = 0

    while i < n1 or j < n2:
        if i >= n1:
            pos2 = _emit(diffs2, SegmentKind.added, words2[j], pos2)
            j += 1
        elif j >= n2:
            pos1 = _emit(diffs1, SegmentKind.deleted, words1[i], pos1)
            i += 1
        elif words1[i] == words2[j]:
            pos1 = _emit(diffs1, SegmentKind.unchanged, words1[i], pos1)
            pos2 = _emit(diffs2, SegmentKind.unchanged, words2[j], pos2)
            i += 1
            j += 1
        else:
            window = min(WORD_LOOKAHEAD, max(n1 - i, n2 - j))
            for lookahead in range(1, window + 1):
                if i + lookahead < n1 and words1[i + lookahead] == words2[j]:
                    for word in words1[i:i + lookahead]:
                        pos1 = _emit(diffs1, SegmentKind.deleted, word, pos1)
                    i += lookahead
                    break
                if j + lookahead < n2 and words1[i] == words2[j + lookahead]:
                    for word in words2[j:j + lookahead]:
                        pos2 = _emit(diffs2, SegmentKind.added, word, pos2)
                    j += lookahead
                    break
            else:
                pos1 = _emit(diffs1, SegmentKind.modified, words1[i], pos1)
                pos2 = _emit(diffs2, SegmentKind.modified, words2[j], pos2)
                i += 1
                j += 1

    return diffs1, diffs2


def _resync(text1: str, text2: str, i: int, j: int) -> tuple[int, int]:
    """Return (skip1, skip2) for the first resync point within BYTE_LOOKAHEAD, or (0, 0)."""
    n1, n2 = len(text1), len(text2)
    for lookahead in range(1, BYTE_LOOKAHEAD + 1):
        if i + lookahead < n1 and text1[i + lookahead] == text2[j]:
            return lookahead, 0
        if j + lookahead < n2 and text1[i] == text2[j + lookahead]:
            return 0, lookahead
    return 0, 0


def compare_by_bytes(text1: str, text2: str) -> Alignment:
    """Align two texts character by character, folding runs into single segments.

    Returns (diffs1, diffs2).
    """
    n1, n2 = len(text1), len(text2)
    diffs1: list[Segment] = []
    diffs2: list[Segment] = []
    i = j = 0

    while i < n1 or j < n2:
        if i >= n1:
            _emit(diffs2, SegmentKind.added, text2[j:], j)
            j = n2
        elif j >= n2:
            _emit(diffs1, SegmentKind.deleted, text1[i:], i)
            i = n1
        elif text1[i] == text2[j]:
            start1, start2 = i, j
            while i < n1 and j < n2 and text1[i] == text2[j]:
                i += 1
                j += 1
            _emit(diffs1, SegmentKind.unchanged, text1[start1:i], start1)
            _emit(diffs2, SegmentKind.unchanged, text2[start2:j], start2)
        else:
            skip1, skip2 = _resync(text1, text2, i, j)
            if skip1:
                i = _emit(diffs1, SegmentKind.deleted, text1[i:i + skip1], i)
            elif skip2:
                j = _emit(diffs2, SegmentKind.added, text2[j:j + skip2], j)
            else:
                start1, start2 = i, j
                while i < n1 and j < n2 and text1[i] != text2[j]:
                    i += 1
                    j += 1
                _emit(diffs1, SegmentKind.modified, text1[start1:i], start1)
                _emit(diffs2, SegmentKind.modified, text2[start2:j], start2)

    return diffs1, diffs2
