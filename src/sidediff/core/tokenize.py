"""Whitespace-preserving word tokenizer"""

import re


WHITESPACE_RE = re.compile(r'(\s+)')


def tokenize(text: str) -> list[str]:
    """Split text into alternating non-whitespace / whitespace-run tokens.

    ''.join(tokenize(text)) == text. Leading or trailing whitespace yields a
    zero-length boundary token at that end. The empty string yields no tokens.
    """
    if not text:
        return []
    return WHITESPACE_RE.split(text)
