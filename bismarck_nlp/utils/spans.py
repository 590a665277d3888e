"""
Span utilities for converting character spans to spaCy token spans.
"""

from typing import List, Optional, Sequence, Tuple

from spacy.tokens import Span

from bismarck_nlp.types import Token


def token_range(tokens: Sequence[Token], start: int, end: int) -> Optional[Tuple[int, int]]:
    """
    Find the token indices covered by a character span.

    Args:
        tokens: Tokens in document order
        start: Span start offset
        end: Span end offset (exclusive)

    Returns:
        ``(first, last + 1)`` over the tokens overlapping the span, or None
        when no token overlaps it
    """
    covered = [i for i, tok in enumerate(tokens) if tok.start < end and tok.end > start]
    if not covered:
        return None
    return covered[0], covered[-1] + 1


def filter_spans(spans: List[Span]) -> List[Span]:
    """
    Drop overlapping spans, keeping the longest.

    Ties keep the span that starts first.

    Returns:
        Non-overlapping spans sorted by start token
    """
    result: List[Span] = []
    taken = set()

    for span in sorted(spans, key=lambda s: (-(s.end - s.start), s.start)):
        indices = set(range(span.start, span.end))
        if indices & taken:
            continue
        result.append(span)
        taken |= indices

    return sorted(result, key=lambda s: s.start)
