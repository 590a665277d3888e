"""
Rule-based tokenizer for German text.

Splits on whitespace and punctuation in a single left-to-right scan and
breaks up two kinds of compound words:

- camel-shaped words (``lowerUpperUpper``) are split before each capital;
- capitalized nouns fully covered by the compound-constituent lexicon
  (``Bundesfinanzminister``) are split into their constituents.
"""

import logging
import re
from typing import AbstractSet, List, Optional, Tuple

from bismarck_nlp.lexicon import COMPOUND_CONSTITUENTS, LOWER, PUNCTUATION, UPPER
from bismarck_nlp.registry import processors
from bismarck_nlp.types import Token

logger = logging.getLogger(__name__)

CAMEL_COMPOUND = re.compile(rf"^[{LOWER}]+(?:[{UPPER}][{LOWER}]+)+$")
CAPITALIZED_WORD = re.compile(rf"^[{UPPER}][{LOWER}]+$")
_CAPITAL_BOUNDARY = re.compile(rf"(?=[{UPPER}])")

MIN_CONSTITUENT_LEN = 3


@processors.register("tokenize")
class Tokenizer:
    """Splits raw text into token spans."""

    def __init__(
        self,
        keep_punctuation: bool = False,
        case_sensitive: bool = True,
        compound_lexicon: Optional[AbstractSet[str]] = None,
    ) -> None:
        self.keep_punctuation = keep_punctuation
        # Token boundaries do not depend on case; kept for a uniform constructor.
        self.case_sensitive = case_sensitive
        self.compound_lexicon = frozenset(
            word.lower() for word in (compound_lexicon if compound_lexicon is not None else COMPOUND_CONSTITUENTS)
        )
        self._max_constituent_len = max((len(word) for word in self.compound_lexicon), default=0)

    def tokenize(self, text: str) -> List[Token]:
        tokens: List[Token] = []
        start = 0
        current: List[str] = []

        for i, char in enumerate(text):
            if char.isspace() or char in PUNCTUATION:
                self._emit(tokens, "".join(current), start)
                current = []
                if char in PUNCTUATION and self.keep_punctuation:
                    tokens.append(Token(value=char, start=i, end=i + 1, index=len(tokens)))
                start = i + 1
            else:
                current.append(char)

        self._emit(tokens, "".join(current), start)
        logger.debug(f"Tokenized {len(text)} characters into {len(tokens)} tokens")
        return tokens

    def _emit(self, tokens: List[Token], word: str, start: int) -> None:
        if not word:
            return
        for value, offset, length in self._split(word):
            tokens.append(
                Token(
                    value=value,
                    start=start + offset,
                    end=start + offset + length,
                    index=len(tokens),
                )
            )

    def _split(self, word: str) -> List[Tuple[str, int, int]]:
        """Return ``(value, offset, length)`` fragments of a finished word."""
        if CAMEL_COMPOUND.match(word):
            parts = [part for part in _CAPITAL_BOUNDARY.split(word) if part]
            # Offsets of later fragments come from a substring search, which
            # picks the first occurrence when a fragment repeats.
            return [
                (part, word.find(part) if i > 0 else 0, len(part))
                for i, part in enumerate(parts)
            ]

        if CAPITALIZED_WORD.match(word):
            constituents = self.decompound(word)
            if constituents:
                fragments = []
                offset = 0
                for part in constituents:
                    fragments.append((part[0].upper() + part[1:], offset, len(part)))
                    offset += len(part)
                return fragments

        return [(word, 0, len(word))]

    def decompound(self, word: str) -> Optional[List[str]]:
        """
        Split a word into lexicon constituents.

        At each position the longest constituent that leaves a coverable
        remainder wins, the same cover a longest-first backtracking search
        would find.

        Returns:
            The surface constituents when the word is covered by at least two
            of them, otherwise None.
        """
        lowered = word.lower()
        size = len(lowered)

        # next_end[pos] is the end of the longest constituent at ``pos`` whose
        # remainder can still be covered; filled right to left.
        next_end: List[Optional[int]] = [None] * (size + 1)
        next_end[size] = size
        for pos in range(size - MIN_CONSTITUENT_LEN, -1, -1):
            for end in range(min(size, pos + self._max_constituent_len), pos + MIN_CONSTITUENT_LEN - 1, -1):
                if next_end[end] is not None and lowered[pos:end] in self.compound_lexicon:
                    next_end[pos] = end
                    break

        if next_end[0] is None or next_end[0] == size:
            return None
        parts = []
        pos = 0
        while pos < size:
            end = next_end[pos]
            parts.append(word[pos:end])
            pos = end
        return parts
