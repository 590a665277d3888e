"""
Shallow constituent parser.

Builds one CLAUSE node for the first clause of the token stream: a subject
noun phrase, a verb phrase and the noun/prepositional phrases that follow
the verb. Parsing stops at the first period token; tokens after it are not
part of the tree.
"""

import logging
import re
from typing import List, Sequence, Tuple

from bismarck_nlp.lexicon import COPULAS, LOWER
from bismarck_nlp.registry import processors
from bismarck_nlp.types import GermanPOSTag, ParseNode, ParseNodeBuilder, POSTag, Token

logger = logging.getLogger(__name__)

VERB_TAGS = frozenset({GermanPOSTag.VERB.value, "VFIN", "VINF"})

VERB_PATTERNS = (
    re.compile(rf"^({'|'.join(COPULAS)})$", re.IGNORECASE),
    re.compile(rf"^[{LOWER}]+(en|t|st|e)$"),
)

CLAUSE_END = "."

NOUN = GermanPOSTag.NOUN.value
PRON = GermanPOSTag.PRON.value
ART = GermanPOSTag.ART.value
ADJ = GermanPOSTag.ADJ.value
PART = GermanPOSTag.PART.value
PREP = GermanPOSTag.PREP.value


@processors.register("parse")
class ShallowParser:
    """Chunks the first clause into NP, VP and PP constituents."""

    def parse(self, tokens: Sequence[Token], pos_tags: Sequence[POSTag]) -> ParseNode:
        if len(tokens) != len(pos_tags):
            raise ValueError(
                f"Expected one POS tag per token, got {len(pos_tags)} tags for {len(tokens)} tokens"
            )
        tags = [p.tag for p in pos_tags]
        clause = ParseNodeBuilder("CLAUSE")
        has_subject = False
        has_verb = False
        i = 0

        while i < len(tokens):
            if tokens[i].value == CLAUSE_END:
                break

            if not has_subject and self._starts_noun_phrase(tags, i):
                node, i = self._noun_phrase(tokens, tags, i)
                clause.add(node)
                has_subject = True
            elif has_subject and not has_verb and self._is_verb(tokens[i], tags[i]):
                node, i = self._verb_phrase(tokens, tags, i)
                clause.add(node)
                has_verb = True
            elif has_verb and self._starts_noun_phrase(tags, i):
                node, i = self._noun_phrase(tokens, tags, i)
                clause.add(node)
            elif has_verb and tags[i] == PREP:
                node, i = self._prep_phrase(tokens, tags, i)
                clause.add(node)
            else:
                i += 1

        logger.debug(f"Parsed clause with {len(clause)} constituents")
        return clause.build()

    def _starts_noun_phrase(self, tags: List[str], i: int) -> bool:
        tag = tags[i]
        if tag in (NOUN, PRON, ART):
            return True
        if tag == ADJ:
            j = i
            while j < len(tags) and tags[j] == ADJ:
                j += 1
            return j < len(tags) and tags[j] == NOUN
        return False

    def _is_verb(self, token: Token, tag: str) -> bool:
        return tag in VERB_TAGS or any(p.match(token.value) for p in VERB_PATTERNS)

    def _noun_phrase(
        self, tokens: Sequence[Token], tags: List[str], start: int
    ) -> Tuple[ParseNode, int]:
        np = ParseNodeBuilder("NP")
        i = start

        if i < len(tokens) and tags[i] == ART:
            np.add_terminal("DET", tokens[i].value)
            i += 1

        while i < len(tokens) and tags[i] == ADJ:
            np.add_terminal("ADJ", tokens[i].value)
            i += 1

        if i < len(tokens) and tags[i] in (NOUN, PRON):
            np.add_terminal(tags[i], tokens[i].value)
            i += 1
            # Fragments of one decompounded word stay in the same head.
            while (
                i < len(tokens)
                and tags[i] == NOUN
                and tags[i - 1] == NOUN
                and tokens[i].start == tokens[i - 1].end
            ):
                np.add_terminal(NOUN, tokens[i].value)
                i += 1

        return np.build(), max(i, start + 1)

    def _verb_phrase(
        self, tokens: Sequence[Token], tags: List[str], start: int
    ) -> Tuple[ParseNode, int]:
        vp = ParseNodeBuilder("VP")
        vp.add_terminal("VERB", tokens[start].value)
        i = start + 1

        while i < len(tokens) and (self._is_verb(tokens[i], tags[i]) or tags[i] == PART):
            vp.add_terminal(PART if tags[i] == PART else "VERB", tokens[i].value)
            i += 1

        return vp.build(), i

    def _prep_phrase(
        self, tokens: Sequence[Token], tags: List[str], start: int
    ) -> Tuple[ParseNode, int]:
        pp = ParseNodeBuilder("PP")
        pp.add_terminal("PREP", tokens[start].value)
        i = start + 1
        if i < len(tokens) and self._starts_noun_phrase(tags, i):
            np, i = self._noun_phrase(tokens, tags, i)
        else:
            # No object: the PP still carries an (empty) NP slot.
            np = ParseNodeBuilder("NP").build()
        pp.add(np)
        return pp.build(), i
