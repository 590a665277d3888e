import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from bismarck_nlp.lexicon import COREF_PRONOUNS, GENDERS, UPPER
from bismarck_nlp.registry import processors
from bismarck_nlp.types import (
    Coreference,
    Gender,
    GermanPOSTag,
    POSTag,
    ReferenceSpan,
    ReferenceType,
    Token,
)

logger = logging.getLogger(__name__)

_CAPITALIZED = re.compile(rf"^[{UPPER}]")


@dataclass(frozen=True)
class EntityCandidate:
    text: str
    start: int
    end: int
    gender: str


@processors.register("coref")
class CoreferenceResolver:
    """Links pronouns to the most recent compatible noun."""

    def __init__(self) -> None:
        self.pronouns = COREF_PRONOUNS
        self.genders = GENDERS

    def resolve(self, tokens: Sequence[Token], pos_tags: Sequence[POSTag]) -> List[Coreference]:
        candidates = self.find_candidates(tokens, pos_tags)
        chains: List[Coreference] = []
        by_text: Dict[str, Coreference] = {}
        unresolved = 0

        for token in tokens:
            if token.value.lower() not in self.pronouns:
                continue
            gender = self.gender_of(token.value)
            match = self._find_antecedent(candidates, token, gender)
            if match is None:
                unresolved += 1
                continue

            reference = ReferenceSpan(text=token.value, start=token.start, end=token.end, gender=gender)
            chain = by_text.get(match.text)
            if chain is None:
                chain = Coreference(
                    original=ReferenceSpan(
                        text=match.text, start=match.start, end=match.end, gender=match.gender
                    ),
                    type=ReferenceType.PRONOUN.value,
                )
                by_text[match.text] = chain
                chains.append(chain)
            chain.references.append(reference)

        logger.debug(f"Resolved {len(chains)} coreference chains, {unresolved} pronouns unresolved")
        return chains

    def find_candidates(
        self, tokens: Sequence[Token], pos_tags: Sequence[POSTag]
    ) -> List[EntityCandidate]:
        """Capitalized nouns in document order, gendered by a preceding article."""
        candidates: List[EntityCandidate] = []
        for i, (token, pos) in enumerate(zip(tokens, pos_tags)):
            if pos.tag != GermanPOSTag.NOUN.value or not _CAPITALIZED.match(token.value):
                continue
            gender = Gender.UNKNOWN.value
            if i > 0 and pos_tags[i - 1].tag == GermanPOSTag.ART.value:
                gender = self.gender_of(tokens[i - 1].value)
            candidates.append(
                EntityCandidate(text=token.value, start=token.start, end=token.end, gender=gender)
            )
        return candidates

    def gender_of(self, word: str) -> str:
        return self.genders.get(word.lower(), Gender.UNKNOWN.value)

    def _find_antecedent(
        self, candidates: Sequence[EntityCandidate], pronoun: Token, gender: str
    ) -> Optional[EntityCandidate]:
        for candidate in reversed(candidates):
            if candidate.end <= pronoun.start and candidate.gender in (gender, Gender.UNKNOWN.value):
                return candidate
        return None
