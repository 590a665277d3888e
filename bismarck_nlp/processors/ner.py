"""
Pattern-based named entity recognition for German.

Works on token text alone. A forward pass tries a two-token window first,
then the single-token rules, then a capitalized-word fallback for person
names that skips fragments of decompounded words; adjacent hits of the same
type are merged afterwards.
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from bismarck_nlp.lexicon import (
    DETERMINERS,
    FUNCTION_WORDS,
    LOCATION_INDICATORS,
    LOWER,
    ORGANIZATION_SUFFIXES,
    PUNCTUATION,
    TITLES,
    UPPER,
)
from bismarck_nlp.registry import processors
from bismarck_nlp.types import EntityType, NamedEntity, Token

logger = logging.getLogger(__name__)

PATTERN_CONFIDENCE = 0.9
FALLBACK_CONFIDENCE = 0.5

MAX_MERGE_GAP = 1

SINGLE_TOKEN_RULES: Tuple[Tuple["re.Pattern[str]", str], ...] = (
    (re.compile(rf"^[{UPPER}][{LOWER}]+(straße|platz|weg|allee)$"), EntityType.LOCATION.value),
    (re.compile(rf"^[{UPPER}][{LOWER}]+(GmbH|AG|KG|OHG|e\.V\.|GbR)$"), EntityType.ORGANIZATION.value),
    (re.compile(rf"^[{UPPER}][{LOWER}]+(burg|stadt|dorf|bach|berg|tal)$"), EntityType.LOCATION.value),
    (re.compile(rf"^[{UPPER}][{LOWER}]+er\s+(Universität|Hochschule)$"), EntityType.ORGANIZATION.value),
    (re.compile(rf"^(Dr\.|Prof\.|Herr|Frau)\s+[{UPPER}][{LOWER}]+$"), EntityType.PERSON.value),
)

ORGANIZATION_PAIR = re.compile(rf"^[{UPPER}][\w&.-]* (GmbH|AG|KG|OHG)$")
NAME_SHAPE = re.compile(rf"^[{UPPER}][{LOWER}]+$")


@processors.register("ner")
class NamedEntityRecognizer:
    """Detects persons, organizations and locations from token text."""

    def __init__(self) -> None:
        self.rules = SINGLE_TOKEN_RULES
        self.titles = TITLES
        self.location_indicators = LOCATION_INDICATORS

    def recognize(self, tokens: Sequence[Token]) -> List[NamedEntity]:
        entities: List[NamedEntity] = []
        i = 0

        while i < len(tokens):
            token = tokens[i]

            if i + 1 < len(tokens) and not _is_punctuation(tokens[i + 1]):
                pair = f"{token.value} {tokens[i + 1].value}"
                entity_type = self._match_pair(pair)
                if entity_type:
                    entities.append(
                        NamedEntity(
                            entity=pair,
                            type=entity_type,
                            start=token.start,
                            end=tokens[i + 1].end,
                            confidence=PATTERN_CONFIDENCE,
                        )
                    )
                    i += 2
                    continue

            entity_type = self._match_single(token.value)
            if entity_type:
                entities.append(_entity(token, entity_type, PATTERN_CONFIDENCE))
            elif not _is_fragment(tokens, i) and self._is_potential_person(
                token, tokens[i - 1] if i > 0 else None
            ):
                entities.append(_entity(token, EntityType.PERSON.value, FALLBACK_CONFIDENCE))

            i += 1

        merged = merge_adjacent_entities(entities)
        logger.debug(f"Recognized {len(entities)} raw entities, {len(merged)} after merging")
        return merged

    def _match_pair(self, text: str) -> Optional[str]:
        if ORGANIZATION_PAIR.match(text):
            return EntityType.ORGANIZATION.value
        if any(text.startswith(title) for title in self.titles):
            return EntityType.PERSON.value
        lowered = text.lower()
        if any(indicator in lowered for indicator in self.location_indicators):
            return EntityType.LOCATION.value
        return None

    def _match_single(self, text: str) -> Optional[str]:
        for pattern, entity_type in self.rules:
            if pattern.match(text):
                return entity_type
        return None

    def _is_potential_person(self, token: Token, previous: Optional[Token]) -> bool:
        text = token.value
        if not NAME_SHAPE.match(text):
            return False
        lowered = text.lower()
        if lowered in FUNCTION_WORDS:
            return False
        if any(indicator in lowered for indicator in self.location_indicators):
            return False
        if any(text.endswith(suffix) for suffix in ORGANIZATION_SUFFIXES):
            return False
        # An article in front marks a common noun ("die Bank").
        if previous is not None and previous.value.lower() in DETERMINERS:
            return False
        return True


def merge_adjacent_entities(entities: Sequence[NamedEntity]) -> List[NamedEntity]:
    """
    Merge runs of same-type entities separated by at most one character.

    Args:
        entities: Entities in document order.

    Returns:
        Merged entities; text joined with a single space, span is the union.
    """
    merged: List[NamedEntity] = []
    current: Optional[NamedEntity] = None

    for entity in entities:
        if current is None:
            current = entity
            continue

        if current.type == entity.type and entity.start - current.end <= MAX_MERGE_GAP:
            current = NamedEntity(
                entity=f"{current.entity} {entity.entity}",
                type=current.type,
                start=current.start,
                end=entity.end,
                confidence=_min_confidence(current.confidence, entity.confidence),
            )
        else:
            merged.append(current)
            current = entity

    if current is not None:
        merged.append(current)
    return merged


def _entity(token: Token, entity_type: str, confidence: float) -> NamedEntity:
    return NamedEntity(
        entity=token.value,
        type=entity_type,
        start=token.start,
        end=token.end,
        confidence=confidence,
    )


def _is_punctuation(token: Token) -> bool:
    return len(token.value) == 1 and token.value in PUNCTUATION


def _is_fragment(tokens: Sequence[Token], i: int) -> bool:
    """True when tokens[i] was split off a longer word (it touches a word neighbour)."""
    token = tokens[i]
    if i > 0 and tokens[i - 1].end == token.start and not _is_punctuation(tokens[i - 1]):
        return True
    if i + 1 < len(tokens) and tokens[i + 1].start == token.end and not _is_punctuation(tokens[i + 1]):
        return True
    return False


def _min_confidence(a: Optional[float], b: Optional[float]) -> Optional[float]:
    if a is None or b is None:
        return a if b is None else b
    return min(a, b)
