import logging
import re
from typing import List, Sequence, Tuple

from bismarck_nlp.lexicon import (
    CONJUNCTIONS,
    COPULAS,
    LOWER,
    POS_EXCEPTIONS,
    PREPOSITIONS,
    PUNCTUATION,
    UPPER,
)
from bismarck_nlp.registry import processors
from bismarck_nlp.types import GermanPOSTag, POSTag, Token

logger = logging.getLogger(__name__)


def _alternation(words: Sequence[str]) -> str:
    return "|".join(re.escape(word) for word in words)


# Evaluated in order; the first matching pattern decides the tag. Any
# capitalized word is a NOUN before the narrower rules are consulted.
TAG_RULES: Tuple[Tuple["re.Pattern[str]", str, str], ...] = (
    (re.compile(rf"^[{UPPER}][{LOWER}]+$"), GermanPOSTag.NOUN.value, "Noun"),
    (re.compile(r"^(der|die|das|den|dem|des)$", re.IGNORECASE), GermanPOSTag.ART.value, "Article"),
    (re.compile(rf"^({_alternation(COPULAS)})$", re.IGNORECASE), GermanPOSTag.VERB.value, "Verb"),
    (re.compile(rf"^[{LOWER}]+lich(e|en|er|es|em)?$"), GermanPOSTag.ADJ.value, "Adjective"),
    (re.compile(rf"^({_alternation(PREPOSITIONS)})$", re.IGNORECASE), GermanPOSTag.PREP.value, "Preposition"),
    (re.compile(rf"^({_alternation(CONJUNCTIONS)})$", re.IGNORECASE), GermanPOSTag.CONJ.value, "Conjunction"),
    (re.compile(r"^(ich|du|er|sie|es|wir|ihr)$", re.IGNORECASE), GermanPOSTag.PRON.value, "Pronoun"),
    (re.compile(r"^[0-9]+$"), GermanPOSTag.NUM.value, "Number"),
    (re.compile(rf"^[{LOWER}]+en$"), GermanPOSTag.VERB.value, "Verb Infinitive"),
    (re.compile(rf"^[{LOWER}]+(st|t|en|et)$"), GermanPOSTag.VERB.value, "Finite Verb"),
    (re.compile(rf"^[{LOWER}]+er$"), GermanPOSTag.ADJ.value, "Adjective Comparative"),
    (re.compile(rf"^[{LOWER}]+(ig|isch|bar|sam|los|haft)$"), GermanPOSTag.ADJ.value, "Adjective"),
    (
        re.compile(rf"^[{re.escape(''.join(sorted(PUNCTUATION)))}]$"),
        GermanPOSTag.PUNCT.value,
        "Punctuation",
    ),
)

UNKNOWN_TAG = GermanPOSTag.OTHER.value
UNKNOWN_DESCRIPTION = "Unknown Part of Speech"


@processors.register("pos")
class POSTagger:
    """Assigns one part-of-speech tag per token from fixed rules."""

    def __init__(self) -> None:
        self.rules = TAG_RULES
        self.exceptions = POS_EXCEPTIONS

    def tag(self, tokens: Sequence[Token]) -> List[POSTag]:
        tags = [self.tag_token(token) for token in tokens]
        logger.debug(f"Tagged {len(tags)} tokens")
        return tags

    def tag_token(self, token: Token) -> POSTag:
        special = self.exceptions.get(token.value.lower())
        if special is not None:
            tag, description = special
            return POSTag(token=token, tag=tag, description=description)

        for pattern, tag, description in self.rules:
            if pattern.match(token.value):
                return POSTag(token=token, tag=tag, description=description)

        return POSTag(token=token, tag=UNKNOWN_TAG, description=UNKNOWN_DESCRIPTION)

    def get_description(self, tag: str) -> str:
        """Description of the first rule registered for ``tag``."""
        for _, rule_tag, description in self.rules:
            if rule_tag == tag:
                return description
        return "Unknown"
