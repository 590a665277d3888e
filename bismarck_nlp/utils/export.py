"""
Export of processing results to spaCy documents.

Token values become the words of a ``Doc`` over a blank German vocabulary,
POS tags go to ``token.tag_`` (mapped to Universal POS in ``token.pos_``),
entities to ``doc.ents`` and every coreference chain to its own span group
``coref_clusters_<n>``.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Optional

import spacy
from spacy.language import Language
from spacy.tokens import Doc, Span

from bismarck_nlp.types import ProcessingResult
from bismarck_nlp.utils.extensions import (
    ensure_confidence_extension,
    ensure_parse_tree_extension,
)
from bismarck_nlp.utils.spans import filter_spans, token_range

logger = logging.getLogger(__name__)

UPOS_MAP: Dict[str, str] = {
    "NOUN": "NOUN",
    "VERB": "VERB",
    "ART": "DET",
    "ADJ": "ADJ",
    "ADV": "ADV",
    "PRON": "PRON",
    "PREP": "ADP",
    "CONJ": "CCONJ",
    "PART": "PART",
    "NUM": "NUM",
    "INTJ": "INTJ",
    "PUNCT": "PUNCT",
    "OTHER": "X",
}

COREF_GROUP_PREFIX = "coref_clusters_"


@lru_cache(maxsize=1)
def _blank_german() -> Language:
    return spacy.blank("de")


def to_spacy_doc(result: ProcessingResult, nlp: Optional[Language] = None) -> Doc:
    """
    Convert a processing result into a spaCy Doc.

    Args:
        result: Result with at least ``tokens`` set
        nlp: Language whose vocab is used (blank German by default)

    Returns:
        Doc carrying tags, entities, coreference span groups and the parse
        tree (on ``doc._.parse_tree``)
    """
    if result.tokens is None:
        raise ValueError("Result has no tokens; tokenization must have run.")

    ensure_confidence_extension()
    ensure_parse_tree_extension()
    vocab = (nlp or _blank_german()).vocab

    tokens = result.tokens
    words = [tok.value for tok in tokens]
    spaces = [
        i + 1 < len(tokens) and tokens[i + 1].start > tok.end
        for i, tok in enumerate(tokens)
    ]
    doc = Doc(vocab, words=words, spaces=spaces)

    if result.pos is not None:
        for spacy_token, pos_tag in zip(doc, result.pos):
            spacy_token.tag_ = pos_tag.tag
            spacy_token.pos_ = UPOS_MAP.get(pos_tag.tag, "X")

    if result.entities is not None:
        spans: List[Span] = []
        for entity in result.entities:
            bounds = token_range(tokens, entity.start, entity.end)
            if bounds is None:
                logger.warning(f"Entity '{entity.entity}' does not align with any token, skipping")
                continue
            span = Span(doc, bounds[0], bounds[1], label=entity.type)
            span._.confidence = entity.confidence
            spans.append(span)
        doc.ents = filter_spans(spans)

    if result.coreferences is not None:
        for n, chain in enumerate(result.coreferences):
            group = []
            for ref in [chain.original, *chain.references]:
                bounds = token_range(tokens, ref.start, ref.end)
                if bounds is not None:
                    group.append(Span(doc, bounds[0], bounds[1], label=chain.type))
            doc.spans[f"{COREF_GROUP_PREFIX}{n}"] = group

    doc._.parse_tree = result.parse_tree
    return doc
