"""
Shared utilities for the annotation pipeline.
"""

from bismarck_nlp.utils.spans import filter_spans, token_range
from bismarck_nlp.utils.extensions import (
    ensure_confidence_extension,
    ensure_parse_tree_extension,
)
from bismarck_nlp.utils.export import to_spacy_doc

__all__ = [
    "filter_spans",
    "token_range",
    "ensure_confidence_extension",
    "ensure_parse_tree_extension",
    "to_spacy_doc",
]
