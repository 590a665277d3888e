"""
spaCy extension management utilities.

Registers the custom attributes used when exporting results to spaCy.
"""

from spacy.tokens import Doc, Span


def ensure_confidence_extension() -> None:
    """Ensure the confidence extension is registered on Span."""
    if not Span.has_extension("confidence"):
        Span.set_extension("confidence", default=None)


def ensure_parse_tree_extension() -> None:
    """Ensure the parse_tree extension is registered on Doc."""
    if not Doc.has_extension("parse_tree"):
        Doc.set_extension("parse_tree", default=None)
