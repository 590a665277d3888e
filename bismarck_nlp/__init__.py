"""
Rule-based annotation pipeline for German text.

Produces token spans, part-of-speech tags, named entities, a shallow
constituent tree and pronoun coreference chains from raw text.
"""

__all__ = [
    "PipelineConfig",
    "GermanNLPPipeline",
    "ProcessingError",
]

__version__ = "0.1.0"

from .config import PipelineConfig  # noqa: E402
from .errors import ProcessingError  # noqa: E402
from .pipeline import GermanNLPPipeline  # noqa: E402
