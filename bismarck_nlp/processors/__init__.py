"""Annotation stage processors.

Importing this package registers every processor under its stage name.
"""

from .tokenizer import Tokenizer  # noqa: F401
from .pos_tagger import POSTagger  # noqa: F401
from .ner import NamedEntityRecognizer  # noqa: F401
from .parser import ShallowParser  # noqa: F401
from .coreference import CoreferenceResolver  # noqa: F401
