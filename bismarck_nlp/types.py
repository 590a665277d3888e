from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class PipelineStage(str, Enum):
    TOKENIZE = "tokenize"
    POS = "pos"
    NER = "ner"
    PARSE = "parse"
    COREF = "coref"
    SENTIMENT = "sentiment"


class GermanPOSTag(str, Enum):
    NOUN = "NOUN"  # Substantiv
    VERB = "VERB"  # Verb
    ART = "ART"  # Artikel
    ADJ = "ADJ"  # Adjektiv
    ADV = "ADV"  # Adverb
    PRON = "PRON"  # Pronomen
    PREP = "PREP"  # Präposition
    CONJ = "CONJ"  # Konjunktion
    PART = "PART"  # Partikel
    NUM = "NUM"  # Numeral
    INTJ = "INTJ"  # Interjektion
    PUNCT = "PUNCT"  # Interpunktion
    OTHER = "OTHER"  # Sonstiges


class EntityType(str, Enum):
    PERSON = "PERSON"
    ORGANIZATION = "ORGANIZATION"
    LOCATION = "LOCATION"
    DATE = "DATE"
    TIME = "TIME"
    MONEY = "MONEY"
    PERCENT = "PERCENT"
    EVENT = "EVENT"
    WORK_OF_ART = "WORK_OF_ART"
    LAW = "LAW"
    LANGUAGE = "LANGUAGE"
    OTHER = "OTHER"


class ReferenceType(str, Enum):
    PRONOUN = "PRONOUN"
    NOUN = "NOUN"
    DEMONSTRATIVE = "DEMONSTRATIVE"
    RELATIVE = "RELATIVE"


class Gender(str, Enum):
    MASC = "MASC"
    FEM = "FEM"
    NEUT = "NEUT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Token:
    """Token span over the source text, `[start, end)`."""

    value: str
    start: int
    end: int
    index: int
    normalized: Optional[str] = None
    lemma: Optional[str] = None


@dataclass(frozen=True)
class POSTag:
    """Part-of-speech tag for a single token."""

    token: Token
    tag: str
    description: str


@dataclass(frozen=True)
class NamedEntity:
    """Entity mention detected by the recognizer."""

    entity: str
    type: str
    start: int
    end: int
    confidence: Optional[float] = None


@dataclass(frozen=True)
class GrammaticalFeatures:
    case: Optional[str] = None
    gender: Optional[str] = None
    number: Optional[str] = None
    tense: Optional[str] = None


@dataclass(frozen=True)
class ParseNode:
    """Node of the shallow constituent tree."""

    type: str
    value: Optional[str] = None
    children: Tuple["ParseNode", ...] = ()
    features: Optional[GrammaticalFeatures] = None

    @property
    def is_terminal(self) -> bool:
        return not self.children

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type,
            "children": [child.to_dict() for child in self.children],
        }
        if self.value is not None:
            data["value"] = self.value
        return data


class ParseNodeBuilder:
    """Accumulates children and produces a finished, immutable ParseNode."""

    def __init__(self, node_type: str, value: Optional[str] = None) -> None:
        self.node_type = node_type
        self.value = value
        self._children: List[ParseNode] = []

    def add(self, child: ParseNode) -> "ParseNodeBuilder":
        self._children.append(child)
        return self

    def add_terminal(self, node_type: str, value: str) -> "ParseNodeBuilder":
        return self.add(ParseNode(type=node_type, value=value))

    def __len__(self) -> int:
        return len(self._children)

    def build(self) -> ParseNode:
        return ParseNode(type=self.node_type, value=self.value, children=tuple(self._children))


@dataclass(frozen=True)
class ReferenceSpan:
    """Surface text plus character span of a mention in a coreference chain."""

    text: str
    start: int
    end: int
    gender: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "text": self.text,
            "position": {"start": self.start, "end": self.end},
        }
        if self.gender is not None:
            data["features"] = {"gender": self.gender}
        return data


@dataclass
class Coreference:
    """An entity and the pronouns that refer back to it, in document order."""

    original: ReferenceSpan
    references: List[ReferenceSpan] = field(default_factory=list)
    type: str = ReferenceType.PRONOUN.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original.to_dict(),
            "references": [ref.to_dict() for ref in self.references],
            "type": self.type,
        }


@dataclass
class Document:
    """Single document item.

    ``options`` holds per-document stage switches read by a loader; they
    apply when the caller passes no options of its own.
    """

    id: Optional[str]
    text: str
    meta: Dict[str, Any] = field(default_factory=dict)
    options: Optional[Dict[str, Any]] = None


@dataclass
class ResultMetadata:
    used_stages: List[str] = field(default_factory=list)
    timestamp: Optional[str] = None
    version: Optional[str] = None
    processing_time: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "usedStages": list(self.used_stages),
            "timestamp": self.timestamp,
            "version": self.version,
            "processingTime": self.processing_time,
        }


@dataclass
class ProcessingResult:
    """Aggregated output of one pipeline call.

    Only the fields of the stages that actually ran are set; the others stay
    ``None``.
    """

    language: str
    raw: str
    tokens: Optional[List[Token]] = None
    pos: Optional[List[POSTag]] = None
    entities: Optional[List[NamedEntity]] = None
    parse_tree: Optional[ParseNode] = None
    coreferences: Optional[List[Coreference]] = None
    metadata: Optional[ResultMetadata] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"language": self.language, "raw": self.raw}
        if self.tokens is not None:
            data["tokens"] = [_token_dict(t) for t in self.tokens]
        if self.pos is not None:
            data["pos"] = [
                {"token": _token_dict(p.token), "tag": p.tag, "description": p.description}
                for p in self.pos
            ]
        if self.entities is not None:
            data["entities"] = [
                {
                    "entity": e.entity,
                    "type": e.type,
                    "start": e.start,
                    "end": e.end,
                    "confidence": e.confidence,
                }
                for e in self.entities
            ]
        if self.parse_tree is not None:
            data["parseTree"] = self.parse_tree.to_dict()
        if self.coreferences is not None:
            data["coreferences"] = [c.to_dict() for c in self.coreferences]
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        return data


def _token_dict(token: Token) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "value": token.value,
        "start": token.start,
        "end": token.end,
        "index": token.index,
    }
    if token.normalized is not None:
        data["normalized"] = token.normalized
    if token.lemma is not None:
        data["lemma"] = token.lemma
    return data
