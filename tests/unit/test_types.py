"""Unit tests for data types."""

import dataclasses
import json

import pytest

from bismarck_nlp.types import (
    Coreference,
    Document,
    NamedEntity,
    ParseNode,
    ParseNodeBuilder,
    POSTag,
    ProcessingResult,
    ReferenceSpan,
    ResultMetadata,
    Token,
)


class TestToken:
    """Tests for Token dataclass."""

    def test_create_with_required_fields(self):
        token = Token(value="Haus", start=0, end=4, index=0)
        assert token.value == "Haus"
        assert token.normalized is None
        assert token.lemma is None

    def test_is_immutable(self):
        token = Token(value="Haus", start=0, end=4, index=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.value = "Hof"


class TestParseNodeBuilder:
    """Tests for building parse nodes."""

    def test_build_returns_tuple_children(self):
        builder = ParseNodeBuilder("NP")
        builder.add_terminal("DET", "die").add_terminal("NOUN", "Bank")
        node = builder.build()
        assert node.type == "NP"
        assert node.value is None
        assert [c.value for c in node.children] == ["die", "Bank"]
        assert isinstance(node.children, tuple)

    def test_built_node_is_independent_of_builder(self):
        builder = ParseNodeBuilder("VP")
        builder.add_terminal("VERB", "ist")
        node = builder.build()
        builder.add_terminal("PART", "nicht")
        assert len(node.children) == 1
        assert len(builder) == 2

    def test_terminal(self):
        node = ParseNode(type="NOUN", value="Bank")
        assert node.is_terminal
        assert node.to_dict() == {"type": "NOUN", "value": "Bank", "children": []}


class TestCoreference:
    """Tests for Coreference and ReferenceSpan."""

    def test_to_dict_shape(self):
        chain = Coreference(
            original=ReferenceSpan(text="Mann", start=4, end=8, gender="MASC"),
            references=[ReferenceSpan(text="Er", start=16, end=18)],
        )
        data = chain.to_dict()
        assert data["original"]["position"] == {"start": 4, "end": 8}
        assert data["original"]["features"] == {"gender": "MASC"}
        assert data["references"] == [{"text": "Er", "position": {"start": 16, "end": 18}}]
        assert data["type"] == "PRONOUN"


class TestProcessingResult:
    """Tests for ProcessingResult.to_dict."""

    def test_only_produced_fields_are_rendered(self):
        result = ProcessingResult(
            language="de",
            raw="Haus",
            tokens=[Token(value="Haus", start=0, end=4, index=0)],
        )
        data = result.to_dict()
        assert set(data) == {"language", "raw", "tokens"}
        assert data["tokens"] == [{"value": "Haus", "start": 0, "end": 4, "index": 0}]

    def test_full_result_is_json_serializable(self):
        token = Token(value="Haus", start=0, end=4, index=0)
        result = ProcessingResult(
            language="de",
            raw="Haus",
            tokens=[token],
            pos=[POSTag(token=token, tag="NOUN", description="Noun")],
            entities=[NamedEntity(entity="Haus", type="PERSON", start=0, end=4, confidence=0.5)],
            parse_tree=ParseNode(type="CLAUSE"),
            coreferences=[],
            metadata=ResultMetadata(used_stages=["tokenize", "pos"], version="0.1.0"),
        )
        data = json.loads(json.dumps(result.to_dict()))
        assert data["parseTree"] == {"type": "CLAUSE", "children": []}
        assert data["pos"][0]["tag"] == "NOUN"
        assert data["metadata"]["usedStages"] == ["tokenize", "pos"]


class TestDocument:
    """Tests for Document dataclass."""

    def test_create_with_required_fields(self):
        doc = Document(id="doc-1", text="Hallo Welt")
        assert doc.meta == {}
        assert doc.options is None
