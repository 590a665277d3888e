"""Shared fixtures for the annotation pipeline tests."""

import json
import os
import tempfile
from typing import Callable, Dict, Iterator, List, Tuple

import pytest

from bismarck_nlp.pipeline import GermanNLPPipeline
from bismarck_nlp.processors import POSTagger, Tokenizer
from bismarck_nlp.types import POSTag, Token


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_text() -> str:
    """Short German text with a coreference and an organization."""
    return "Der Mann arbeitet bei der BMW AG. Er wohnt in Heidelberg."


@pytest.fixture
def sample_documents() -> List[Dict]:
    return [
        {"id": "doc1", "text": "Die Bank ist groß."},
        {"id": "doc2", "text": "Der Mann lacht. Er lacht auch."},
        {"text": "Herr Schmidt kommt."},
    ]


# ---------------------------------------------------------------------------
# Processor fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tokenizer() -> Tokenizer:
    """Tokenizer that keeps punctuation, as the pipeline does."""
    return Tokenizer(keep_punctuation=True)


@pytest.fixture
def tagger() -> POSTagger:
    return POSTagger()


@pytest.fixture
def analyze(
    tokenizer: Tokenizer, tagger: POSTagger
) -> Callable[[str], Tuple[List[Token], List[POSTag]]]:
    """Tokenize and tag a text in one step."""

    def _analyze(text: str) -> Tuple[List[Token], List[POSTag]]:
        tokens = tokenizer.tokenize(text)
        return tokens, tagger.tag(tokens)

    return _analyze


@pytest.fixture
def pipeline() -> GermanNLPPipeline:
    """Pipeline with the default configuration."""
    return GermanNLPPipeline()


# ---------------------------------------------------------------------------
# Temporary file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def temp_text_file(sample_text: str) -> Iterator[str]:
    """Create a temporary text file with sample content."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8") as f:
        f.write(sample_text)
        path = f.name
    yield path
    os.unlink(path)


@pytest.fixture
def temp_jsonl_file(sample_documents: List[Dict]) -> Iterator[str]:
    """Create a temporary JSONL file with one document per line."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".jsonl", delete=False, encoding="utf-8") as f:
        for item in sample_documents:
            f.write(json.dumps(item, ensure_ascii=False) + "\n")
        path = f.name
    yield path
    os.unlink(path)


@pytest.fixture
def temp_config_file() -> Iterator[str]:
    """Temporary config JSON file for CLI testing."""
    config = {
        "stages": ["tokenize", "pos", "ner"],
        "language": "de",
        "options": {"keepPunctuation": False},
    }
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        json.dump(config, f)
        path = f.name
    yield path
    os.unlink(path)


@pytest.fixture
def temp_output_path() -> Iterator[str]:
    with tempfile.TemporaryDirectory() as tmpdir:
        yield os.path.join(tmpdir, "out.jsonl")
