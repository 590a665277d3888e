"""
Loaders for plain-text and JSONL corpora.

Both yield :class:`~bismarck_nlp.types.Document` items. JSONL records may
carry per-document stage switches (``{"text": ..., "options": {"ner": false}}``)
which the pipeline applies when no per-call options are given.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from bismarck_nlp.config import ProcessingOptions
from bismarck_nlp.registry import loaders
from bismarck_nlp.types import Document

logger = logging.getLogger(__name__)

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


@loaders.register("text")
class TextLoader:
    """
    Loads UTF-8 text files.

    Args:
        paragraphs: Yield one document per blank-line separated paragraph
            instead of one per file. Each paragraph records its character
            ``offset`` in the file so annotations can be mapped back.
    """

    def __init__(self, paragraphs: bool = False) -> None:
        self.paragraphs = paragraphs

    def load(self, path: str) -> Iterator[Document]:
        source = Path(path)
        text = source.read_text(encoding="utf-8-sig")
        if not self.paragraphs:
            yield Document(id=source.stem, text=text, meta={"source": path})
            return

        start = 0
        n = 0
        for match in [*_PARAGRAPH_BREAK.finditer(text), None]:
            end = match.start() if match else len(text)
            paragraph = text[start:end]
            if paragraph.strip():
                yield Document(
                    id=f"{source.stem}-{n}",
                    text=paragraph,
                    meta={"source": path, "offset": start},
                )
                n += 1
            if match:
                start = match.end()


@loaders.register("jsonl")
class JSONLLoader:
    """
    Loads JSONL where each line is an object with a text field.

    The record's ``id`` becomes the document id, ``options_field`` (when
    present) holds per-document stage switches, and every other key is
    kept as metadata.

    Raises:
        ValueError: If a line is not a JSON object, its text field is not a
            string, or its options name unknown stages. The message names
            the file and line number.
    """

    def __init__(self, text_field: str = "text", options_field: str = "options") -> None:
        self.text_field = text_field
        self.options_field = options_field

    def load(self, path: str) -> Iterator[Document]:
        stem = Path(path).stem
        with Path(path).open(encoding="utf-8") as f:
            for i, line in enumerate(f):
                if not line.strip():
                    continue
                where = f"{path}:{i + 1}"
                try:
                    data = json.loads(line)
                except json.JSONDecodeError as exc:
                    raise ValueError(f"{where}: invalid JSON ({exc.msg})") from exc
                if not isinstance(data, dict):
                    raise ValueError(f"{where}: expected a JSON object, got {type(data).__name__}")

                text = data.get(self.text_field)
                if not isinstance(text, str):
                    raise ValueError(
                        f"{where}: field '{self.text_field}' must be a string, got {type(text).__name__}"
                    )

                options = self._read_options(data.get(self.options_field), where)
                meta: Dict[str, Any] = {
                    k: v for k, v in data.items() if k not in (self.text_field, self.options_field)
                }
                doc_id = data.get("id") or f"{stem}-{i}"
                yield Document(id=doc_id, text=text, meta={"source": path, **meta}, options=options)

    def _read_options(self, value: Any, where: str) -> Optional[Dict[str, Any]]:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError(f"{where}: field '{self.options_field}' must be an object")
        try:
            ProcessingOptions.from_value(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{where}: {exc}") from exc
        logger.debug(f"{where}: per-document options {value}")
        return value
