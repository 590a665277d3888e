import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

# Ensure component registration by importing modules with registry decorators.
from bismarck_nlp import loaders as _loaders_pkg  # noqa: F401
from bismarck_nlp import processors as _processors_pkg  # noqa: F401
from bismarck_nlp import __version__

from .config import PipelineConfig, ProcessingOptions, merge_config
from .errors import ProcessingError
from .registry import loaders, processors
from .types import Document, PipelineStage, ProcessingResult, ResultMetadata

logger = logging.getLogger(__name__)

OptionsArg = Union[ProcessingOptions, Mapping[str, Any], None]
ConfigArg = Union[PipelineConfig, Mapping[str, Any], None]

# Stages that consume POS tags; they only run when tagging ran.
_TAG_CONSUMERS = (PipelineStage.NER, PipelineStage.PARSE, PipelineStage.COREF)


class GermanNLPPipeline:
    """Orchestrates tokenization, tagging, NER, parsing and coreference."""

    def __init__(self, config: ConfigArg = None) -> None:
        self.config = merge_config(PipelineConfig(), config)
        self._initialize_processors()

    def _initialize_processors(self) -> None:
        options = self.config.options
        params: Dict[str, Dict[str, Any]] = {
            PipelineStage.TOKENIZE.value: {
                "keep_punctuation": options.keep_punctuation,
                "case_sensitive": options.case_sensitive,
            },
        }
        built = {}
        for stage in PipelineStage:
            if stage.value not in processors:
                continue
            factory = processors.get(stage.value)
            built[stage.value] = factory(**params.get(stage.value, {}))

        self.processors = built
        self.tokenizer = built[PipelineStage.TOKENIZE.value]
        self.pos_tagger = built[PipelineStage.POS.value]
        self.ner = built[PipelineStage.NER.value]
        self.parser = built[PipelineStage.PARSE.value]
        self.coref = built[PipelineStage.COREF.value]
        logger.info(
            f"Pipeline initialized (language={self.config.language}, "
            f"stages={self.config.stages}, keep_punctuation={options.keep_punctuation})"
        )

    def should_run_stage(self, stage: str, options: OptionsArg = None) -> bool:
        """
        Decide whether ``stage`` runs for one call.

        With per-call options a stage runs unless it is explicitly ``False``
        there; without them it runs iff it is listed in the configured stages.
        A stage with no registered processor never runs.
        """
        if stage not in self.processors:
            return False
        call_options = ProcessingOptions.from_value(options)
        if call_options is None:
            return stage in self.config.stages
        return call_options.allows(stage)

    def process(self, text: str, options: OptionsArg = None) -> ProcessingResult:
        """
        Annotate ``text`` with every enabled stage.

        Tokenization always runs. NER, parsing and coreference are only
        reachable when POS tagging ran for this call.

        Raises:
            ProcessingError: If any stage fails. No partial result is returned.
        """
        started = time.perf_counter()
        used: List[str] = [PipelineStage.TOKENIZE.value]
        pos = entities = parse_tree = coreferences = None

        try:
            call_options = ProcessingOptions.from_value(options)
            tokens = self.tokenizer.tokenize(text)

            if self.should_run_stage(PipelineStage.POS.value, call_options):
                pos = self.pos_tagger.tag(tokens)
                used.append(PipelineStage.POS.value)

                for stage in _TAG_CONSUMERS:
                    if not self.should_run_stage(stage.value, call_options):
                        continue
                    if stage is PipelineStage.NER:
                        entities = self.ner.recognize(tokens)
                    elif stage is PipelineStage.PARSE:
                        parse_tree = self.parser.parse(tokens, pos)
                    else:
                        coreferences = self.coref.resolve(tokens, pos)
                    used.append(stage.value)
        except Exception as exc:
            raise ProcessingError(f"Processing failed: {exc}") from exc

        elapsed = time.perf_counter() - started
        logger.debug(f"Processed {len(text)} characters with stages {used} in {elapsed:.4f}s")
        return ProcessingResult(
            language=self.config.language,
            raw=text,
            tokens=tokens,
            pos=pos,
            entities=entities,
            parse_tree=parse_tree,
            coreferences=coreferences,
            metadata=ResultMetadata(
                used_stages=used,
                timestamp=datetime.now(timezone.utc).isoformat(),
                version=__version__,
                processing_time=elapsed,
            ),
        )

    async def aprocess(self, text: str, options: OptionsArg = None) -> ProcessingResult:
        """Awaitable form of :meth:`process`; runs synchronously."""
        return self.process(text, options)

    def get_pipeline_config(self) -> PipelineConfig:
        return self.config.copy()

    def set_pipeline_config(self, config: ConfigArg) -> None:
        """Merge a partial config into the current one and rebuild the processors.

        Not synchronized against concurrent ``process`` calls.
        """
        self.config = merge_config(self.config, config)
        logger.info("Pipeline configuration updated")
        self._initialize_processors()

    def process_document(self, doc: Document, options: OptionsArg = None) -> Dict[str, Any]:
        """Process one loaded document; explicit ``options`` win over ``doc.options``."""
        result = self.process(doc.text, options if options is not None else doc.options)
        return {
            "id": doc.id,
            **result.to_dict(),
            "meta": doc.meta,
        }

    def run(
        self,
        paths: Iterable[str],
        output_path: Optional[str] = None,
        loader: str = "text",
        options: OptionsArg = None,
        **loader_params: Any,
    ) -> List[Dict[str, Any]]:
        """Load documents from ``paths``, process them and optionally write JSONL."""
        doc_loader = loaders.get(loader)(**loader_params)
        results: List[Dict[str, Any]] = []
        writer = None
        if output_path:
            writer = Path(output_path).open("w", encoding="utf-8")

        try:
            for path in paths:
                for doc in doc_loader.load(path):
                    result = self.process_document(doc, options)
                    if writer:
                        writer.write(json.dumps(result, ensure_ascii=False) + "\n")
                    results.append(result)
        finally:
            if writer:
                writer.close()

        logger.info(f"Processed {len(results)} documents")
        return results
