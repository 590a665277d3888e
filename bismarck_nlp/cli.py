import argparse
import json
import logging
import sys
from pathlib import Path

from bismarck_nlp.config import PipelineConfig
from bismarck_nlp.pipeline import GermanNLPPipeline
from bismarck_nlp.registry import loaders


def main(argv=None):
    parser = argparse.ArgumentParser(description="Annotate German text with the rule-based pipeline.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input",
        type=str,
        nargs="+",
        help="Input file paths.",
    )
    source.add_argument(
        "--text",
        type=str,
        help="Annotate this text instead of reading files.",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Optional path to pipeline config JSON file.",
    )
    parser.add_argument(
        "--loader",
        type=str,
        default="text",
        choices=sorted(loaders.available()),
        help="Document loader used for --input files.",
    )
    parser.add_argument(
        "--stages",
        type=str,
        nargs="+",
        help="Stages to run; overrides the config file.",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Optional JSONL output path.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_data = {}
    if args.config:
        config_data = json.loads(Path(args.config).read_text(encoding="utf-8"))
    if args.stages:
        config_data["stages"] = args.stages
    config = PipelineConfig.from_dict(config_data)

    pipeline = GermanNLPPipeline(config)

    if args.text is not None:
        results = [pipeline.process(args.text).to_dict()]
        if args.output:
            Path(args.output).write_text(
                json.dumps(results[0], ensure_ascii=False) + "\n", encoding="utf-8"
            )
    else:
        results = pipeline.run(args.input, output_path=args.output, loader=args.loader)

    if not args.output:
        for result in results:
            sys.stdout.write(json.dumps(result, ensure_ascii=False) + "\n")


if __name__ == "__main__":
    main()
