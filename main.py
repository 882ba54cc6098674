#!/usr/bin/env python
"""CLI for the Rhetoric Trends statement pipeline."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from rhetoric_trends.config import create_from_config, get_default_config_path, load_config
from rhetoric_trends.corpus import load_corpus
from rhetoric_trends.export import write_result

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    input: Path
    config: Path
    output: Path | None = None
    all_statements: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("input")
    @classmethod
    def input_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Input file not found: {v}")
        return v

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def run(args: CLIArgs) -> None:
    """Execute the pipeline with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    pipeline, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
        relevance_only_override=False if args.all_statements else None,
    )
    articles = load_corpus(args.input)

    logger.info(f"Config: {args.config}")

    result = pipeline.run(articles)

    print(f"\nEnriched {len(result.enriched)} statements from {len(articles)} articles")
    logger.info(f"US-relevant: {result.relevant_count}/{len(result.enriched)}")
    logger.info(f"Aggregated: {len(result.statements)}")

    logger.info("\n--- Monthly Sentiment ---")
    for bucket in result.monthly:
        logger.info(
            f"{bucket.label}: n={bucket.total} sentiment={bucket.sentiment_index:+.2f} "
            f"hostility={bucket.hostility_rate}% cooperation={bucket.cooperation_rate}%"
        )

    if result.quarterly:
        logger.info("\n--- Quarterly Sentiment ---")
        for bucket in result.quarterly:
            logger.info(
                f"{bucket.label}: n={bucket.total} sentiment={bucket.sentiment_index:+.2f}"
            )

    if args.output:
        path = write_result(result, args.output)
        logger.info(f"\nResults written to: {path}")

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Classify extracted statements and aggregate rhetoric trends."
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Path to JSON corpus of articles and their statements",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write enriched statements and buckets to this JSON file",
    )
    parser.add_argument(
        "--all",
        dest="all_statements",
        action="store_true",
        default=False,
        help="Aggregate all statements, not only US-relevant ones",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable pipeline run logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            input=ns.input,
            config=config_path,
            output=ns.output,
            all_statements=ns.all_statements,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        run(args)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
