"""Command-line entry point for splitting a file into pre, central and post blocks."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable
from pathlib import Path

from blocksplit.exceptions import BlockSplitError
from blocksplit.processing.config import ProcessorConfig, load_config
from blocksplit.processing.file_processor import FileProcessor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create a reusable argument parser for scripts and tests."""
    parser = argparse.ArgumentParser(
        prog="blocksplit",
        description="Print the pre, central and post blocks of a text file.",
    )
    parser.add_argument("path", type=Path, help="Text file to split.")
    parser.add_argument(
        "--pre",
        dest="pre_sentinel",
        help="Line marking the end of the pre block (default: '--- PRE ---').",
    )
    parser.add_argument(
        "--post",
        dest="post_sentinel",
        help="Line marking the start of the post block (default: '--- POST ---').",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML file with sentinels, labels and encoding.",
    )
    parser.add_argument("--encoding", help="Input file encoding (default: utf-8).")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity, written to stderr.",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> ProcessorConfig:
    config = load_config(args.config) if args.config else ProcessorConfig()
    overrides = {
        key: value
        for key, value in (
            ("pre_sentinel", args.pre_sentinel),
            ("post_sentinel", args.post_sentinel),
            ("encoding", args.encoding),
        )
        if value is not None
    }
    return config.model_copy(update=overrides) if overrides else config


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point invoked by the `blocksplit` console script."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
    )

    try:
        config = _resolve_config(args)
        processor = FileProcessor.from_config(config)
        processor.process_file(
            args.path,
            config.pre_sentinel,
            config.post_sentinel,
            encoding=config.encoding,
        )
    except BlockSplitError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
