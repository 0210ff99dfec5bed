# src/blocksplit/processing/file_processor.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from time import monotonic

from blocksplit.exceptions import SourceReadError
from blocksplit.handlers.print_handler import PrintHandler
from blocksplit.observability import names
from blocksplit.observability.base import MetricsHook, NoOpMetricsHook
from blocksplit.parsers.file_parser import FileParser
from blocksplit.parsers.models import BlockHandlers

from .config import ProcessorConfig

logger = logging.getLogger(__name__)


class FileProcessor:
    """
    Drives a FileParser over a file or any iterable of lines.

    A fresh parser is created for every call and finished once all
    lines are consumed, so a trailing block without a closing sentinel
    is still delivered.
    """

    def __init__(
        self,
        handlers: BlockHandlers | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if handlers is None:
            handlers = BlockHandlers(
                pre=PrintHandler("PRE-BLOCK"),
                central=PrintHandler("CENTRAL-BLOCK"),
                post=PrintHandler("POST-BLOCK"),
            )
        self.handlers = handlers
        self.metrics_hook = metrics_hook

    @classmethod
    def from_config(
        cls,
        config: ProcessorConfig,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> FileProcessor:
        handlers = BlockHandlers(
            pre=PrintHandler(config.pre_label),
            central=PrintHandler(config.central_label),
            post=PrintHandler(config.post_label),
        )
        return cls(handlers, metrics_hook=metrics_hook)

    def process_lines(
        self, lines: Iterable[str], pre_sentinel: str, post_sentinel: str
    ) -> None:
        parser = FileParser(
            pre_sentinel, post_sentinel, metrics_hook=self.metrics_hook
        )
        for line in lines:
            parser.process_line(line, self.handlers)
        parser.finish(self.handlers)

    def process_file(
        self,
        path: str | Path,
        pre_sentinel: str,
        post_sentinel: str,
        encoding: str = "utf-8",
    ) -> None:
        logger.info("Processing file: %s", path)
        start = monotonic()
        try:
            # lines end only at \n; a lone \r stays part of the line
            f = open(path, encoding=encoding, newline="\n")
        except (OSError, LookupError) as exc:
            logger.error("Cannot open file: %s", path)
            self.metrics_hook.increment(names.FILE_PROCESSING_ERRORS_TOTAL)
            raise SourceReadError(f"Cannot open file '{path}': {exc}") from exc

        with f:
            try:
                self.process_lines(
                    self._read_lines(f, path), pre_sentinel, post_sentinel
                )
            except SourceReadError:
                raise
            except Exception:
                logger.error("Processing failed: %s", path)
                self.metrics_hook.increment(names.FILE_PROCESSING_ERRORS_TOTAL)
                raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.FILE_PROCESSING_DURATION, elapsed_ms)
        logger.info("Finished processing %s in %.1f ms", path, elapsed_ms)

    def _read_lines(self, f: Iterable[str], path: str | Path) -> Iterator[str]:
        try:
            for line in f:
                if line.endswith("\n"):
                    line = line[:-1].removesuffix("\r")
                yield line
        except UnicodeDecodeError as exc:
            logger.error("Cannot decode file: %s", path)
            self.metrics_hook.increment(names.FILE_PROCESSING_ERRORS_TOTAL)
            raise SourceReadError(f"Cannot decode file '{path}': {exc}") from exc
