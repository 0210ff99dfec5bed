# parsers/file_parser.py

import logging

from blocksplit.exceptions import ParserFinishedError
from blocksplit.observability import names
from blocksplit.observability.base import MetricsHook, NoOpMetricsHook

from .models import BlockHandlers, ParserState, Sentinels

logger = logging.getLogger(__name__)


class FileParser:
    """
    Line-driven state machine splitting input into pre, central and post blocks.

    - Sentinels are matched against the stripped line, by equality
    - A post sentinel seen before the pre sentinel skips the central block
    - Handlers are called before the buffer is cleared and the state advances
    - A finished parser rejects further use
    """

    def __init__(
        self,
        pre_sentinel: str,
        post_sentinel: str,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._sentinels = Sentinels(pre=pre_sentinel, post=post_sentinel)
        self._state = ParserState.PRE_BLOCK
        self._buffer = ""
        self.metrics_hook = metrics_hook

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def sentinels(self) -> Sentinels:
        return self._sentinels

    @property
    def content(self) -> str:
        return self._buffer

    def process_line(self, line: str, handlers: BlockHandlers) -> None:
        self._ensure_active()
        self.metrics_hook.increment(names.PARSER_LINES_TOTAL)

        if self._state is ParserState.PRE_BLOCK:
            if self._sentinels.is_pre(line):
                self._flush(handlers)
                self._advance(ParserState.CENTRAL_BLOCK)
            elif self._sentinels.is_post(line):
                self._flush(handlers)
                self._advance(ParserState.POST_BLOCK)
            else:
                self._append(line)

        elif self._state is ParserState.CENTRAL_BLOCK:
            if self._sentinels.is_post(line):
                self._flush(handlers)
                self._advance(ParserState.POST_BLOCK)
            else:
                self._append(line)

        elif self._state is ParserState.POST_BLOCK:
            self._append(line)

    def finish(self, handlers: BlockHandlers) -> None:
        self._ensure_active()
        self._flush(handlers)
        self._advance(ParserState.FINISHED)
        logger.debug("Parser finished")

    def _flush(self, handlers: BlockHandlers) -> None:
        handler = handlers.for_state(self._state)
        if handler is None:
            logger.debug("No handler for %s block, discarding", self._state.value)
            return

        handler.handle(self.content)
        self.metrics_hook.increment(
            names.PARSER_BLOCKS_FLUSHED_TOTAL, labels={"block": self._state.value}
        )

    def _append(self, line: str) -> None:
        # a blank line on an empty buffer leaves it empty
        if self._buffer:
            self._buffer += "\n"
        self._buffer += line

    def _advance(self, state: ParserState) -> None:
        logger.debug("Transition %s -> %s", self._state.value, state.value)
        self._buffer = ""
        self._state = state

    def _ensure_active(self) -> None:
        if self._state is ParserState.FINISHED:
            raise ParserFinishedError("Parser has already been finished")
