# parsers/models.py

from dataclasses import dataclass
from enum import Enum

from blocksplit.handlers.base import BlockHandler


class ParserState(Enum):
    PRE_BLOCK = "pre"
    CENTRAL_BLOCK = "central"
    POST_BLOCK = "post"
    FINISHED = "finished"


@dataclass(frozen=True)
class Sentinels:
    pre: str
    post: str

    def is_pre(self, line: str) -> bool:
        return line.strip() == self.pre

    def is_post(self, line: str) -> bool:
        return line.strip() == self.post


@dataclass(frozen=True)
class BlockHandlers:
    pre: BlockHandler
    central: BlockHandler | None = None
    post: BlockHandler | None = None

    def for_state(self, state: ParserState) -> BlockHandler | None:
        if state is ParserState.PRE_BLOCK:
            return self.pre
        if state is ParserState.CENTRAL_BLOCK:
            return self.central
        if state is ParserState.POST_BLOCK:
            return self.post
        return None
