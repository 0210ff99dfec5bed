# handlers/base.py

from typing import Protocol


class BlockHandler(Protocol):
    def handle(self, content: str) -> None:
        """
        Consume the content of one flushed block.

        Requirements:
        - content is the block's lines joined by a single newline
        - empty content is a valid block and must not raise
        - failures are signalled by raising
        """
        ...
