# handlers/print_handler.py

import sys
from typing import TextIO

from .base import BlockHandler


def format_block(label: str, content: str) -> str:
    return f"=== Start: {label} ===\n{content}\n===  End: {label}  ===\n"


class PrintHandler(BlockHandler):
    """
    Writes each non-empty block between a start and an end banner.

    Empty blocks produce no output.
    """

    def __init__(self, label: str, stream: TextIO | None = None) -> None:
        self.label = label
        self._stream = stream

    def handle(self, content: str) -> None:
        if not content:
            return

        # resolved per call so redirected stdout is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(format_block(self.label, content))
