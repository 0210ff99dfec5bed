# handlers/capture.py

from .base import BlockHandler
from .print_handler import format_block


class CaptureHandler(BlockHandler):
    """
    Keeps every delivered block in memory, empty ones included.
    """

    def __init__(self, label: str | None = None) -> None:
        self.label = label
        self.blocks: list[str] = []

    def handle(self, content: str) -> None:
        self.blocks.append(content)

    @property
    def rendered(self) -> list[str]:
        label = self.label or "BLOCK"
        return [format_block(label, content) for content in self.blocks]
