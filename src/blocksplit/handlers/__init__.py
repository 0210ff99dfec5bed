from .base import BlockHandler
from .capture import CaptureHandler
from .print_handler import PrintHandler, format_block

__all__ = [
    "BlockHandler",
    "CaptureHandler",
    "PrintHandler",
    "format_block",
]
