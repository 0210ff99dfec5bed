from .file_parser import FileParser
from .models import BlockHandlers, ParserState, Sentinels

__all__ = [
    "BlockHandlers",
    "FileParser",
    "ParserState",
    "Sentinels",
]
