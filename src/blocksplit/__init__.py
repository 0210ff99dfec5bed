# Errors
from .exceptions import (
    BlockSplitError,
    ConfigError,
    ParserFinishedError,
    SourceReadError,
)

# Handlers
from .handlers import BlockHandler, CaptureHandler, PrintHandler, format_block

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import BlockHandlers, FileParser, ParserState, Sentinels

# Processing
from .processing import FileProcessor, ProcessorConfig, load_config

__all__ = [
    # Errors
    "BlockSplitError",
    "ConfigError",
    "ParserFinishedError",
    "SourceReadError",
    # Handlers
    "BlockHandler",
    "CaptureHandler",
    "PrintHandler",
    "format_block",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "BlockHandlers",
    "FileParser",
    "ParserState",
    "Sentinels",
    # Processing
    "FileProcessor",
    "ProcessorConfig",
    "load_config",
]
