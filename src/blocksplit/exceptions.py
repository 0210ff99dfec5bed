"""Errors raised by blocksplit."""


class BlockSplitError(Exception):
    """Base class for all blocksplit errors."""


class SourceReadError(BlockSplitError):
    """Raised when the input file cannot be opened or decoded."""


class ParserFinishedError(BlockSplitError):
    """Raised when a parser is used after it has been finished."""


class ConfigError(BlockSplitError):
    """Raised when a configuration file cannot be loaded."""
