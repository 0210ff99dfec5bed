from .config import ProcessorConfig, load_config
from .file_processor import FileProcessor

__all__ = [
    "FileProcessor",
    "ProcessorConfig",
    "load_config",
]
