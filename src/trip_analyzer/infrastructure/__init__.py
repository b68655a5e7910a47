from .file_source import TextFileLineSource
from .file_writer import RankingFileWriter
from .logging_config import configure_logging, LayerLoggerAdapter, get_layer_logger

__all__ = [
    "TextFileLineSource",
    "RankingFileWriter",
    "configure_logging",
    "LayerLoggerAdapter",
    "get_layer_logger",
]
