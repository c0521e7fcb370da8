"""Module de logging."""

from wp_climate.logging.base import Logger
from wp_climate.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
