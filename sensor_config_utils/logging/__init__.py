"""Module de logging."""

from sensor_config_utils.logging.base import Logger
from sensor_config_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
