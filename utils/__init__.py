# utils/__init__.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level
from .model_reader import ModelFileError, read_model_file

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "ModelFileError",
    "read_model_file",
]
