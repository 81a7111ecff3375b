# utils/model_reader.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Galileo model file reader

from pathlib import Path
from typing import Union

from utils.logger import get_logger


class ModelFileError(Exception):
    """Exception raised when a model file cannot be read or is empty."""

    pass


def read_model_file(filepath: Union[str, Path]) -> str:
    """Read the text of a Galileo model file.

    Galileo models are conventionally stored with a ``.dft`` extension, but
    any UTF-8 text file is accepted.

    Args:
        filepath: Path to the model file

    Returns:
        The file content, unmodified

    Raises:
        ModelFileError: If the file is missing, unreadable, not UTF-8 or
            contains only whitespace
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise ModelFileError(f"Model file not found: {filepath}")
    if not path.is_file():
        raise ModelFileError(f"Model path is not a file: {filepath}")

    logger.debug(f"Reading model file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            content = file.read()
    except UnicodeDecodeError as e:
        raise ModelFileError(f"Model file is not valid UTF-8: {filepath}") from e
    except OSError as e:
        raise ModelFileError(f"Cannot open model file: {filepath}: {e}") from e

    if not content.strip():
        raise ModelFileError(f"Model file is empty: {filepath}")

    logger.debug(f"Read {len(content)} characters from {path.name}")
    return content
