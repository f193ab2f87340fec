# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Input file loading."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class InputAccessError(RuntimeError):
    """Represent a failure to open or read an input file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def load_lines(path: Path) -> list[str]:
    """Read a newline-delimited text file.

    Args:
        path: File to read.

    Returns:
        Lines in file order, without line terminators.

    Raises:
        InputAccessError: If the file cannot be opened, read or decoded.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            lines = [line.rstrip("\r\n") for line in handle]
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read input file (path={path} error={exc})")
        raise InputAccessError(path, str(exc)) from exc
    logger.debug(f"Loaded input file (path={path} lines={len(lines)})")
    return lines


def load_corpora(ru_path: Path, en_path: Path) -> tuple[list[str], list[str]]:
    """Read the Russian and English input files.

    Both files are read before anything is returned, so a failure on either
    path leaves nothing to process.
    """
    return load_lines(ru_path), load_lines(en_path)
