"""Utility helpers for docx2pdfplus."""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, os.PathLike[str]]

LOGGER = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def to_path(path: PathLike) -> Path:
    """Normalize an input path to :class:`Path`."""
    return Path(path).expanduser().resolve()


def ensure_output_directory(path: Path) -> None:
    """Ensure the parent directory of ``path`` exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        end = datetime.now(tz=timezone.utc)
        elapsed = (end - start).total_seconds()
        logger.info("%s completed in %.2fs", message, elapsed)


@contextmanager
def scoped_temp_dir(prefix: str) -> Iterator[Path]:
    """Create a private working directory that is removed on exit.

    Removal is best effort: a failure is logged as a warning and never raised.
    """
    directory = Path(tempfile.mkdtemp(prefix=prefix))
    LOGGER.debug("Created working directory %s", directory)
    try:
        yield directory
    finally:
        try:
            shutil.rmtree(directory)
        except OSError as exc:
            LOGGER.warning("Failed to clean up temporary files in %s: %s", directory, exc)


def write_buffer(buffer: bytes, path: Path) -> Path:
    """Persist ``buffer`` to ``path`` and return the path."""
    path.write_bytes(buffer)
    LOGGER.debug("Wrote %d bytes to %s", len(buffer), path)
    return path
