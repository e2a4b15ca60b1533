"""Reads article source files from disk."""
import asyncio
import logging
import os
from pathlib import Path
from typing import Union
from app import config
from app.errors import ArticleIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _scan(directory: Path, extension: str) -> list[Path]:
    with os.scandir(directory) as entries:
        return [
            Path(entry.path)
            for entry in entries
            if entry.is_file() and os.path.splitext(entry.name)[1] == extension
        ]


async def list_candidates(directory: PathLike) -> list[Path]:
    """List article files in a directory.

    Entries are returned in directory-listing order, which is not
    necessarily alphabetical. Only regular files whose extension matches
    ARTICLE_EXTENSION are kept.

    Args:
        directory: Directory holding the article sources

    Returns:
        Paths of the candidate article files

    Raises:
        ArticleIOError: If the directory is missing or unreadable
    """
    directory = Path(directory)
    try:
        candidates = await asyncio.to_thread(_scan, directory, config.ARTICLE_EXTENSION)
    except OSError as e:
        raise ArticleIOError(f"Cannot list article directory {directory}: {e}", str(directory)) from e

    logger.debug(f"Found {len(candidates)} article files in {directory}")
    return candidates


async def read_raw(path: PathLike) -> bytes:
    """Read the full contents of an article file.

    Raises:
        ArticleIOError: If the file is missing or unreadable, including a
            file removed after it was listed
    """
    path = Path(path)
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise ArticleIOError(f"Cannot read article file {path}: {e}", str(path)) from e
