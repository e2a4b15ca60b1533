"""Loads the whole article collection from disk."""
import asyncio
import logging
from pathlib import Path
from typing import Union
from app.errors import ArticleError
from app.models import ParsedArticle
from app.services import parser, reader

logger = logging.getLogger(__name__)


async def load_article(path: Path) -> ParsedArticle:
    """Read and parse a single article file."""
    raw = await reader.read_raw(path)
    return parser.parse(raw, path)


async def load_all(directory: Union[str, Path]) -> list[ParsedArticle]:
    """Read and parse every article file in a directory.

    Files are read concurrently and the collection is rebuilt on every call,
    so edits on disk show up without a restart. Loading is all-or-nothing:
    the first file that cannot be read or parsed fails the whole call and
    no partial collection is returned.

    Args:
        directory: Directory holding the article sources

    Returns:
        Parsed articles in aggregation order

    Raises:
        ArticleIOError: If the directory or any file cannot be read
        ArticleParseError: If any file has malformed front matter
    """
    try:
        paths = await reader.list_candidates(directory)
        articles = await asyncio.gather(*(load_article(path) for path in paths))
    except ArticleError as e:
        logger.error(f"Error loading articles from {directory}: {e}")
        raise

    logger.debug(f"Loaded {len(articles)} articles from {directory}")
    return list(articles)
