"""Listing order and slug lookup over the article collection."""
import logging
from pathlib import Path
from typing import Iterable, Optional, Union
from app import config
from app.models import ParsedArticle
from app.services.loader import load_all

logger = logging.getLogger(__name__)


def _listing_key(article: ParsedArticle) -> tuple:
    # Dated articles first, newest first; undated ones after them
    if article.timestamp is None:
        return (1, 0.0)
    return (0, -article.timestamp)


def sorted_for_listing(collection: Iterable[ParsedArticle]) -> list[ParsedArticle]:
    """Order articles by publish date, most recent first.

    Articles without a valid date go after all dated ones. Articles with
    equal dates, and undated articles among themselves, keep their input
    order.
    """
    return sorted(collection, key=_listing_key)


def find_by_slug(collection: Iterable[ParsedArticle], slug: str) -> Optional[ParsedArticle]:
    """Return the first article whose slug matches exactly, or None."""
    for article in collection:
        if article.slug == slug:
            return article
    return None


async def list_articles(directory: Optional[Union[str, Path]] = None) -> list[ParsedArticle]:
    """Load all articles and return them in listing order."""
    if directory is None:
        directory = config.ARTICLES_DIR
    return sorted_for_listing(await load_all(directory))


async def get_article(slug: str, directory: Optional[Union[str, Path]] = None) -> Optional[ParsedArticle]:
    """Load all articles and return the one with the given slug.

    Returns:
        The matching article, or None if no article has that slug
    """
    if directory is None:
        directory = config.ARTICLES_DIR
    article = find_by_slug(await load_all(directory), slug)
    if article is None:
        logger.info(f"Article not found: {slug}")
    return article
