"""Errors raised while loading articles.

A missing article is not an error: lookups return None and the web layer
turns that into a 404.
"""
from typing import Optional


class ArticleError(Exception):
    """Base class for failures while loading the article collection."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ArticleIOError(ArticleError):
    """The article directory or an article file could not be read."""


class ArticleParseError(ArticleError):
    """An article file does not have a well-formed front matter block."""
