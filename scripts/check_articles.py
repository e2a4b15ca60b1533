#!/usr/bin/env python3
"""
Script to load every article and print the listing.

Parses the whole collection exactly as the web app does, so a malformed
article shows up here before it breaks the listing page.

Usage:
    python scripts/check_articles.py [--directory DIR]
"""
import sys
import argparse
import asyncio
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import ARTICLES_DIR
from app.errors import ArticleError
from app.services.articles import list_articles
from app.utils.logger import setup_script_logger
from app.views import format_date

logger = setup_script_logger("check_articles")

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Load all Markdown articles and print them in listing order'
    )
    parser.add_argument(
        '--directory',
        type=str,
        default=None,
        help=f'Directory containing article files (default: {ARTICLES_DIR})'
    )

    args = parser.parse_args(argv)

    directory = Path(args.directory) if args.directory else ARTICLES_DIR

    if not directory.is_dir():
        logger.error(f"Directory {directory} does not exist")
        return 1

    logger.info(f"Checking articles in {directory}...")

    try:
        articles = asyncio.run(list_articles(directory))
    except ArticleError as e:
        logger.error(f"Error loading articles: {e}")
        return 1

    for article in articles:
        print(f"{format_date(article.publish_date):<12}{article.slug or '-':<30}{article.title or ''}")

    logger.info(f"Loaded {len(articles)} articles")
    return 0

if __name__ == '__main__':
    sys.exit(main())
