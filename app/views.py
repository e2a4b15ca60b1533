"""HTML pages for the article library."""
from datetime import datetime
from html import escape
from typing import Optional
from app.models import ParsedArticle

LIST_TITLE = "Articles"
NOT_FOUND_TITLE = "Not found"
NOT_FOUND_MESSAGE = "Sorry, that page does not exist."
ERROR_TITLE = "Something went wrong"


def format_date(value: Optional[datetime]) -> str:
    """Format a publish date as day.month.year without zero padding."""
    if value is None:
        return ""
    return f"{value.day}.{value.month}.{value.year}"


def image_url(image: str) -> str:
    """Turn a front matter image reference into a URL for an img tag.

    Absolute URLs are left alone; anything else is rooted at the site.
    """
    if image.startswith(("http://", "https://", "//")):
        return image
    return "/" + image.lstrip("/")


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{escape(title)}</title>
    <link rel="stylesheet" href="/static/styles.css">
</head>
<body>
    <main class="container">
{body}
    </main>
</body>
</html>
"""


def _article_card(article: ParsedArticle) -> str:
    image = ""
    if article.image:
        image = f'<img class="article__image" src="{escape(image_url(article.image))}" alt="">'
    return f"""        <li class="article">
            <a class="article__link" href="/{escape(article.slug or '')}">
                {image}
                <h2 class="article__title">{escape(article.title or '')}</h2>
                <p class="article__date">{format_date(article.publish_date)}</p>
            </a>
        </li>"""


def render_article_list(articles: list[ParsedArticle], title: str = LIST_TITLE) -> str:
    """Render the listing page."""
    cards = "\n".join(_article_card(article) for article in articles)
    body = f"""        <h1>{escape(title)}</h1>
        <ul class="articles">
{cards}
        </ul>"""
    return _page(title, body)


def render_article_page(article: ParsedArticle) -> str:
    """Render a single article. Content is inserted as-is."""
    title = article.title or ""
    body = f"""        <article class="article">
            <h1>{escape(title)}</h1>
            <p class="article__date">{format_date(article.publish_date)}</p>
            <div class="article__content">
{article.content}
            </div>
        </article>
        <p><a href="/">Back to articles</a></p>"""
    return _page(title, body)


def render_error_page(title: str, message: str = "") -> str:
    """Render the not-found and failure pages."""
    body = f"""        <h1>{escape(title)}</h1>
        <p>{escape(message)}</p>
        <p><a href="/">Back to articles</a></p>"""
    return _page(title, body)
