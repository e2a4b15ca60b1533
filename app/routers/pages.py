"""HTML article pages."""
import logging
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse
from app.services.articles import get_article, list_articles
from app.views import render_article_list, render_article_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

@router.get("/", response_class=HTMLResponse)
async def article_list_page():
    """
    Listing of all articles, most recent first.
    """
    articles = await list_articles()
    return HTMLResponse(content=render_article_list(articles))

@router.get("/{slug}", response_class=HTMLResponse)
async def article_page(slug: str):
    """
    A single article by slug.

    Unknown slugs fall through to the not-found page.
    """
    article = await get_article(slug)

    if not article:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found"
        )

    return HTMLResponse(content=render_article_page(article))
