"""Article JSON API endpoints."""
import logging
from fastapi import APIRouter, HTTPException, status
from app.errors import ArticleError
from app.schemas import ArticleListResponse, ArticleResponse, ArticleSummaryResponse
from app.services.articles import get_article, list_articles

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["articles"])

@router.get("", response_model=ArticleListResponse)
async def list_articles_json():
    """
    Get all articles, most recent first.
    """
    try:
        articles = await list_articles()
    except ArticleError as e:
        logger.error(f"Error listing articles: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error listing articles"
        )

    return ArticleListResponse(
        articles=[ArticleSummaryResponse.model_validate(article) for article in articles],
        total=len(articles)
    )

@router.get("/{slug}", response_model=ArticleResponse)
async def get_article_json(slug: str):
    """
    Get a specific article by slug, including its rendered HTML.
    """
    try:
        article = await get_article(slug)
    except ArticleError as e:
        logger.error(f"Error getting article {slug}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error getting article"
        )

    if not article:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found"
        )

    return ArticleResponse.model_validate(article)
