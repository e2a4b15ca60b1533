"""Pydantic schemas for the JSON article view."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

class ArticleSummaryResponse(BaseModel):
    """Schema for an article in a listing."""
    title: Optional[str] = None
    slug: Optional[str] = None
    publish_date: Optional[datetime] = None
    image: Optional[str] = None

    class Config:
        from_attributes = True

class ArticleResponse(ArticleSummaryResponse):
    """Schema for a single article with its rendered content."""
    content: str
    source_path: str

class ArticleListResponse(BaseModel):
    """Schema for the article listing."""
    articles: list[ArticleSummaryResponse]
    total: int
