# nc_news/schemas/article.py

from datetime import datetime, timezone
from typing import Any, List, Optional
from pydantic import BaseModel, field_serializer


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as UTC with millisecond precision, e.g. 2020-07-09T20:11:00.000Z.

    Naive values (SQLite drops the offset) are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Article(BaseModel):
    """Schema for a complete article representation"""
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int = 0

    @field_serializer("created_at")
    def serialize_created_at(self, created_at: datetime) -> str:
        return format_timestamp(created_at)

    class Config:
        from_attributes = True

class ArticleList(BaseModel):
    articles: List[Article]

class ArticleResponse(BaseModel):
    article: Article

class ArticleVoteUpdate(BaseModel):
    """Body of a vote patch. inc_votes is type-checked by the endpoint, not here"""
    inc_votes: Optional[Any] = None
