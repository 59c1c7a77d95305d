# nc_news/crud/__init__.py

from .crud_topic import get_topics
from .crud_article import get_articles, get_article, increment_article_votes

__all__ = [
    "get_topics",
    "get_articles", "get_article", "increment_article_votes",
]
