# nc_news/models/__init__.py
from nc_news.models.topic import Topic
from nc_news.models.article import Article

__all__ = [
    "Topic",
    "Article",
]
