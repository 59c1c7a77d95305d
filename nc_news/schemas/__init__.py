from .topic import Topic, TopicList
from .article import Article, ArticleList, ArticleResponse, ArticleVoteUpdate

__all__ = [
    "Topic", "TopicList",
    "Article", "ArticleList", "ArticleResponse", "ArticleVoteUpdate",
]
