# Import all the models, so that Base has them before being
# imported by main for create_all

from nc_news.db.base_class import Base
from nc_news.models.topic import Topic
from nc_news.models.article import Article
