# nc_news/crud/crud_article.py
import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from nc_news.models.article import Article

logger = logging.getLogger(__name__)

def get_articles(db: Session) -> List[Article]:
    logger.info("Listing all articles")
    articles = db.query(Article).order_by(Article.article_id).all()
    logger.info(f"Retrieved {len(articles)} articles")
    return articles

def get_article(db: Session, article_id: int) -> Optional[Article]:
    logger.info(f"Fetching article with ID: {article_id}")
    article = db.query(Article).filter(Article.article_id == article_id).first()
    if article is None:
        logger.warning(f"Article with ID {article_id} not found")
    return article

def increment_article_votes(db: Session, article_id: int, inc_votes: int) -> Optional[Article]:
    """
    Add inc_votes to the article's vote count and return the updated row.

    The increment is a single UPDATE evaluated by the database, so concurrent
    patches to the same article are applied one after the other.
    Returns None when no article has the given id.
    """
    logger.info(f"Applying {inc_votes:+d} votes to article {article_id}")
    try:
        updated = db.query(Article)\
                    .filter(Article.article_id == article_id)\
                    .update({Article.votes: Article.votes + inc_votes}, synchronize_session=False)
        if not updated:
            db.rollback()
            logger.warning(f"Article with ID {article_id} not found, no votes applied")
            return None
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error updating votes for article {article_id}: {str(e)}")
        db.rollback()
        raise
    return get_article(db, article_id)
