# nc_news/crud/crud_topic.py

import logging
from sqlalchemy.orm import Session
from nc_news import models

logger = logging.getLogger(__name__)

def get_topics(db: Session):
    logger.info("Listing all topics")
    topics = db.query(models.Topic).order_by(models.Topic.slug).all()
    logger.info(f"Retrieved {len(topics)} topics")
    return topics
