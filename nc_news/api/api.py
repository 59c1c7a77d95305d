# nc_news/api/api.py

import logging
from fastapi import APIRouter
from nc_news.api.endpoints import topics, articles

logger = logging.getLogger(__name__)

api_router = APIRouter()

api_router.include_router(topics.router, prefix="/topics", tags=["topics"])
api_router.include_router(articles.router, prefix="/articles", tags=["articles"])

logger.info(f"API routes configured: {[getattr(route, 'path', None) for route in api_router.routes]}")
