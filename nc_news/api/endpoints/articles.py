# nc_news/api/endpoints/articles.py

import logging
import re
from typing import Any, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nc_news import crud, schemas
from nc_news.api import deps
from nc_news.core.errors import ArticleNotFoundError, InvalidTypeError, MissingFieldError

logger = logging.getLogger(__name__)

router = APIRouter()

_INTEGER_RE = re.compile(r"-?[0-9]+")

# Bounds of the articles table's Integer columns
INTEGER_MIN = -2 ** 31
INTEGER_MAX = 2 ** 31 - 1


def fits_integer_column(value: int) -> bool:
    return INTEGER_MIN <= value <= INTEGER_MAX


def parse_article_id(article_id: str) -> int:
    if not _INTEGER_RE.fullmatch(article_id):
        logger.warning(f"Rejected non-numeric article_id: {article_id!r}")
        raise InvalidTypeError()
    return int(article_id)


def parse_inc_votes(inc_votes: Any) -> int:
    # bool is an int subclass, but true/false is not a vote count
    if isinstance(inc_votes, bool):
        raise InvalidTypeError()
    if isinstance(inc_votes, float) and inc_votes.is_integer():
        inc_votes = int(inc_votes)
    if isinstance(inc_votes, int) and fits_integer_column(inc_votes):
        return inc_votes
    logger.warning(f"Rejected inc_votes: {inc_votes!r}")
    raise InvalidTypeError()


@router.get("", response_model=schemas.ArticleList)
def read_articles(db: Session = Depends(deps.get_db)):
    logger.info("Received request to list all articles")
    articles = crud.get_articles(db)
    return {"articles": articles}


@router.get("/{article_id}", response_model=schemas.ArticleResponse)
def read_article(article_id: str, db: Session = Depends(deps.get_db)):
    logger.info(f"Fetching article with ID: {article_id}")
    parsed_id = parse_article_id(article_id)
    article = None
    if fits_integer_column(parsed_id):
        article = crud.get_article(db, article_id=parsed_id)
    if article is None:
        raise ArticleNotFoundError(article_id)
    return {"article": article}


@router.patch("/{article_id}", response_model=schemas.ArticleResponse)
def update_article_votes(
    article_id: str,
    vote_update: Optional[schemas.ArticleVoteUpdate] = None,
    db: Session = Depends(deps.get_db)
):
    """
    Increment (or, with a negative inc_votes, decrement) an article's votes.

    A missing inc_votes is reported before the id is looked at.
    """
    logger.info(f"Received vote update for article {article_id}: {vote_update}")
    if vote_update is None or vote_update.inc_votes is None:
        raise MissingFieldError()
    parsed_id = parse_article_id(article_id)
    inc_votes = parse_inc_votes(vote_update.inc_votes)
    article = None
    if fits_integer_column(parsed_id):
        article = crud.increment_article_votes(db, article_id=parsed_id, inc_votes=inc_votes)
    if article is None:
        raise ArticleNotFoundError(article_id)
    return {"article": article}
