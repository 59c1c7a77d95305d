import os

# Must be set before nc_news.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from nc_news import models
from nc_news.db.base import Base
from nc_news.db.session import engine, SessionLocal
from nc_news.main import app
from tests.data import TOPICS, ARTICLES


@pytest.fixture(autouse=True)
def seed_database():
    """Rebuild and reseed the in-memory database before every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        db.add_all([models.Topic(**topic) for topic in TOPICS])
        db.flush()
        db.add_all([
            models.Article(article_id=article_id, **article)
            for article_id, article in enumerate(ARTICLES, start=1)
        ])
        db.commit()
    finally:
        db.close()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
