# nc_news/db/session.py

import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from nc_news.core.config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

if settings.is_sqlite:
    # One shared connection, so every request thread sees the same in-memory database
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        echo=settings.SQL_ECHO,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    engine = create_engine(SQLALCHEMY_DATABASE_URL, echo=settings.SQL_ECHO, pool_pre_ping=True)


@event.listens_for(engine, "connect")
def connect(dbapi_connection, connection_record):
    logger.info("Database connection established")


@event.listens_for(engine, "close")
def close(dbapi_connection, connection_record):
    logger.info("Database connection closed")


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
