"""
Database engine and schema.

The engine (and its connection pool) is built once at startup and
handed to the stores; nothing looks it up globally.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from app.core.config import Settings

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS questions (
        question_uuid UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        title VARCHAR(255) NOT NULL,
        description VARCHAR(255) NOT NULL,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS answers (
        answer_uuid UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        question_uuid UUID NOT NULL REFERENCES questions ON DELETE CASCADE,
        content TEXT NOT NULL,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
)


def create_db_engine(settings: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings.

    The pool never holds more than ``settings.max_connections`` connections;
    callers beyond that queue until one is returned.
    """
    return create_engine(
        settings.get_database_url(),
        pool_size=settings.max_connections,
        max_overflow=0,
        pool_pre_ping=True,
    )


def init_schema(engine: Engine) -> None:
    """Create the questions and answers tables if they do not exist."""
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.execute(text(statement))
    logger.info("Database schema ready.")
