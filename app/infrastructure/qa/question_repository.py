"""
Adapter: Question repository.

Implements QuestionStore port.
Persists and retrieves questions from the PostgreSQL questions table.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from app.domain.qa.entities import Question, QuestionDetail
from app.domain.qa.identifiers import parse_identifier
from app.domain.qa.ports import QuestionStore
from app.infrastructure.qa.errors import translate_store_error

logger = logging.getLogger(__name__)

INSERT_QUESTION = text(
    """
    INSERT INTO questions (title, description)
    VALUES (:title, :description)
    RETURNING question_uuid, title, description, created_at
    """
)

DELETE_QUESTION = text("DELETE FROM questions WHERE question_uuid = :question_uuid")

SELECT_QUESTIONS = text(
    "SELECT question_uuid, title, description, created_at FROM questions"
)


def _to_detail(row: RowMapping) -> QuestionDetail:
    return QuestionDetail(
        question_uuid=str(row["question_uuid"]),
        title=row["title"],
        description=row["description"],
        created_at=str(row["created_at"]),
    )


class SqlQuestionStore(QuestionStore):
    """PostgreSQL implementation of the question store.

    Identifiers and timestamps are generated by the database and read
    back with RETURNING; nothing is generated client-side.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, question: Question) -> QuestionDetail:
        """Insert a question and return the row the database stored.

        Args:
            question: Title and description to insert.

        Returns:
            The stored question.

        Raises:
            StoreOperationError: If the insert fails.
        """
        try:
            with self._engine.begin() as conn:
                row = conn.execute(
                    INSERT_QUESTION,
                    {"title": question.title, "description": question.description},
                ).mappings().one()
        except (SQLAlchemyError, ValueError) as exc:
            raise translate_store_error(exc) from exc

        detail = _to_detail(row)
        logger.info("Created question %s.", detail.question_uuid)
        return detail

    def delete(self, question_uuid: str) -> None:
        """Delete a question and, through the foreign key, its answers.

        Args:
            question_uuid: Identifier of the question to delete.

        Raises:
            InvalidIdentifierError: If ``question_uuid`` is not a UUID.
            StoreOperationError: If the delete fails.
        """
        uuid = parse_identifier(
            question_uuid, f"Could not parse question UUID: {question_uuid}"
        )
        try:
            with self._engine.begin() as conn:
                result = conn.execute(DELETE_QUESTION, {"question_uuid": str(uuid)})
        except (SQLAlchemyError, ValueError) as exc:
            raise translate_store_error(
                exc, f"Invalid question UUID: {question_uuid}"
            ) from exc

        logger.info("Deleted question %s (%s row(s)).", uuid, result.rowcount)

    def list(self) -> list[QuestionDetail]:
        """Return every question in store order.

        Raises:
            StoreOperationError: If the query fails.
        """
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(SELECT_QUESTIONS).mappings().all()
        except (SQLAlchemyError, ValueError) as exc:
            raise translate_store_error(exc) from exc

        return [_to_detail(row) for row in rows]
