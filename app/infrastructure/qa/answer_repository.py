"""
Adapter: Answer repository.

Implements AnswerStore port.
Persists and retrieves answers from the PostgreSQL answers table.
An answer whose question does not exist is rejected by the foreign
key and reported as InvalidIdentifierError.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from app.domain.qa.entities import Answer, AnswerDetail
from app.domain.qa.identifiers import parse_identifier
from app.domain.qa.ports import AnswerStore
from app.infrastructure.qa.errors import translate_store_error

logger = logging.getLogger(__name__)

INSERT_ANSWER = text(
    """
    INSERT INTO answers (question_uuid, content)
    VALUES (:question_uuid, :content)
    RETURNING answer_uuid, question_uuid, content, created_at
    """
)

DELETE_ANSWER = text("DELETE FROM answers WHERE answer_uuid = :answer_uuid")

SELECT_ANSWERS = text(
    """
    SELECT answer_uuid, question_uuid, content, created_at
    FROM answers
    WHERE question_uuid = :question_uuid
    """
)


def _to_detail(row: RowMapping) -> AnswerDetail:
    return AnswerDetail(
        answer_uuid=str(row["answer_uuid"]),
        question_uuid=str(row["question_uuid"]),
        content=row["content"],
        created_at=str(row["created_at"]),
    )


class SqlAnswerStore(AnswerStore):
    """PostgreSQL implementation of the answer store."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, answer: Answer) -> AnswerDetail:
        """Insert an answer and return the row the database stored.

        Args:
            answer: Question reference and content to insert.

        Returns:
            The stored answer.

        Raises:
            InvalidIdentifierError: If ``answer.question_uuid`` is not a UUID
                or no question has that identifier.
            StoreOperationError: If the insert fails for any other reason.
        """
        uuid = parse_identifier(
            answer.question_uuid,
            f"Could not parse answer UUID: {answer.question_uuid}",
        )
        try:
            with self._engine.begin() as conn:
                row = conn.execute(
                    INSERT_ANSWER,
                    {"question_uuid": str(uuid), "content": answer.content},
                ).mappings().one()
        except (SQLAlchemyError, ValueError) as exc:
            raise translate_store_error(
                exc, f"Invalid question UUID: {answer.question_uuid}"
            ) from exc

        detail = _to_detail(row)
        logger.info(
            "Created answer %s for question %s.",
            detail.answer_uuid,
            detail.question_uuid,
        )
        return detail

    def delete(self, answer_uuid: str) -> None:
        """Delete an answer. Deleting a missing answer is not an error.

        Raises:
            InvalidIdentifierError: If ``answer_uuid`` is not a UUID.
            StoreOperationError: If the delete fails.
        """
        uuid = parse_identifier(
            answer_uuid, f"Could not parse answer UUID: {answer_uuid}"
        )
        try:
            with self._engine.begin() as conn:
                result = conn.execute(DELETE_ANSWER, {"answer_uuid": str(uuid)})
        except (SQLAlchemyError, ValueError) as exc:
            raise translate_store_error(
                exc, f"Invalid answer UUID: {answer_uuid}"
            ) from exc

        logger.info("Deleted answer %s (%s row(s)).", uuid, result.rowcount)

    def list(self, question_uuid: str) -> list[AnswerDetail]:
        """Return the answers of one question in store order.

        Raises:
            InvalidIdentifierError: If ``question_uuid`` is not a UUID.
            StoreOperationError: If the query fails.
        """
        uuid = parse_identifier(
            question_uuid, f"Could not parse question with UUID: {question_uuid}"
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    SELECT_ANSWERS, {"question_uuid": str(uuid)}
                ).mappings().all()
        except (SQLAlchemyError, ValueError) as exc:
            raise translate_store_error(
                exc, f"Invalid question UUID: {question_uuid}"
            ) from exc

        return [_to_detail(row) for row in rows]
