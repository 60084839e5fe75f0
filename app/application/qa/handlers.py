"""
Request handlers for questions and answers.

Input: a domain value (or identifier) and a store port.
Output: the store's result, unchanged.
Failure cases: BadRequestError, only when creating an answer with an
invalid question reference; InternalError for every other store failure.

Every StoreError is logged in full before it is translated, so the
generic 500 message never costs diagnostic information.
"""

import logging

from app.application.qa.errors import BadRequestError, InternalError
from app.domain.qa.entities import (
    Answer,
    AnswerDetail,
    AnswerId,
    Question,
    QuestionDetail,
    QuestionId,
)
from app.domain.qa.errors import InvalidIdentifierError, StoreError
from app.domain.qa.ports import AnswerStore, QuestionStore

logger = logging.getLogger(__name__)


def _log_store_error(operation: str, exc: StoreError) -> None:
    logger.error("%s failed: %r", operation, exc, exc_info=exc)


# ── Questions ────────────────────────────────────────────────────


def create_question(
    question: Question, questions_store: QuestionStore
) -> QuestionDetail:
    """Create a question.

    Args:
        question: Title and description supplied by the caller.
        questions_store: Store the question is persisted in.

    Returns:
        The stored question with its identifier and timestamp.

    Raises:
        InternalError: On any store failure.
    """
    try:
        return questions_store.create(question)
    except StoreError as exc:
        _log_store_error("create_question", exc)
        raise InternalError() from exc


def read_questions(questions_store: QuestionStore) -> list[QuestionDetail]:
    """Return every stored question.

    Raises:
        InternalError: On any store failure.
    """
    try:
        return questions_store.list()
    except StoreError as exc:
        _log_store_error("read_questions", exc)
        raise InternalError() from exc


def delete_question(question_id: QuestionId, questions_store: QuestionStore) -> None:
    """Delete a question. A malformed identifier is reported as InternalError."""
    try:
        questions_store.delete(question_id.question_uuid)
    except StoreError as exc:
        _log_store_error("delete_question", exc)
        raise InternalError() from exc


# ── Answers ──────────────────────────────────────────────────────


def create_answer(answer: Answer, answers_store: AnswerStore) -> AnswerDetail:
    """Create an answer to an existing question.

    This is the one handler that surfaces a client error: an answer
    whose question reference is malformed or unknown is a bad request.

    Args:
        answer: The question reference and content supplied by the caller.
        answers_store: Store the answer is persisted in.

    Returns:
        The stored answer with its identifier and timestamp.

    Raises:
        BadRequestError: If the question reference is invalid.
        InternalError: On any other store failure.
    """
    try:
        return answers_store.create(answer)
    except InvalidIdentifierError as exc:
        _log_store_error("create_answer", exc)
        raise BadRequestError(exc.message) from exc
    except StoreError as exc:
        _log_store_error("create_answer", exc)
        raise InternalError() from exc


def read_answers(
    question_id: QuestionId, answers_store: AnswerStore
) -> list[AnswerDetail]:
    """Return the answers of one question.

    Raises:
        InternalError: On any store failure, including a malformed identifier.
    """
    try:
        return answers_store.list(question_id.question_uuid)
    except StoreError as exc:
        _log_store_error("read_answers", exc)
        raise InternalError() from exc


def delete_answer(answer_id: AnswerId, answers_store: AnswerStore) -> None:
    """Delete an answer. A malformed identifier is reported as InternalError."""
    try:
        answers_store.delete(answer_id.answer_uuid)
    except StoreError as exc:
        _log_store_error("delete_answer", exc)
        raise InternalError() from exc
