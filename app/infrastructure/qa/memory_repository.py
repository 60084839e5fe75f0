"""
Adapter: In-memory question and answer stores.

Implements QuestionStore and AnswerStore ports without a database,
for local development (STORAGE_BACKEND=memory) and tests.
Both stores share one InMemoryQaDatabase so answers can be checked
against existing questions the way the foreign key does in PostgreSQL.
"""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict

from app.domain.qa.entities import Answer, AnswerDetail, Question, QuestionDetail
from app.domain.qa.errors import InvalidIdentifierError
from app.domain.qa.identifiers import parse_identifier
from app.domain.qa.ports import AnswerStore, QuestionStore


def _now() -> str:
    return str(datetime.now(timezone.utc).replace(tzinfo=None))


@dataclass
class InMemoryQaDatabase:
    """Question and answer tables, keyed by identifier, in insertion order."""

    questions: Dict[uuid.UUID, QuestionDetail] = field(default_factory=dict)
    answers: Dict[uuid.UUID, AnswerDetail] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock)

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        with self.lock:
            self.questions.clear()
            self.answers.clear()


class InMemoryQuestionStore(QuestionStore):
    """Question store backed by an InMemoryQaDatabase."""

    def __init__(self, db: InMemoryQaDatabase) -> None:
        self._db = db

    def create(self, question: Question) -> QuestionDetail:
        question_uuid = uuid.uuid4()
        detail = QuestionDetail(
            question_uuid=str(question_uuid),
            title=question.title,
            description=question.description,
            created_at=_now(),
        )
        with self._db.lock:
            self._db.questions[question_uuid] = detail
        return detail

    def delete(self, question_uuid: str) -> None:
        key = parse_identifier(
            question_uuid, f"Could not parse question UUID: {question_uuid}"
        )
        with self._db.lock:
            if self._db.questions.pop(key, None) is None:
                return
            # ON DELETE CASCADE
            orphaned = [
                answer_uuid
                for answer_uuid, answer in self._db.answers.items()
                if answer.question_uuid == str(key)
            ]
            for answer_uuid in orphaned:
                del self._db.answers[answer_uuid]

    def list(self) -> list[QuestionDetail]:
        with self._db.lock:
            return list(self._db.questions.values())


class InMemoryAnswerStore(AnswerStore):
    """Answer store backed by an InMemoryQaDatabase."""

    def __init__(self, db: InMemoryQaDatabase) -> None:
        self._db = db

    def create(self, answer: Answer) -> AnswerDetail:
        question_key = parse_identifier(
            answer.question_uuid,
            f"Could not parse answer UUID: {answer.question_uuid}",
        )
        answer_uuid = uuid.uuid4()
        with self._db.lock:
            if question_key not in self._db.questions:
                raise InvalidIdentifierError(
                    f"Invalid question UUID: {answer.question_uuid}"
                )
            detail = AnswerDetail(
                answer_uuid=str(answer_uuid),
                question_uuid=str(question_key),
                content=answer.content,
                created_at=_now(),
            )
            self._db.answers[answer_uuid] = detail
        return detail

    def delete(self, answer_uuid: str) -> None:
        key = parse_identifier(
            answer_uuid, f"Could not parse answer UUID: {answer_uuid}"
        )
        with self._db.lock:
            self._db.answers.pop(key, None)

    def list(self, question_uuid: str) -> list[AnswerDetail]:
        key = parse_identifier(
            question_uuid, f"Could not parse question with UUID: {question_uuid}"
        )
        with self._db.lock:
            return [
                answer
                for answer in self._db.answers.values()
                if answer.question_uuid == str(key)
            ]
