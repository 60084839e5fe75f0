"""
Shared pytest fixtures and store test doubles.

The scripted stores answer each call with the next queued response
for that operation: a value is returned, an exception is raised.
Calling an operation with nothing queued fails the test.
"""

import threading
from collections import deque

import pytest

from app.core.config import Settings
from app.domain.qa.entities import Answer, AnswerDetail, Question, QuestionDetail
from app.domain.qa.ports import AnswerStore, QuestionStore
from app.main import create_app


class _Script:
    """One-shot responses per operation, guarded for concurrent callers."""

    def __init__(self) -> None:
        self._responses: dict[str, deque] = {}
        self._lock = threading.Lock()
        self.calls: list[tuple] = []

    def push(self, operation: str, response) -> None:
        with self._lock:
            self._responses.setdefault(operation, deque()).append(response)

    def take(self, operation: str, *args):
        with self._lock:
            self.calls.append((operation, *args))
            queue = self._responses.get(operation)
            if not queue:
                raise AssertionError(f"no scripted response for {operation}")
            response = queue.popleft()
        if isinstance(response, BaseException):
            raise response
        return response


class ScriptedQuestionStore(QuestionStore):
    def __init__(self) -> None:
        self.script = _Script()

    def create(self, question: Question) -> QuestionDetail:
        return self.script.take("create", question)

    def delete(self, question_uuid: str) -> None:
        return self.script.take("delete", question_uuid)

    def list(self) -> list[QuestionDetail]:
        return self.script.take("list")


class ScriptedAnswerStore(AnswerStore):
    def __init__(self) -> None:
        self.script = _Script()

    def create(self, answer: Answer) -> AnswerDetail:
        return self.script.take("create", answer)

    def delete(self, answer_uuid: str) -> None:
        return self.script.take("delete", answer_uuid)

    def list(self, question_uuid: str) -> list[AnswerDetail]:
        return self.script.take("list", question_uuid)


@pytest.fixture
def questions_store() -> ScriptedQuestionStore:
    return ScriptedQuestionStore()


@pytest.fixture
def answers_store() -> ScriptedAnswerStore:
    return ScriptedAnswerStore()


@pytest.fixture
def memory_settings() -> Settings:
    """Settings for an app on in-memory stores with rate limiting off."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def memory_app(memory_settings):
    return create_app(memory_settings)
