"""
Domain entities for the Q&A bounded context.

Inputs (Question, Answer) are transient values supplied by callers.
Detail records are issued by a store on creation and never mutated.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Question:
    """A question as submitted by a caller, before the store assigns an id."""

    title: str
    description: str


@dataclass(frozen=True)
class QuestionDetail:
    """A stored question with its server-assigned identifier and timestamp."""

    question_uuid: str
    title: str
    description: str
    created_at: str


@dataclass(frozen=True)
class QuestionId:
    """Caller-supplied reference to a stored question."""

    question_uuid: str


@dataclass(frozen=True)
class Answer:
    """An answer to an existing question, before the store assigns an id."""

    question_uuid: str
    content: str


@dataclass(frozen=True)
class AnswerDetail:
    """A stored answer with its server-assigned identifier and timestamp."""

    answer_uuid: str
    question_uuid: str
    content: str
    created_at: str


@dataclass(frozen=True)
class AnswerId:
    """Caller-supplied reference to a stored answer."""

    answer_uuid: str
