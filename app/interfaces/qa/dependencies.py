"""
Dependency injection for the Q&A bounded context.

Stores are built once by the composition root (app.main) and kept
on ``app.state``. These providers hand them to routes, and are the
seam tests override with app.dependency_overrides.
"""

from fastapi import Request

from app.domain.qa.ports import AnswerStore, QuestionStore


def get_questions_store(request: Request) -> QuestionStore:
    """Return the application's question store."""
    return request.app.state.questions_store


def get_answers_store(request: Request) -> AnswerStore:
    """Return the application's answer store."""
    return request.app.state.answers_store
