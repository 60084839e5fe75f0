"""
Port interfaces (ABCs) for the Q&A bounded context.

Ports define the contracts that the application layer requires
from storage. Infrastructure adapters implement these interfaces.
Failures are raised as StoreError subclasses (see errors.py).
"""

from abc import ABC, abstractmethod

from app.domain.qa.entities import Answer, AnswerDetail, Question, QuestionDetail


class QuestionStore(ABC):
    """Port for creating, deleting and listing questions."""

    @abstractmethod
    def create(self, question: Question) -> QuestionDetail:
        """Persist a new question and return the stored record.

        The identifier and creation timestamp are assigned by the store.

        Raises:
            StoreError: If the question could not be stored.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, question_uuid: str) -> None:
        """Delete a question by identifier.

        Deleting a question that does not exist is not an error.

        Raises:
            InvalidIdentifierError: If ``question_uuid`` is malformed.
            StoreError: For any other failure.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[QuestionDetail]:
        """Return all stored questions in store order."""
        raise NotImplementedError


class AnswerStore(ABC):
    """Port for creating, deleting and listing answers."""

    @abstractmethod
    def create(self, answer: Answer) -> AnswerDetail:
        """Persist a new answer and return the stored record.

        Raises:
            InvalidIdentifierError: If ``answer.question_uuid`` is malformed
                or does not reference an existing question.
            StoreError: For any other failure.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, answer_uuid: str) -> None:
        """Delete an answer by identifier. Missing answers are not an error."""
        raise NotImplementedError

    @abstractmethod
    def list(self, question_uuid: str) -> list[AnswerDetail]:
        """Return the answers of one question in store order.

        Raises:
            InvalidIdentifierError: If ``question_uuid`` is malformed.
            StoreError: For any other failure.
        """
        raise NotImplementedError
