"""
Pydantic schemas for Q&A API request/response validation.

Field names are the wire contract and match the domain entities
one to one. Identifiers are plain strings here: a malformed UUID
is the store's to reject, so it reaches the handler error mapping
instead of failing schema validation.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict

from app.domain.qa.entities import (
    Answer,
    AnswerDetail,
    AnswerId,
    Question,
    QuestionDetail,
    QuestionId,
)


class QuestionRequest(BaseModel):
    """Request schema for creating a question."""

    title: str
    description: str

    def to_domain(self) -> Question:
        return Question(title=self.title, description=self.description)


class QuestionDetailResponse(BaseModel):
    """A stored question."""

    model_config = ConfigDict(from_attributes=True)

    question_uuid: str
    title: str
    description: str
    created_at: str


class QuestionIdRequest(BaseModel):
    """Request schema addressing one question."""

    question_uuid: str

    def to_domain(self) -> QuestionId:
        return QuestionId(question_uuid=self.question_uuid)


class AnswerRequest(BaseModel):
    """Request schema for creating an answer."""

    question_uuid: str
    content: str

    def to_domain(self) -> Answer:
        return Answer(question_uuid=self.question_uuid, content=self.content)


class AnswerDetailResponse(BaseModel):
    """A stored answer."""

    model_config = ConfigDict(from_attributes=True)

    answer_uuid: str
    question_uuid: str
    content: str
    created_at: str


class AnswerIdRequest(BaseModel):
    """Request schema addressing one answer."""

    answer_uuid: str

    def to_domain(self) -> AnswerId:
        return AnswerId(answer_uuid=self.answer_uuid)


def question_detail_response(detail: QuestionDetail) -> QuestionDetailResponse:
    return QuestionDetailResponse.model_validate(detail)


def answer_detail_response(detail: AnswerDetail) -> AnswerDetailResponse:
    return AnswerDetailResponse.model_validate(detail)


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str
