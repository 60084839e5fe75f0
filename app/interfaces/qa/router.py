"""
FastAPI router for the Q&A bounded context.

All routes delegate to the request handlers. No business logic here.
Input validation is handled by Pydantic schemas.
Handler errors are mapped to HTTP by centralized error handlers.
"""

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from app.application.qa import handlers
from app.domain.qa.entities import QuestionId
from app.domain.qa.ports import AnswerStore, QuestionStore
from app.interfaces.qa.dependencies import get_answers_store, get_questions_store
from app.interfaces.qa.schemas import (
    AnswerDetailResponse,
    AnswerIdRequest,
    AnswerRequest,
    QuestionDetailResponse,
    QuestionIdRequest,
    QuestionRequest,
    answer_detail_response,
    question_detail_response,
)

router = APIRouter(tags=["qa"])

ERROR_RESPONSES = {
    500: {"description": "Something went wrong", "content": {"text/plain": {}}},
}


# ── Questions ────────────────────────────────────────────────────


@router.post(
    "/question",
    response_model=QuestionDetailResponse,
    responses=ERROR_RESPONSES,
    summary="Create a question",
)
def create_question(
    request: QuestionRequest,
    questions_store: QuestionStore = Depends(get_questions_store),
) -> QuestionDetailResponse:
    detail = handlers.create_question(request.to_domain(), questions_store)
    return question_detail_response(detail)


@router.get(
    "/questions",
    response_model=list[QuestionDetailResponse],
    responses=ERROR_RESPONSES,
    summary="List questions",
)
def read_questions(
    questions_store: QuestionStore = Depends(get_questions_store),
) -> list[QuestionDetailResponse]:
    return [
        question_detail_response(detail)
        for detail in handlers.read_questions(questions_store)
    ]


@router.delete(
    "/question",
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete a question and its answers",
)
def delete_question(
    request: QuestionIdRequest,
    questions_store: QuestionStore = Depends(get_questions_store),
) -> Response:
    handlers.delete_question(request.to_domain(), questions_store)
    return Response(status_code=200)


# ── Answers ──────────────────────────────────────────────────────


@router.post(
    "/answer",
    response_model=AnswerDetailResponse,
    responses={
        400: {
            "description": "Invalid question reference",
            "content": {"text/plain": {}},
        },
        **ERROR_RESPONSES,
    },
    summary="Answer a question",
)
def create_answer(
    request: AnswerRequest,
    answers_store: AnswerStore = Depends(get_answers_store),
) -> AnswerDetailResponse:
    detail = handlers.create_answer(request.to_domain(), answers_store)
    return answer_detail_response(detail)


@router.get(
    "/answers",
    response_model=list[AnswerDetailResponse],
    responses=ERROR_RESPONSES,
    summary="List the answers of a question",
    description=(
        "The question is given as a JSON body ``{\"question_uuid\": ...}`` "
        "or as the ``question_uuid`` query parameter."
    ),
)
def read_answers(
    question_uuid: str | None = None,
    request: QuestionIdRequest | None = Body(default=None),
    answers_store: AnswerStore = Depends(get_answers_store),
) -> list[AnswerDetailResponse]:
    if request is not None:
        question_id = request.to_domain()
    elif question_uuid is not None:
        question_id = QuestionId(question_uuid=question_uuid)
    else:
        raise HTTPException(status_code=422, detail="question_uuid is required")

    return [
        answer_detail_response(detail)
        for detail in handlers.read_answers(question_id, answers_store)
    ]


@router.delete(
    "/answer",
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete an answer",
)
def delete_answer(
    request: AnswerIdRequest,
    answers_store: AnswerStore = Depends(get_answers_store),
) -> Response:
    handlers.delete_answer(request.to_domain(), answers_store)
    return Response(status_code=200)
