"""Endpoints for quiz questions and recorded attempts."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from learnsmart.application.use_cases.quiz import (
    create_question,
    delete_question,
    list_questions,
    list_results,
    submit_quiz,
    update_question,
)
from learnsmart.domain.entities import QuizResult, User
from learnsmart.domain.errors import AuthError, NotFoundError, ValidationError
from learnsmart.infrastructure.database import get_db
from learnsmart.interfaces.api.dependencies import get_current_user
from learnsmart.interfaces.api.routes_helpers import to_http_exception
from learnsmart.interfaces.api.schemas import (
    QuizQuestionCreate,
    QuizQuestionRead,
    QuizQuestionUpdate,
    QuizResultHistoryRead,
    QuizResultRead,
    QuizSubmission,
)

router = APIRouter(prefix="/quiz", tags=["quiz"])

_QUIZ_ERRORS = (AuthError, NotFoundError, ValidationError)


def _result_to_schema(result: QuizResult) -> QuizResultRead:
    return QuizResultRead(
        id=result.id or 0,
        course=result.course,
        branch=result.branch,
        semester=result.semester,
        score=result.score,
        total_questions=result.total_questions,
        percentage=result.percentage,
        created_at=result.created_at,
    )


@router.get("/questions", response_model=list[QuizQuestionRead])
def get_questions(
    course: str = Query(...),
    branch: str = Query(...),
    semester: str = Query(...),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[QuizQuestionRead]:
    try:
        questions = list_questions(db, course=course, branch=branch, semester=semester)
    except ValidationError as exc:
        raise to_http_exception(exc) from exc
    return [QuizQuestionRead.model_validate(question) for question in questions]


@router.post(
    "/questions",
    response_model=QuizQuestionRead,
    status_code=status.HTTP_201_CREATED,
)
def post_question(
    payload: QuizQuestionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> QuizQuestionRead:
    try:
        question = create_question(db, actor=current_user, **payload.model_dump())
    except _QUIZ_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return QuizQuestionRead.model_validate(question)


@router.put("/questions/{question_id}", response_model=QuizQuestionRead)
def put_question(
    question_id: int,
    payload: QuizQuestionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> QuizQuestionRead:
    try:
        question = update_question(
            db, question_id, actor=current_user, **payload.model_dump()
        )
    except _QUIZ_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return QuizQuestionRead.model_validate(question)


@router.delete("/questions/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_question(
    question_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        delete_question(db, question_id, actor=current_user)
    except _QUIZ_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/results",
    response_model=QuizResultRead,
    status_code=status.HTTP_201_CREATED,
)
def post_result(
    payload: QuizSubmission,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> QuizResultRead:
    """Score the submitted answers and record the attempt."""

    try:
        result = submit_quiz(
            db,
            user=current_user,
            course=payload.course,
            branch=payload.branch,
            semester=payload.semester,
            answers=payload.answers,
        )
    except ValidationError as exc:
        raise to_http_exception(exc) from exc
    return _result_to_schema(result)


@router.get("/results", response_model=QuizResultHistoryRead)
def get_results(
    course: str = Query(...),
    branch: str = Query(...),
    semester: str = Query(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> QuizResultHistoryRead:
    try:
        history = list_results(
            db, user=current_user, course=course, branch=branch, semester=semester
        )
    except ValidationError as exc:
        raise to_http_exception(exc) from exc
    return QuizResultHistoryRead(
        results=[_result_to_schema(result) for result in history.results],
        first_attempt_id=history.first_attempt_id,
        average_percentage=history.average_percentage,
    )


__all__ = ["router"]
