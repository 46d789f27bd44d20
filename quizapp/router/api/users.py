from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from quizapp.database import get_db
from quizapp.router.api.logics.user_logic import (
    get_results_logic,
    list_questions_logic,
    submit_answer_logic,
)
from quizapp.router.dependencies import get_current_user
from quizapp.schema.auth_schema import TokenPayload
from quizapp.schema.question_schema import AnswerResult, AnswerSubmission, QuestionOut, ResultsOut

router = APIRouter()


@router.get("/questions", response_model=List[QuestionOut], status_code=status.HTTP_200_OK)
def get_questions(
    db: Session = Depends(get_db),
    user: TokenPayload = Depends(get_current_user),
) -> List[Dict[str, Any]]:
    """Every question with its answer options."""
    return list_questions_logic(db)


@router.post("/answers", response_model=AnswerResult, status_code=status.HTTP_200_OK)
def submit_answer(
    submission: AnswerSubmission,
    db: Session = Depends(get_db),
    user: TokenPayload = Depends(get_current_user),
) -> Dict[str, Any]:
    """Record the caller's answer to one question and say whether it was right.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    return submit_answer_logic(db, user, submission)


@router.get("/results", response_model=ResultsOut, status_code=status.HTTP_200_OK)
def get_results(
    db: Session = Depends(get_db),
    user: TokenPayload = Depends(get_current_user),
) -> Dict[str, Any]:
    return get_results_logic(db, user)
