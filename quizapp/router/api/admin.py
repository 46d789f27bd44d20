from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from quizapp.database import get_db
from quizapp.router.api.logics.admin_logic import (
    create_question_logic,
    delete_question_logic,
    get_questions_logic,
    update_question_logic,
)
from quizapp.router.dependencies import get_current_admin
from quizapp.schema.auth_schema import TokenPayload
from quizapp.schema.base import MessageOut
from quizapp.schema.question_schema import AdminQuestionOut, QuestionCreated, QuestionIn

# every route here sits behind the admin guard
router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/questions", response_model=List[AdminQuestionOut], status_code=status.HTTP_200_OK)
def get_all_questions(db: Session = Depends(get_db)):
    """Raw question rows, without answers."""
    return get_questions_logic(db)


@router.post("/questions", response_model=QuestionCreated, status_code=status.HTTP_201_CREATED)
def create_question(
    payload: QuestionIn,
    db: Session = Depends(get_db),
    admin: TokenPayload = Depends(get_current_admin),
):
    """Create a question together with its answer options.

    Args:
        payload (QuestionIn): questionText, correctAnswer and answers[{label, text}]

    Returns:
        QuestionCreated: message and the new question id
    """
    question_id = create_question_logic(db, admin, payload)
    return {"message": "Question created successfully", "question_id": question_id}


@router.put("/questions/{question_id}", response_model=MessageOut, status_code=status.HTTP_200_OK)
def update_question(question_id: int, payload: QuestionIn, db: Session = Depends(get_db)):
    """Replace a question's text, correct answer and full answer set."""
    update_question_logic(db, question_id, payload)
    return {"message": "Question updated successfully"}


@router.delete("/questions/{question_id}", response_model=MessageOut, status_code=status.HTTP_200_OK)
def delete_question(question_id: int, db: Session = Depends(get_db)):
    delete_question_logic(db, question_id)
    return {"message": "Question deleted successfully"}
