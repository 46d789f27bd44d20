from typing import Any, Dict, List

from fastapi import HTTPException, status
from sqlalchemy import case, func, not_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from quizapp.log import get_logger
from quizapp.model.questions import Question
from quizapp.model.user_answers import UserAnswer
from quizapp.schema.auth_schema import TokenPayload
from quizapp.schema.question_schema import AnswerSubmission

log = get_logger(__name__)


def list_questions_logic(db: Session) -> List[Dict[str, Any]]:
    """All questions with their answer options, ordered by question id."""
    questions = (
        db.query(Question)
        .options(selectinload(Question.answers))
        .order_by(Question.question_id)
        .all()
    )
    return [
        {
            "id": q.question_id,
            "text": q.question_text,
            "correct_answer": q.correct_answer,
            "created_by": q.created_by,
            "created_at": q.created_at,
            "answers": [
                {
                    "id": a.answer_id,
                    "question_id": a.question_id,
                    "label": a.label,
                    "text": a.answer_text,
                }
                for a in q.answers
            ],
        }
        for q in questions
    ]


def submit_answer_logic(db: Session, user: TokenPayload, submission: AnswerSubmission) -> Dict[str, Any]:
    """Grade a submission against the question's current correct answer and record it.

    Args:
        db (Session): Database session
        user (TokenPayload): caller
        submission (AnswerSubmission): question id and chosen label

    Raises:
        HTTPException: 404 if the question does not exist

    Returns:
        Dict[str, Any]: {"is_correct": bool}
    """
    correct_answer = (
        db.query(Question.correct_answer)
        .filter(Question.question_id == submission.question_id)
        .scalar()
    )
    if correct_answer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")

    # exact, case-sensitive
    is_correct = submission.chosen_answer == correct_answer

    db.add(UserAnswer(
        user_id=user.user_id,
        question_id=submission.question_id,
        chosen_answer=submission.chosen_answer,
        is_correct=is_correct,
    ))
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Failed to record answer for user %s: %s", user.user_id, e)
        raise

    return {"is_correct": is_correct}


def get_results_logic(db: Session, user: TokenPayload) -> Dict[str, Any]:
    """Aggregate every answer the caller has submitted in a single query."""
    total, correct, wrong = (
        db.query(
            func.count(UserAnswer.user_answer_id),
            func.count(case((UserAnswer.is_correct, 1))),
            func.count(case((not_(UserAnswer.is_correct), 1))),
        )
        .filter(UserAnswer.user_id == user.user_id)
        .one()
    )
    percentage = round(correct / total * 100, 2) if total else 0

    return {
        "total_questions": total,
        "correct_answers": correct,
        "wrong_answers": wrong,
        "percentage": percentage,
    }
