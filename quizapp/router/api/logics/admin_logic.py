from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quizapp.log import get_logger
from quizapp.model.answers import Answer
from quizapp.model.questions import Question
from quizapp.schema.auth_schema import TokenPayload
from quizapp.schema.question_schema import AnswerIn, QuestionIn

log = get_logger(__name__)


def _add_answers(db: Session, question_id: int, answers: List[AnswerIn]) -> None:
    db.add_all([
        Answer(question_id=question_id, label=a.label, answer_text=a.text)
        for a in answers
    ])


def get_questions_logic(db: Session) -> List[Question]:
    """Question rows only, no answers joined."""
    return db.query(Question).order_by(Question.question_id).all()


def create_question_logic(db: Session, admin: TokenPayload, payload: QuestionIn) -> int:
    """Insert a question and its answers in one transaction.

    Args:
        db (Session): Database session
        admin (TokenPayload): creator of the question
        payload (QuestionIn): text, correct label and answer options

    Returns:
        int: id of the new question
    """
    try:
        question = Question(
            question_text=payload.question_text,
            correct_answer=payload.correct_answer,
            created_by=admin.user_id,
        )
        db.add(question)
        db.flush()
        _add_answers(db, question.question_id, payload.answers)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Create question failed: %s", e)
        raise

    log.info("Question %s created by %s", question.question_id, admin.username)
    return question.question_id


def update_question_logic(db: Session, question_id: int, payload: QuestionIn) -> bool:
    """Update a question's fields and replace its whole answer set atomically.

    An unknown id updates nothing and is not an error.

    Returns:
        bool: whether a question row was updated
    """
    try:
        updated = (
            db.query(Question)
            .filter(Question.question_id == question_id)
            .update(
                {
                    Question.question_text: payload.question_text,
                    Question.correct_answer: payload.correct_answer,
                },
                synchronize_session=False,
            )
        )
        if updated:
            db.query(Answer).filter(Answer.question_id == question_id).delete(synchronize_session=False)
            _add_answers(db, question_id, payload.answers)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Update of question %s failed: %s", question_id, e)
        raise

    if not updated:
        log.info("Update of question %s matched no rows", question_id)
    return bool(updated)


def delete_question_logic(db: Session, question_id: int) -> bool:
    """Delete a question and its answers. Deleting an unknown id is a no-op."""
    try:
        db.query(Answer).filter(Answer.question_id == question_id).delete(synchronize_session=False)
        deleted = (
            db.query(Question)
            .filter(Question.question_id == question_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("Delete of question %s failed: %s", question_id, e)
        raise

    return bool(deleted)
