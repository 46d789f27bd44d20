"""
One-off database bootstrap: creates the tables, the two default accounts and
a few sample questions. Safe to run repeatedly. Not used by the API process.

    quizapp-init-db
"""
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from quizapp.auth_util import get_password_hash
from quizapp.database.base_class import Base
from quizapp.database.db import get_ctx_db
from quizapp.database.session import SQLALCHEMY_DATABASE_URL, get_engine
from quizapp.log import get_logger
from quizapp.model import Answer, Question, User
from quizapp.model.users import ROLE_ADMIN, ROLE_USER

log = get_logger(__name__)

DEFAULT_USERS = [
    {"username": "admin", "password": "admin123", "full_name": "Administrator", "role": ROLE_ADMIN},
    {"username": "user", "password": "user123", "full_name": "Test User", "role": ROLE_USER},
]

SAMPLE_QUESTIONS = [
    {
        "text": "Thủ đô của Việt Nam là gì?",
        "correct": "A",
        "answers": [("A", "Hà Nội"), ("B", "TP.HCM"), ("C", "Đà Nẵng"), ("D", "Cần Thơ")],
    },
    {
        "text": "2 + 2 = ?",
        "correct": "B",
        "answers": [("A", "3"), ("B", "4"), ("C", "5"), ("D", "6")],
    },
    {
        "text": "Màu của lá cây là gì?",
        "correct": "C",
        "answers": [("A", "Đỏ"), ("B", "Xanh dương"), ("C", "Xanh lá"), ("D", "Vàng")],
    },
]


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
    log.info("Tables created")


def seed_users(db: Session) -> None:
    for account in DEFAULT_USERS:
        exists = db.query(User.user_id).filter(User.username == account["username"]).first()
        if exists:
            continue
        db.add(User(
            username=account["username"],
            password=get_password_hash(account["password"]),
            full_name=account["full_name"],
            role=account["role"],
        ))
    db.commit()
    log.info("Default users ready: %s", ", ".join(u["username"] for u in DEFAULT_USERS))


def seed_questions(db: Session) -> None:
    """Insert the sample questions, but only into an empty questions table."""
    if db.query(func.count(Question.question_id)).scalar():
        log.info("Questions already present, skipping samples")
        return

    admin = db.query(User).filter(User.username == "admin").one()
    for sample in SAMPLE_QUESTIONS:
        db.add(Question(
            question_text=sample["text"],
            correct_answer=sample["correct"],
            created_by=admin.user_id,
            answers=[Answer(label=label, answer_text=text) for label, text in sample["answers"]],
        ))
    db.commit()
    log.info("Inserted %d sample questions", len(SAMPLE_QUESTIONS))


def init_database(engine: Engine, db: Session) -> None:
    create_tables(engine)
    seed_users(db)
    seed_questions(db)


def main() -> None:
    log.info("Initializing database...")
    engine = get_engine(SQLALCHEMY_DATABASE_URL)
    try:
        with get_ctx_db(engine) as db:
            init_database(engine, db)
    finally:
        engine.dispose()
    log.info("Database initialization completed")


if __name__ == "__main__":  # pragma: no cover
    main()
