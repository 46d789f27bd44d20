from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from quizapp.database.base_class import Base
from datetime import datetime


class UserAnswer(Base):
    """One submitted answer. Rows are append-only; is_correct is fixed at insert."""
    __tablename__ = "user_answers"

    user_answer_id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # FK
    user_id = Column(Integer, ForeignKey("users.user_id"), index=True)
    # history outlives the question
    question_id = Column(Integer, ForeignKey("questions.question_id", ondelete="SET NULL"), nullable=True)

    # attributes
    chosen_answer = Column(String(10), nullable=False)
    is_correct = Column(Boolean, nullable=False)
    answered_at = Column(DateTime, default=datetime.now)

    # relationship
    user = relationship("User", back_populates="user_answers")
