from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from quizapp.database.base_class import Base
from datetime import datetime


class Question(Base):
    __tablename__ = "questions"

    question_id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # FK
    created_by = Column(Integer, ForeignKey("users.user_id"))

    # attributes
    question_text = Column(Text, nullable=False)
    correct_answer = Column(String(10), nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    # relationship
    creator = relationship("User", back_populates="questions")
    answers = relationship(
        "Answer",
        back_populates="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Answer.answer_id",
    )
