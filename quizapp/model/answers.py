from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from quizapp.database.base_class import Base


class Answer(Base):
    __tablename__ = "answers"

    answer_id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # FK
    question_id = Column(Integer, ForeignKey("questions.question_id", ondelete="CASCADE"), nullable=False)

    # attributes
    label = Column(String(10), nullable=False)
    answer_text = Column(Text, nullable=False)

    # relationship
    question = relationship("Question", back_populates="answers")
