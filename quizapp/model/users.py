from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from quizapp.database.base_class import Base
from datetime import datetime

ROLE_USER = "user"
ROLE_ADMIN = "admin"


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),
    )

    user_id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # attributes
    username = Column(String(50), nullable=False, unique=True)
    password = Column(String(255), nullable=False)  # bcrypt digest
    full_name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_USER)
    created_at = Column(DateTime, default=datetime.now)

    # relationship
    questions = relationship("Question", back_populates="creator")
    user_answers = relationship("UserAnswer", back_populates="user")
