from quizapp.model.users import User
from quizapp.model.questions import Question
from quizapp.model.answers import Answer
from quizapp.model.user_answers import UserAnswer

__all__ = ["User", "Question", "Answer", "UserAnswer"]
