from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quizapp.schema.base import CamelModel


################
### Question ###
################
class AnswerOut(CamelModel):
    id: int
    question_id: int
    label: str
    text: str


class QuestionOut(CamelModel):
    id: int
    text: str
    correct_answer: str
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    answers: List[AnswerOut] = []


class AdminQuestionOut(BaseModel):
    """A questions row exactly as stored."""
    model_config = ConfigDict(from_attributes=True)

    question_id: int
    question_text: str
    correct_answer: str
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None


class AnswerIn(CamelModel):
    label: str = Field(min_length=1, max_length=10)
    text: str


class QuestionIn(CamelModel):
    question_text: str
    correct_answer: str = Field(min_length=1, max_length=10)
    answers: List[AnswerIn]

    @model_validator(mode="after")
    def check_labels(self) -> "QuestionIn":
        labels = [a.label for a in self.answers]
        if len(labels) != len(set(labels)):
            raise ValueError("answer labels must be unique within a question")
        if self.correct_answer not in labels:
            raise ValueError("correctAnswer must match the label of one of the answers")
        return self


class QuestionCreated(CamelModel):
    message: str
    question_id: int


##############
### Answer ###
##############
class AnswerSubmission(CamelModel):
    question_id: int
    chosen_answer: str = Field(max_length=10)


class AnswerResult(CamelModel):
    is_correct: bool


###############
### Results ###
###############
class ResultsOut(CamelModel):
    total_questions: int
    correct_answers: int
    wrong_answers: int
    percentage: float
