"""Question-set file Pydantic models."""
from pydantic import BaseModel, Field, model_validator


class QuestionSetMetadata(BaseModel):
    """Model for the metadata block of a question set."""

    title: str
    description: str
    mode: str
    targetAge: str
    subject: str


class Question(BaseModel):
    """Model for one multiple-choice question."""

    id: str
    question: str
    choices: list[str] = Field(..., min_length=1)
    correctAnswer: int = Field(..., ge=0)
    explanation: str

    @model_validator(mode="after")
    def _correct_answer_in_range(self) -> "Question":
        if self.correctAnswer >= len(self.choices):
            raise ValueError(
                f"correctAnswer {self.correctAnswer} out of range "
                f"for {len(self.choices)} choices"
            )
        return self


class QuestionSet(BaseModel):
    """Model for a whole questions*.json document."""

    metadata: QuestionSetMetadata
    questions: list[Question]
