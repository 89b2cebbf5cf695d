"""Data models."""
from quizrunner.models.question_set import Question, QuestionSet, QuestionSetMetadata
from quizrunner.models.results import TestCase, TestResult

__all__ = [
    "Question",
    "QuestionSet",
    "QuestionSetMetadata",
    "TestCase",
    "TestResult",
]
