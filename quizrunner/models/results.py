from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from quizrunner.models.question_set import Question, QuestionSetMetadata


@dataclass
class TestCase:
    __test__ = False

    filename: str
    key: str  # filename without extension, matches the tile's data-key
    metadata: QuestionSetMetadata
    questions: List[Question] = field(default_factory=list)

    @property
    def mode(self) -> str:
        return self.metadata.mode

    @property
    def title(self) -> str:
        return self.metadata.title


@dataclass(frozen=True)
class TestResult:
    __test__ = False

    name: str
    mode: str
    passed: bool
    error: str | None = None
