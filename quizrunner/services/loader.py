"""Discovery of question-set test cases."""
import logging
from pathlib import Path

from pydantic import ValidationError

from quizrunner.config import QUESTION_FILE_PREFIX, QUESTION_FILE_SUFFIX
from quizrunner.errors import DiscoveryError, EmptyResultError, ParseError
from quizrunner.models import QuestionSet, TestCase
from quizrunner.services.reporter import print_inventory
from quizrunner.utils import read_text_file

log = logging.getLogger(__name__)


def is_question_file(path: Path) -> bool:
    """Check for a questions*.json file."""
    return (
        path.is_file()
        and path.name.startswith(QUESTION_FILE_PREFIX)
        and path.name.endswith(QUESTION_FILE_SUFFIX)
    )


def load_test_case(path: Path) -> TestCase:
    """Parse one question-set file into a test case."""
    try:
        content = read_text_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(path.name, f"cannot read file: {exc}") from exc

    try:
        question_set = QuestionSet.model_validate_json(content)
    except ValidationError as exc:
        raise ParseError(path.name, str(exc)) from exc

    return TestCase(
        filename=path.name,
        key=path.name[: -len(QUESTION_FILE_SUFFIX)],
        metadata=question_set.metadata,
        questions=question_set.questions,
    )


def discover_test_cases(data_dir: Path, name_filter: str | None = None) -> list[TestCase]:
    """
    Load every questions*.json directly under data_dir whose key contains
    name_filter, sorted by filename.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DiscoveryError(f"{data_dir}/ directory not found")

    try:
        candidates = [path for path in data_dir.iterdir() if is_question_file(path)]
    except OSError as exc:
        raise DiscoveryError(f"Failed to scan {data_dir}: {exc}") from exc

    test_cases = []
    for path in candidates:
        key = path.name[: -len(QUESTION_FILE_SUFFIX)]
        if name_filter and name_filter not in key:
            log.debug("Skipping %s (filter %r)", path.name, name_filter)
            continue
        test_cases.append(load_test_case(path))

    if not test_cases:
        raise EmptyResultError("No question sets found to test!")

    test_cases.sort(key=lambda test_case: test_case.filename)
    print_inventory(test_cases)
    return test_cases
