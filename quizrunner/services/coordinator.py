"""Sequential, fail-fast execution of the selected test cases."""
import logging
from typing import Sequence

from quizrunner.config import RunConfig
from quizrunner.models import TestCase, TestResult
from quizrunner.services.browser_session import BrowserSession
from quizrunner.services.executor import run_test_case

log = logging.getLogger(__name__)


def first_per_mode(test_cases: Sequence[TestCase]) -> list[TestCase]:
    """Keep the earliest test case of each mode, preserving order."""
    seen: set[str] = set()
    selected = []
    for test_case in test_cases:
        if test_case.mode in seen:
            continue
        seen.add(test_case.mode)
        selected.append(test_case)
    return selected


def select_test_cases(test_cases: Sequence[TestCase], config: RunConfig) -> list[TestCase]:
    if config.first_per_mode:
        return first_per_mode(test_cases)
    return list(test_cases)


async def run_all(
    session: BrowserSession,
    test_cases: Sequence[TestCase],
    config: RunConfig,
) -> list[TestResult]:
    """
    Run test cases one at a time. Stops after the first failure; later cases
    are not run and have no result.
    """
    results: list[TestResult] = []
    selected = select_test_cases(test_cases, config)
    for index, test_case in enumerate(selected):
        result = await run_test_case(session, test_case, config)
        results.append(result)
        if not result.passed:
            skipped = len(selected) - index - 1
            if skipped:
                log.info("Stopping after first failure; %d test case(s) not run", skipped)
            break
    return results


def exit_code(results: Sequence[TestResult]) -> int:
    return 0 if all(result.passed for result in results) else 1
