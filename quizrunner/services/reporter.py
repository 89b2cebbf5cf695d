"""Console output for a runner invocation."""
from typing import Iterable, Sequence

from quizrunner.models import TestCase, TestResult


def print_banner() -> None:
    print("🎮 Starting Game Tests")
    print()


def print_inventory(test_cases: Sequence[TestCase]) -> None:
    """Print the discovered question sets, one line each."""
    print(f"📋 Found {len(test_cases)} question set(s) to test:")
    for test_case in test_cases:
        print(f"  • {test_case.key}: {test_case.title} (mode: {test_case.mode})")
    print()


def print_case_start(test_case: TestCase) -> None:
    print(f"🧪 Testing: {test_case.title} ({test_case.mode})")


def print_step(message: str) -> None:
    print(f"    {message}")


def print_case_outcome(result: TestResult) -> None:
    if result.passed:
        print("  ✅ Passed\n")
    else:
        print(f"  ❌ Failed: {result.error}\n")


def print_console_message(text: str) -> None:
    print(f"    🌐 {text}")


def print_summary(results: Iterable[TestResult]) -> None:
    """Print per-case status lines and the passed/total tally."""
    results = list(results)
    print("📊 Test Summary")
    print("================================")

    for result in results:
        if result.passed:
            print(f"✅ PASSED {result.name} ({result.mode})")
        else:
            print(f"❌ FAILED {result.name} ({result.mode})")
            if result.error:
                print(f"    {result.error}")

    print()

    passed = sum(1 for result in results if result.passed)
    total = len(results)
    print(f"Results: {passed}/{total} question sets passed")

    if passed == total:
        print("🎉 Success! All tests passed!")
    else:
        print("💔 Some tests failed")
