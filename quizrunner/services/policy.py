"""Per-mode choice clicking for the question rounds of a game."""
import logging
from typing import Sequence

from quizrunner.config import WRONG_ANSWER_PAUSE_SECONDS
from quizrunner.errors import RunnerError
from quizrunner.models import Question
from quizrunner.services.page_driver import PageDriver
from quizrunner.services.reporter import print_step

log = logging.getLogger(__name__)

CHOICE_SELECTOR = ".choice-button"
RESULT_SCREEN_SELECTOR = "#result-screen"
NEXT_BUTTON_SELECTOR = "#next-button"


def choice_selector(index: int) -> str:
    """Selector for the zero-based index-th choice button."""
    return f"{CHOICE_SELECTOR}:nth-child({index + 1})"


def wrong_choice_index(question: Question) -> int | None:
    """Index of a choice other than the correct one, None for single-choice questions."""
    if len(question.choices) < 2:
        return None
    return 1 if question.correctAnswer == 0 else 0


async def advance_to_next(driver: PageDriver) -> None:
    await driver.wait_for(RESULT_SCREEN_SELECTOR)
    await driver.click(NEXT_BUTTON_SELECTOR)


class InteractionPolicy:
    mode = ""

    async def play_round(self, driver: PageDriver, question: Question, number: int) -> None:
        """
        Answer one question. Entry: game screen with choices rendering.
        Exit: next-button on the result screen has been clicked.
        """
        raise NotImplementedError


class HardPolicy(InteractionPolicy):
    """Flow check: always the first choice, correctness is not exercised."""

    mode = "hard"

    async def play_round(self, driver: PageDriver, question: Question, number: int) -> None:
        await driver.wait_for(CHOICE_SELECTOR)
        await driver.click(choice_selector(0))
        await advance_to_next(driver)


class EasyPolicy(InteractionPolicy):
    """
    Correct answers throughout, preceded on the first question by one wrong
    click that must leave the game screen in place.
    """

    mode = "easy"

    def __init__(self, wrong_answer_pause: float = WRONG_ANSWER_PAUSE_SECONDS):
        self.wrong_answer_pause = wrong_answer_pause

    async def play_round(self, driver: PageDriver, question: Question, number: int) -> None:
        await driver.wait_for(CHOICE_SELECTOR)

        if number == 1:
            wrong_index = wrong_choice_index(question)
            if wrong_index is None:
                log.info("Question %s has a single choice; skipping wrong-answer click", question.id)
            else:
                await driver.click(choice_selector(wrong_index))
                await driver.pause(self.wrong_answer_pause)

        await driver.click(choice_selector(question.correctAnswer))
        await advance_to_next(driver)


POLICIES: dict[str, type[InteractionPolicy]] = {
    EasyPolicy.mode: EasyPolicy,
    HardPolicy.mode: HardPolicy,
}


def policy_for(mode: str) -> InteractionPolicy:
    """Build the interaction policy for a question-set mode."""
    policy_cls = POLICIES.get(mode)
    if policy_cls is None:
        raise RunnerError(f"Unsupported mode: {mode!r}")
    return policy_cls()


async def play_rounds(
    policy: InteractionPolicy,
    driver: PageDriver,
    questions: Sequence[Question],
) -> None:
    """Play every question in order with the given policy."""
    total = len(questions)
    for number, question in enumerate(questions, start=1):
        await policy.play_round(driver, question, number)
        print_step(f"[{policy.mode}] Testing question {number}/{total}... ✓")
