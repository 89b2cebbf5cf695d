"""Drives one question set through the game's screens."""
import logging

from playwright.async_api import Error as PlaywrightError

from quizrunner.config import RunConfig
from quizrunner.errors import ClickError, StartScreenHiddenError
from quizrunner.models import TestCase, TestResult
from quizrunner.services.browser_session import BrowserSession
from quizrunner.services.page_driver import PageDriver
from quizrunner.services.policy import play_rounds, policy_for
from quizrunner.services.reporter import print_case_outcome, print_case_start, print_step
from quizrunner.utils import page_file_url

log = logging.getLogger(__name__)

START_SCREEN_SELECTOR = "#start-screen"
GAME_SCREEN_SELECTOR = "#game-screen"
FINISH_SCREEN_SELECTOR = "#finish-screen"
TILE_SELECTOR = ".question-set-tile"

START_SCREEN_VISIBLE_JS = "document.getElementById('start-screen').style.display !== 'none'"
TILE_KEYS_JS = f"Array.from(document.querySelectorAll('{TILE_SELECTOR}')).map(el => el.dataset.key)"


def tile_selector(key: str) -> str:
    escaped = key.replace("\\", "\\\\").replace("'", "\\'")
    return f"[data-key='{escaped}']"


async def check_start_screen(driver: PageDriver) -> None:
    await driver.wait_for(START_SCREEN_SELECTOR)
    if not await driver.evaluate(START_SCREEN_VISIBLE_JS):
        await driver.screenshot("fail_start_not_visible")
        raise StartScreenHiddenError("Start screen not visible")
    print_step("Testing start screen... ✓")


async def select_tile(driver: PageDriver, key: str) -> None:
    """
    Wait for any tile, then for this key's tile, and click it. The two waits
    separate "no tiles rendered" from "this tile missing".
    """
    await driver.wait_for(TILE_SELECTOR)
    try:
        keys = await driver.evaluate(TILE_KEYS_JS)
    except PlaywrightError as exc:
        log.debug("Could not list tiles: %s", exc)
    else:
        print_step(f"Available tiles: {keys}")
    await driver.screenshot(f"tiles_present_before_click_{key}")

    selector = tile_selector(key)
    await driver.wait_for(selector)
    await driver.screenshot(f"before_click_{key}")
    try:
        await driver.click(selector)
    except ClickError as exc:
        raise ClickError(selector, f"Failed to find tile with data-key='{key}'") from exc


async def play_test_case(session: BrowserSession, test_case: TestCase, config: RunConfig) -> None:
    """
    start screen -> tile -> game screen -> question rounds -> finish screen.
    Raises on the first failed transition. The page is always closed.
    """
    policy = policy_for(test_case.mode)
    url = page_file_url(config.html_path)

    page = await session.new_page(url)
    try:
        driver = PageDriver(page, config.timeout, config.output_dir)
        await check_start_screen(driver)
        await select_tile(driver, test_case.key)
        await driver.wait_for(GAME_SCREEN_SELECTOR)
        await play_rounds(policy, driver, test_case.questions)
        await driver.wait_for(FINISH_SCREEN_SELECTOR)
        await driver.screenshot(f"finish_{test_case.key}")
        # no "play again": reloading would invalidate the page's handles
    finally:
        await session.close_page(page)


async def run_test_case(session: BrowserSession, test_case: TestCase, config: RunConfig) -> TestResult:
    """Run one test case and convert its outcome into a TestResult."""
    print_case_start(test_case)
    try:
        await play_test_case(session, test_case, config)
    except Exception as exc:
        log.debug("Test case %s failed", test_case.key, exc_info=True)
        result = TestResult(
            name=test_case.title,
            mode=test_case.mode,
            passed=False,
            error=str(exc),
        )
    else:
        result = TestResult(name=test_case.title, mode=test_case.mode, passed=True)
    print_case_outcome(result)
    return result
