"""Polling wait primitive with diagnostic capture on timeout."""
import asyncio
import logging
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from quizrunner.config import POLL_INTERVAL_SECONDS
from quizrunner.errors import WaitTimeoutError
from quizrunner.utils import js_string_literal, sanitize_for_filename, screenshot_path

log = logging.getLogger(__name__)


def presence_expression(selector: str) -> str:
    """JS expression that is true once an element matches selector."""
    return f"document.querySelector({js_string_literal(selector)}) !== null"


async def try_screenshot(page: Page, output_dir: Path, name: str) -> Path | None:
    """
    Best-effort screenshot into output_dir/name.png.
    Returns the written path, or None if capture failed.
    """
    path = screenshot_path(Path(output_dir), name)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(path))
    except Exception as exc:
        log.warning("Screenshot %s failed: %s", path.name, exc)
        return None
    log.debug("Saved screenshot %s", path)
    return path


async def _evaluate_flag(page: Page, expression: str) -> bool:
    try:
        return bool(await page.evaluate(expression))
    except PlaywrightError as exc:
        # page is mid-transition; treat as not yet true
        log.debug("Predicate evaluation failed: %s", exc)
        return False


async def wait_until(
    page: Page,
    expression: str,
    *,
    label: str,
    timeout: float,
    output_dir: Path,
    interval: float = POLL_INTERVAL_SECONDS,
) -> None:
    """
    Poll a boolean JS expression every `interval` seconds until it is true.

    On timeout a screenshot named after `label` is captured and
    WaitTimeoutError is raised. Returns no later than timeout + interval
    (plus the cost of one evaluation).
    """
    loop = asyncio.get_running_loop()
    start = loop.time()

    while True:
        if await _evaluate_flag(page, expression):
            return

        elapsed = loop.time() - start
        if elapsed > timeout:
            name = f"fail_timeout_wait_for_{sanitize_for_filename(label)}"
            await try_screenshot(page, output_dir, name)
            log.warning("Timed out after %.1fs waiting for %s", elapsed, label)
            raise WaitTimeoutError(label, elapsed)

        await asyncio.sleep(interval)


async def wait_for(
    page: Page,
    selector: str,
    timeout: float,
    *,
    output_dir: Path,
    interval: float = POLL_INTERVAL_SECONDS,
) -> None:
    """Wait until an element matching selector exists in the page."""
    await wait_until(
        page,
        presence_expression(selector),
        label=selector,
        timeout=timeout,
        output_dir=output_dir,
        interval=interval,
    )
