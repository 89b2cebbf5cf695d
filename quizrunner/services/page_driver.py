"""Page actions bound to one run's timeout and screenshot directory."""
import asyncio
import logging
from pathlib import Path
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from quizrunner.config import POLL_INTERVAL_SECONDS
from quizrunner.errors import ClickError
from quizrunner.services import waiter
from quizrunner.utils import js_string_literal

log = logging.getLogger(__name__)


async def click_element(page: Page, selector: str) -> None:
    """Click the first element matching selector via a DOM click()."""
    try:
        await page.evaluate(f"document.querySelector({js_string_literal(selector)}).click()")
    except PlaywrightError as exc:
        message = str(exc).strip()
        raise ClickError(selector, message.splitlines()[0] if message else None) from exc


class PageDriver:
    def __init__(
        self,
        page: Page,
        timeout: float,
        output_dir: Path,
        interval: float = POLL_INTERVAL_SECONDS,
    ):
        self.page = page
        self.timeout = timeout
        self.output_dir = Path(output_dir)
        self.interval = interval

    async def wait_for(self, selector: str) -> None:
        await waiter.wait_for(
            self.page,
            selector,
            self.timeout,
            output_dir=self.output_dir,
            interval=self.interval,
        )

    async def click(self, selector: str) -> None:
        log.debug("Clicking %s", selector)
        await click_element(self.page, selector)

    async def evaluate(self, expression: str) -> Any:
        return await self.page.evaluate(expression)

    async def screenshot(self, name: str) -> Path | None:
        return await waiter.try_screenshot(self.page, self.output_dir, name)

    async def pause(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
