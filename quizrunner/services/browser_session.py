"""Process-wide browser session with its event pump."""
from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any

from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from quizrunner.config import BROWSER_ARGS, RunConfig
from quizrunner.errors import LaunchError, NavigationError
from quizrunner.services.reporter import print_console_message

log = logging.getLogger(__name__)

CONSOLE_EVENT = "console"
PAGE_ERROR_EVENT = "pageerror"


def launch_options(config: RunConfig) -> dict[str, Any]:
    options: dict[str, Any] = {"headless": config.headless, "args": list(BROWSER_ARGS)}
    if config.executable is not None:
        options["executable_path"] = str(config.executable)
    return options


async def pump_events(events: asyncio.Queue, verbose: bool) -> None:
    """
    Drain browser events for the lifetime of the session.
    Console messages are mirrored only in verbose mode.
    """
    while True:
        kind, text = await events.get()
        try:
            if kind == PAGE_ERROR_EVENT:
                log.warning("Page error: %s", text)
            elif verbose:
                print_console_message(text)
        except Exception as exc:
            log.warning("Failed to handle %s event: %s", kind, exc)
        finally:
            events.task_done()


class BrowserSession:
    def __init__(self, playwright: Playwright, browser: Browser, config: RunConfig):
        self._playwright = playwright
        self.browser = browser
        self.config = config
        self.events: asyncio.Queue = asyncio.Queue()
        self.pump_task = asyncio.create_task(
            pump_events(self.events, config.verbose),
            name="browser-event-pump",
        )
        self._closed = False

    @classmethod
    async def launch(cls, config: RunConfig) -> BrowserSession:
        """Start playwright and one Chromium process for the whole run."""
        playwright = None
        try:
            playwright = await async_playwright().start()
            browser = await playwright.chromium.launch(**launch_options(config))
        except Exception as exc:
            if playwright is not None:
                with contextlib.suppress(Exception):
                    await playwright.stop()
            raise LaunchError(f"Failed to launch browser: {exc}") from exc

        log.info(
            "Launched browser (headless=%s, executable=%s)",
            config.headless,
            config.executable or "playwright default",
        )
        return cls(playwright, browser, config)

    def _forward_events(self, page: Page) -> None:
        page.on(CONSOLE_EVENT, lambda message: self.events.put_nowait((CONSOLE_EVENT, message.text)))
        page.on(PAGE_ERROR_EVENT, lambda error: self.events.put_nowait((PAGE_ERROR_EVENT, str(error))))

    async def new_page(self, url: str = "about:blank") -> Page:
        """Open a page in its own browser context."""
        context = await self.browser.new_context(viewport=self.config.viewport)
        page = await context.new_page()
        self._forward_events(page)

        if url != "about:blank":
            try:
                await page.goto(url)
            except PlaywrightError as exc:
                await self.close_page(page)
                raise NavigationError(f"Failed to navigate to {url}: {exc}") from exc
        return page

    async def close_page(self, page: Page) -> None:
        try:
            await page.context.close()
        except Exception as exc:
            log.warning("Failed to close page: %s", exc)

    async def close(self) -> None:
        """Stop the pump and the browser. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True

        self.pump_task.cancel()
        try:
            await self.pump_task
        except asyncio.CancelledError:
            pass
        except Exception as exc:
            log.warning("Event pump stopped with error: %s", exc)

        try:
            await self.browser.close()
        except Exception as exc:
            log.warning("Failed to close browser: %s", exc)
        try:
            await self._playwright.stop()
        except Exception as exc:
            log.warning("Failed to stop playwright: %s", exc)

    async def __aenter__(self) -> BrowserSession:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
