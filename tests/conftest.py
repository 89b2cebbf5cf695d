import json
import re
from pathlib import Path

import pytest
from playwright.async_api import Error as PlaywrightError

from quizrunner.config import RunConfig
from quizrunner.services.executor import START_SCREEN_VISIBLE_JS, TILE_KEYS_JS

PRESENCE_RE = re.compile(r'^document\.querySelector\((".*")\) !== null$')
CLICK_RE = re.compile(r'^document\.querySelector\((".*")\)\.click\(\)$')
NTH_CHOICE_RE = re.compile(r"^\.choice-button:nth-child\((\d+)\)$")


def question_payload(index: int, correct: int = 0, choices: int = 3) -> dict:
    return {
        "id": f"q{index}",
        "question": f"Question {index}?",
        "choices": [f"Choice {n}" for n in range(choices)],
        "correctAnswer": correct,
        "explanation": "Because.",
    }


def question_set_payload(title: str, mode: str, corrects: list[int], choices: int = 3) -> dict:
    return {
        "metadata": {
            "title": title,
            "description": f"{title} description",
            "mode": mode,
            "targetAge": "8-10",
            "subject": "math",
        },
        "questions": [
            question_payload(index, correct, choices)
            for index, correct in enumerate(corrects, start=1)
        ],
    }


def write_question_set(
    data_dir: Path,
    filename: str,
    mode: str = "easy",
    corrects: list[int] | None = None,
    title: str | None = None,
    choices: int = 3,
) -> Path:
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / filename
    payload = question_set_payload(title or filename, mode, corrects or [0], choices)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class FakeContext:
    def __init__(self, page=None):
        self.page = page
        self.closed = False

    async def new_page(self):
        return self.page

    async def close(self) -> None:
        self.closed = True


class FakeGamePage:
    """
    Minimal stand-in for the quiz page: start -> game -> result -> ... -> finish.
    Only understands the JS expressions the runner sends.
    """

    def __init__(
        self,
        tile_keys: list[str],
        correct_answers: list[int],
        n_choices: int = 3,
        stay_on_wrong: bool = False,
        start_visible: bool = True,
        render_tiles: bool = True,
    ):
        self.tile_keys = tile_keys
        self.correct_answers = correct_answers
        self.n_choices = n_choices
        self.stay_on_wrong = stay_on_wrong
        self.start_visible = start_visible
        self.render_tiles = render_tiles
        self.state = "blank"
        self.current = 0
        self.clicks: list[str] = []
        self.screenshots: list[str] = []
        self.visited: list[str] = []
        self.handlers: dict[str, list] = {}
        self.context = FakeContext(self)
        self.goto_error: Exception | None = None

    def on(self, event, handler) -> None:
        self.handlers.setdefault(event, []).append(handler)

    async def goto(self, url: str) -> None:
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)
        self.state = "start"

    async def screenshot(self, path: str) -> bytes:
        self.screenshots.append(Path(path).stem)
        return b""

    def _exists(self, selector: str) -> bool:
        if self.state == "start":
            if selector == "#start-screen":
                return True
            if not self.render_tiles:
                return False
            if selector == ".question-set-tile":
                return bool(self.tile_keys)
            return selector in {f"[data-key='{key}']" for key in self.tile_keys}
        if self.state == "game":
            if selector in ("#game-screen", ".choice-button"):
                return True
            match = NTH_CHOICE_RE.match(selector)
            return bool(match) and 1 <= int(match.group(1)) <= self.n_choices
        if self.state == "result":
            return selector in ("#game-screen", "#result-screen", "#next-button")
        if self.state == "finish":
            return selector == "#finish-screen"
        return False

    def _click(self, selector: str) -> None:
        if not self._exists(selector):
            raise PlaywrightError("TypeError: Cannot read properties of null (reading 'click')")
        self.clicks.append(selector)
        if self.state == "start" and selector.startswith("[data-key="):
            self.state = "game"
            return
        match = NTH_CHOICE_RE.match(selector)
        if self.state == "game" and match:
            index = int(match.group(1)) - 1
            if self.stay_on_wrong and index != self.correct_answers[self.current]:
                return
            self.state = "result"
            return
        if self.state == "result" and selector == "#next-button":
            self.current += 1
            self.state = "finish" if self.current >= len(self.correct_answers) else "game"

    async def evaluate(self, expression: str):
        match = PRESENCE_RE.match(expression)
        if match:
            return self._exists(json.loads(match.group(1)))
        match = CLICK_RE.match(expression)
        if match:
            self._click(json.loads(match.group(1)))
            return None
        if expression == START_SCREEN_VISIBLE_JS:
            return self.start_visible
        if expression == TILE_KEYS_JS:
            return list(self.tile_keys)
        raise PlaywrightError(f"Unexpected expression: {expression}")


class FakeSession:
    def __init__(self, page: FakeGamePage):
        self.page = page
        self.opened = 0
        self.closed_pages = 0
        self.closed = False

    async def new_page(self, url: str = "about:blank"):
        self.opened += 1
        if url != "about:blank":
            await self.page.goto(url)
        return self.page

    async def close_page(self, page) -> None:
        self.closed_pages += 1
        await page.context.close()

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def html_path(tmp_path: Path) -> Path:
    path = tmp_path / "index.html"
    path.write_text("<html></html>", encoding="utf-8")
    return path


@pytest.fixture
def run_config(tmp_path: Path, html_path: Path) -> RunConfig:
    return RunConfig(
        headless=True,
        html_path=html_path,
        timeout=0.3,
        data_dir=tmp_path / "data",
        output_dir=tmp_path / "out",
        executable=None,
    )
