from pathlib import Path

import pytest

from quizrunner import config
from quizrunner.utils import page_file_url, sanitize_for_filename
from quizrunner.errors import NavigationError


def test_parse_int_env_falls_back_on_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUNNER_TEST_INT", "42")
    assert config._parse_int_env("RUNNER_TEST_INT", 7) == 42
    monkeypatch.setenv("RUNNER_TEST_INT", "forty-two")
    assert config._parse_int_env("RUNNER_TEST_INT", 7) == 7
    monkeypatch.delenv("RUNNER_TEST_INT")
    assert config._parse_int_env("RUNNER_TEST_INT", 7) == 7


def test_chrome_env_override_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHROME", "/opt/chrome/chrome")
    monkeypatch.setattr(config.sys, "platform", "darwin")
    assert config.resolve_chrome_executable() == Path("/opt/chrome/chrome")


def test_macos_default_is_probed(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    fake_chrome = tmp_path / "Google Chrome"
    fake_chrome.write_text("", encoding="utf-8")
    monkeypatch.delenv("CHROME", raising=False)
    monkeypatch.setattr(config.sys, "platform", "darwin")
    monkeypatch.setattr(config, "MACOS_CHROME_PATH", fake_chrome)
    assert config.resolve_chrome_executable() == fake_chrome


def test_no_override_falls_back_to_playwright_default(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CHROME", raising=False)
    monkeypatch.setattr(config.sys, "platform", "linux")
    assert config.resolve_chrome_executable() is None

    monkeypatch.setattr(config.sys, "platform", "darwin")
    monkeypatch.setattr(config, "MACOS_CHROME_PATH", tmp_path / "missing")
    assert config.resolve_chrome_executable() is None


def test_sanitize_for_filename() -> None:
    assert sanitize_for_filename("[data-key='questions_easy']") == "_data_key__questions_easy__"
    assert sanitize_for_filename("#finish-screen") == "_finish_screen"
    assert sanitize_for_filename("abc123") == "abc123"


def test_page_file_url(tmp_path: Path) -> None:
    page = tmp_path / "index.html"
    page.write_text("", encoding="utf-8")
    assert page_file_url(page) == page.resolve().as_uri()
    with pytest.raises(NavigationError):
        page_file_url(tmp_path / "missing.html")
