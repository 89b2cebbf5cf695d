"""Runner configuration and constants."""
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Directories
DATA_DIR = Path(os.environ.get("QUESTIONS_DIR", Path.cwd() / "data"))
OUTPUT_DIR = Path(os.environ.get("TEST_OUTPUT_DIR", Path.cwd() / "test_output"))
DEFAULT_HTML_PATH = Path("./index.html")

# Question-set discovery
QUESTION_FILE_PREFIX = "questions"
QUESTION_FILE_SUFFIX = ".json"

# Timing
DEFAULT_TIMEOUT_SECONDS = _parse_int_env("RUNNER_TIMEOUT_SECONDS", 10)
POLL_INTERVAL_SECONDS = 0.1
WRONG_ANSWER_PAUSE_SECONDS = 0.5

# Browser
CHROME_ENV_VAR = "CHROME"
MACOS_CHROME_PATH = Path("/Applications/Google Chrome.app/Contents/MacOS/Google Chrome")
BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]
VIEWPORT_WIDTH = _parse_int_env("RUNNER_VIEWPORT_WIDTH", 1280)
VIEWPORT_HEIGHT = _parse_int_env("RUNNER_VIEWPORT_HEIGHT", 800)


def resolve_chrome_executable() -> Path | None:
    """
    Browser executable to launch, or None to use playwright's bundled lookup.
    The CHROME env override wins over the platform default.
    """
    override = os.environ.get(CHROME_ENV_VAR)
    if override:
        return Path(override)

    if sys.platform == "darwin" and MACOS_CHROME_PATH.exists():
        return MACOS_CHROME_PATH

    return None


@dataclass
class RunConfig:
    """Settings for one runner invocation."""

    headless: bool = False
    name_filter: str | None = None
    verbose: bool = False
    html_path: Path = DEFAULT_HTML_PATH
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    first_per_mode: bool = False
    data_dir: Path = DATA_DIR
    output_dir: Path = OUTPUT_DIR
    viewport: dict[str, int] = field(
        default_factory=lambda: {"width": VIEWPORT_WIDTH, "height": VIEWPORT_HEIGHT}
    )
    executable: Path | None = field(default_factory=resolve_chrome_executable)
