"""Path utilities for screenshots and the page under test."""
from pathlib import Path

from quizrunner.errors import NavigationError


def sanitize_for_filename(value: str) -> str:
    """Replace every non-alphanumeric ASCII character with '_'."""
    return "".join(c if c.isascii() and c.isalnum() else "_" for c in value)


def screenshot_path(output_dir: Path, name: str) -> Path:
    """Get path to a diagnostic screenshot."""
    return output_dir / f"{name}.png"


def page_file_url(html_path: Path) -> str:
    """Resolve the page under test to a file:// URL."""
    try:
        resolved = Path(html_path).resolve(strict=True)
    except OSError as exc:
        raise NavigationError(f"Failed to resolve HTML path {html_path}: {exc}") from exc
    return resolved.as_uri()
