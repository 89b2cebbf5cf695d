"""Utility modules."""
from quizrunner.utils.json_utils import js_string_literal, read_text_file
from quizrunner.utils.paths import page_file_url, sanitize_for_filename, screenshot_path

__all__ = [
    "js_string_literal",
    "read_text_file",
    "page_file_url",
    "sanitize_for_filename",
    "screenshot_path",
]
