"""JSON and text file utilities."""
import json
from pathlib import Path


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file."""
    return path.read_text(encoding="utf-8")


def js_string_literal(value: str) -> str:
    """Quote a Python string as a JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)
