from __future__ import annotations

from pathlib import Path

LONG_TEXT = "This body is long enough to pass the minimum content length check easily."


def write_topic(path: Path, front_matter: str, body: str = LONG_TEXT) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front_matter}\n---\n{body}\n", encoding="utf-8")
    return path
