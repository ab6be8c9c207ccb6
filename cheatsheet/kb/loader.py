from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
import logging
import re
from typing import Any

import yaml

from cheatsheet.kb.entities import Category, Difficulty, Topic, create_category, create_topic

logger = logging.getLogger(__name__)

CATEGORY_FILE = "_category.yml"

# (title, content, tags, difficulty, prerequisites)
TopicDefinition = tuple[str, str, Sequence[str], Difficulty | str, Sequence[str]]

_ORDER_PREFIX = re.compile(r"^\d+[-_ ]*")


class ContentLoadError(ValueError):
    pass


def topic_from_definition(definition: TopicDefinition) -> Topic:
    title, content, tags, difficulty, prerequisites = definition
    return create_topic(
        title,
        content,
        {"difficulty": difficulty, "tags": tags, "prerequisites": prerequisites},
    )


def category_from_definitions(title: str, definitions: Iterable[TopicDefinition]) -> Category:
    return create_category(title, [topic_from_definition(d) for d in definitions])


def _title_from_dirname(name: str) -> str:
    stripped = _ORDER_PREFIX.sub("", name) or name
    return stripped.replace("-", " ").replace("_", " ").strip().title()


def _split_front_matter(text: str, path: Path) -> tuple[dict[str, Any], str]:
    lines = text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, text

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == "---":
            break
    else:
        raise ContentLoadError(f"{path}: front matter is not closed with '---'")

    raw = "\n".join(lines[1:end])
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ContentLoadError(f"{path}: invalid front matter ({exc})") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentLoadError(f"{path}: front matter must be a mapping")
    return data, "\n".join(lines[end + 1 :])


def _first_heading(body: str) -> str | None:
    for line in body.splitlines():
        stripped = line.strip()
        if stripped.startswith("#"):
            title = stripped.lstrip("#").strip()
            if title:
                return title
    return None


def _string_list(meta: dict[str, Any], name: str, path: Path) -> list[str]:
    value = meta.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ContentLoadError(f"{path}: {name!r} must be a list")
    return [str(v) for v in value]


def load_topic_file(path: Path) -> Topic:
    text = path.read_text(encoding="utf-8-sig")
    meta, body = _split_front_matter(text, path)

    title = meta.get("title")
    if title is None:
        title = _first_heading(body) or path.stem
    difficulty = meta.get("difficulty", Difficulty.INTERMEDIATE.value)
    try:
        difficulty = Difficulty(str(difficulty))
    except ValueError:
        allowed = ", ".join(d.value for d in Difficulty)
        raise ContentLoadError(f"{path}: unknown difficulty {difficulty!r} (expected one of: {allowed})") from None

    return topic_from_definition(
        (
            str(title),
            body.strip(),
            _string_list(meta, "tags", path),
            difficulty,
            _string_list(meta, "prerequisites", path),
        )
    )


def _category_title(category_dir: Path) -> str:
    meta_path = category_dir / CATEGORY_FILE
    if meta_path.is_file():
        try:
            data = yaml.safe_load(meta_path.read_text(encoding="utf-8-sig")) or {}
        except yaml.YAMLError as exc:
            raise ContentLoadError(f"{meta_path}: invalid YAML ({exc})") from exc
        if not isinstance(data, dict):
            raise ContentLoadError(f"{meta_path}: expected a mapping")
        if data.get("title"):
            return str(data["title"])
    return _title_from_dirname(category_dir.name)


def load_category(category_dir: Path) -> Category:
    topics = [load_topic_file(p) for p in sorted(category_dir.glob("*.md")) if p.is_file()]
    return create_category(_category_title(category_dir), topics)


def load_section(section_dir: Path) -> list[Category]:
    if not section_dir.is_dir():
        logger.warning("load_section: directory not found: %s", section_dir)
        return []

    categories = [
        load_category(d) for d in sorted(section_dir.iterdir()) if d.is_dir() and not d.name.startswith((".", "_"))
    ]
    logger.debug(
        "load_section: %s categories, %s topics from %s",
        len(categories),
        sum(len(c.topics) for c in categories),
        section_dir,
    )
    return categories
