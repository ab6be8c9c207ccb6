from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any

from cheatsheet.kb.slug import slugify


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class TopicMetadata:
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    tags: tuple[str, ...] = ()
    prerequisites: tuple[str, ...] = ()


@dataclass(frozen=True)
class Topic:
    key: str
    title: str
    content: str
    metadata: TopicMetadata = field(default_factory=TopicMetadata)


@dataclass(frozen=True)
class Category:
    title: str
    topics: tuple[Topic, ...]


@dataclass(frozen=True)
class CategoryIndex:
    categories: tuple[Category, ...]
    topic_index: Mapping[str, Topic] = field(default_factory=lambda: MappingProxyType({}))


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def _coerce_override(name: str, value: Any) -> Any:
    if name == "difficulty":
        return Difficulty(value)
    if name == "tags":
        return _ordered_unique(value)
    if name == "prerequisites":
        return tuple(value)
    raise ValueError(f"unknown topic metadata field: {name!r}")


def create_topic(title: str, content: str, metadata: Mapping[str, Any] | None = None) -> Topic:
    """Build a Topic whose key is derived from ``title``.

    ``metadata`` overrides individual defaults (difficulty "intermediate",
    no tags, no prerequisites); fields that are not given keep their
    default. Content defects are not checked here, see ``validation``.
    """
    overrides = {name: _coerce_override(name, value) for name, value in (metadata or {}).items()}
    return Topic(
        key=slugify(title),
        title=title,
        content=content,
        metadata=replace(TopicMetadata(), **overrides),
    )


def create_category(title: str, topics: Iterable[Topic]) -> Category:
    return Category(title=title, topics=tuple(topics))
