"""
All cheat-sheet sections, built and validated once.

A Library is constructed explicitly (see ``build_library``) and handed to
whatever needs it; nothing here keeps module-level state.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
import logging

from cheatsheet.kb.entities import CategoryIndex, Topic
from cheatsheet.kb.loader import load_section
from cheatsheet.kb.queries import get_topic
from cheatsheet.kb.topic_index import build_index
from cheatsheet.kb.validation import MIN_CONTENT_CHARS, Diagnostic, run_validation
from shared.sections import SECTIONS, get_section_from_path, get_topic_key_from_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Library:
    indexes: Mapping[str, CategoryIndex]
    diagnostics: Mapping[str, tuple[Diagnostic, ...]]

    def index(self, section: str) -> CategoryIndex | None:
        return self.indexes.get(section)

    def all_diagnostics(self) -> list[tuple[str, Diagnostic]]:
        return [(section, d) for section, found in self.diagnostics.items() for d in found]


def build_library(
    content_root: Path,
    *,
    sections: Iterable[str] = SECTIONS,
    run_validation_checks: bool,
    min_content_chars: int = MIN_CONTENT_CHARS,
) -> Library:
    indexes: dict[str, CategoryIndex] = {}
    diagnostics: dict[str, tuple[Diagnostic, ...]] = {}

    for section in sections:
        if section not in SECTIONS:
            raise ValueError(f"unknown section: {section!r}")
        index = build_index(load_section(content_root / section))
        indexes[section] = index
        diagnostics[section] = tuple(
            run_validation(
                index,
                enabled=run_validation_checks,
                label=section,
                min_content_chars=min_content_chars,
            )
        )

    logger.info(
        "build_library: %s sections, %s topics, %s diagnostics (validation=%s)",
        len(indexes),
        sum(len(i.topic_index) for i in indexes.values()),
        sum(len(d) for d in diagnostics.values()),
        "on" if run_validation_checks else "off",
    )
    return Library(indexes=MappingProxyType(indexes), diagnostics=MappingProxyType(diagnostics))


@dataclass(frozen=True)
class TopicLookup:
    status: str  # "found" | "welcome" | "not_found" | "unknown_section"
    section: str | None = None
    topic_key: str | None = None
    topic: Topic | None = None


def resolve_path(library: Library, path: str) -> TopicLookup:
    section = get_section_from_path(path)
    topic_key = get_topic_key_from_path(path)
    index = library.index(section) if section else None

    if index is None:
        return TopicLookup(status="unknown_section", topic_key=topic_key)
    if not topic_key:
        return TopicLookup(status="welcome", section=section)

    topic = get_topic(index, topic_key)
    if topic is None:
        return TopicLookup(status="not_found", section=section, topic_key=topic_key)
    return TopicLookup(status="found", section=section, topic_key=topic_key, topic=topic)
