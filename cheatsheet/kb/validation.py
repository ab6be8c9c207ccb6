"""
Content integrity checks over a built CategoryIndex.

Every check runs per authored topic (walking ``categories``, so topics
shadowed in ``topic_index`` are still checked). Defects are collected and
returned, never raised; the caller decides what to do with them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

from cheatsheet.kb.entities import CategoryIndex, Topic

logger = logging.getLogger(__name__)

MIN_CONTENT_CHARS = 50


class DiagnosticKind(str, Enum):
    DUPLICATE_KEY = "duplicate_key"
    MISSING_TITLE = "missing_title"
    EMPTY_CONTENT = "empty_content"
    INVALID_PREREQUISITE = "invalid_prerequisite"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    topic_key: str | None = None
    category: str | None = None


def _check_title(topic: Topic, category: str) -> Diagnostic | None:
    if not topic.title.strip():
        return Diagnostic(
            kind=DiagnosticKind.MISSING_TITLE,
            message=f"Topic in category {category!r} has no title",
            topic_key=topic.key,
            category=category,
        )
    if not topic.key:
        return Diagnostic(
            kind=DiagnosticKind.MISSING_TITLE,
            message=f"Title {topic.title!r} in category {category!r} produces an empty key",
            topic_key=topic.key,
            category=category,
        )
    return None


def _check_content(topic: Topic, category: str, min_chars: int) -> Diagnostic | None:
    length = len(topic.content.strip())
    if length >= min_chars:
        return None
    return Diagnostic(
        kind=DiagnosticKind.EMPTY_CONTENT,
        message=f"Topic {topic.key!r} has {length} characters of content (minimum {min_chars})",
        topic_key=topic.key,
        category=category,
    )


def validate(index: CategoryIndex, *, min_content_chars: int = MIN_CONTENT_CHARS) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    # Separate from topic_index: the first occurrence is clean, later ones are flagged.
    seen_keys: set[str] = set()

    for category in index.categories:
        for topic in category.topics:
            if topic.key in seen_keys:
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.DUPLICATE_KEY,
                        message=f"Duplicate topic key {topic.key!r} (title {topic.title!r}) in category {category.title!r}",
                        topic_key=topic.key,
                        category=category.title,
                    )
                )
            seen_keys.add(topic.key)

            title_issue = _check_title(topic, category.title)
            if title_issue is not None:
                diagnostics.append(title_issue)

            content_issue = _check_content(topic, category.title, min_content_chars)
            if content_issue is not None:
                diagnostics.append(content_issue)

            for prerequisite in topic.metadata.prerequisites:
                if prerequisite not in index.topic_index:
                    diagnostics.append(
                        Diagnostic(
                            kind=DiagnosticKind.INVALID_PREREQUISITE,
                            message=f"Topic {topic.key!r} lists unknown prerequisite {prerequisite!r}",
                            topic_key=topic.key,
                            category=category.title,
                        )
                    )

    return diagnostics


def run_validation(
    index: CategoryIndex,
    *,
    enabled: bool,
    label: str,
    min_content_chars: int = MIN_CONTENT_CHARS,
) -> list[Diagnostic]:
    """Validate ``index`` and log each defect as a warning.

    Returns ``[]`` without scanning when ``enabled`` is false.
    """
    if not enabled:
        return []

    diagnostics = validate(index, min_content_chars=min_content_chars)
    for diagnostic in diagnostics:
        logger.warning("[%s] %s: %s", label, diagnostic.kind.value, diagnostic.message)
    if not diagnostics:
        topic_count = sum(len(c.topics) for c in index.categories)
        logger.info("[%s] %s topics validated, no issues", label, topic_count)
    return diagnostics
