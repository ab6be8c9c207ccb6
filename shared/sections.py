"""
Cheat-sheet sections and their routes.

Single source of truth for which sections exist, how they are labelled and
how topic paths are built and parsed, used by both the API and the audit
script.
"""
from __future__ import annotations

from dataclasses import dataclass


# Display order matters: navigation lists sections in this order.
SECTIONS: dict[str, str] = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "react": "React",
    "angular": "Angular",
}

ROUTES: dict[str, str] = {"home": "/", **{section: f"/{section}" for section in SECTIONS}}


@dataclass(frozen=True)
class NavItem:
    label: str
    path: str
    section: str


NAV_ITEMS: tuple[NavItem, ...] = tuple(
    NavItem(label=label, path=ROUTES[section], section=section) for section, label in SECTIONS.items()
)


def get_topic_route(section: str, topic_key: str | None = None) -> str:
    if section not in SECTIONS:
        raise ValueError(f"unknown section: {section!r}")
    base = ROUTES[section]
    return f"{base}/{topic_key}" if topic_key else base


def _segments(path: str) -> list[str]:
    return [s for s in path.split("?", 1)[0].split("#", 1)[0].split("/") if s]


def get_section_from_path(path: str) -> str | None:
    segments = _segments(path)
    if not segments:
        return None
    section = segments[0].lower()
    return section if section in SECTIONS else None


def get_topic_key_from_path(path: str) -> str | None:
    segments = _segments(path)
    return segments[1] if len(segments) > 1 else None
