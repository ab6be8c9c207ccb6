from __future__ import annotations

from pathlib import Path
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from cheatsheet.config import Settings, get_settings
from cheatsheet.kb.entities import CategoryIndex, Difficulty, Topic
from cheatsheet.kb.library import Library, build_library, resolve_path
from cheatsheet.kb.queries import get_topic, get_topics_by_difficulty, get_topics_by_tag
from shared.sections import NAV_ITEMS, get_topic_route


class NavItemOut(BaseModel):
    label: str
    path: str
    section: str
    topic_count: int


class TopicSummary(BaseModel):
    key: str
    title: str
    route: str
    difficulty: Difficulty


class TopicOut(TopicSummary):
    content: str
    tags: list[str]
    prerequisites: list[str]


class CategoryOut(BaseModel):
    title: str
    topics: list[TopicSummary]


class SectionOut(BaseModel):
    section: str
    categories: list[CategoryOut]


class DiagnosticOut(BaseModel):
    kind: str
    message: str
    topic_key: str | None
    category: str | None


class ResolveOut(BaseModel):
    status: str
    section: str | None
    topic_key: str | None
    topic: TopicOut | None


def _summary(section: str, topic: Topic) -> TopicSummary:
    return TopicSummary(
        key=topic.key,
        title=topic.title,
        route=get_topic_route(section, topic.key),
        difficulty=topic.metadata.difficulty,
    )


def _topic_out(section: str, topic: Topic) -> TopicOut:
    return TopicOut(
        **_summary(section, topic).model_dump(),
        content=topic.content,
        tags=list(topic.metadata.tags),
        prerequisites=list(topic.metadata.prerequisites),
    )


def create_app(library: Library) -> FastAPI:
    app = FastAPI(title="Cheat Sheet KB", version="0.1.0")

    def _index(section: str) -> CategoryIndex:
        index = library.index(section)
        if index is None:
            raise HTTPException(status_code=404, detail=f"Unknown section: {section}")
        return index

    @app.get("/health")
    def health() -> dict[str, str | int]:
        return {"status": "ok", "sections": len(library.indexes)}

    @app.get("/sections", response_model=list[NavItemOut])
    def sections() -> list[NavItemOut]:
        out: list[NavItemOut] = []
        for item in NAV_ITEMS:
            index = library.index(item.section)
            if index is None:
                continue
            out.append(
                NavItemOut(label=item.label, path=item.path, section=item.section, topic_count=len(index.topic_index))
            )
        return out

    @app.get("/sections/{section}", response_model=SectionOut)
    def section_contents(section: str) -> SectionOut:
        index = _index(section)
        return SectionOut(
            section=section,
            categories=[
                CategoryOut(title=c.title, topics=[_summary(section, t) for t in c.topics]) for c in index.categories
            ],
        )

    @app.get("/sections/{section}/topics", response_model=list[TopicSummary])
    def list_topics(section: str, tag: str | None = None, difficulty: Difficulty | None = None) -> list[TopicSummary]:
        index = _index(section)
        topics = get_topics_by_tag(index, tag) if tag is not None else list(index.topic_index.values())
        if difficulty is not None:
            level_keys = {t.key for t in get_topics_by_difficulty(index, difficulty)}
            topics = [t for t in topics if t.key in level_keys]
        return [_summary(section, t) for t in topics]

    @app.get("/sections/{section}/topics/{key}", response_model=TopicOut)
    def topic_detail(section: str, key: str) -> TopicOut:
        topic = get_topic(_index(section), key)
        if topic is None:
            raise HTTPException(status_code=404, detail=f"Topic {key!r} not found in {section}")
        return _topic_out(section, topic)

    @app.get("/sections/{section}/diagnostics", response_model=list[DiagnosticOut])
    def section_diagnostics(section: str) -> list[DiagnosticOut]:
        _index(section)
        return [
            DiagnosticOut(kind=d.kind.value, message=d.message, topic_key=d.topic_key, category=d.category)
            for d in library.diagnostics.get(section, ())
        ]

    @app.get("/resolve", response_model=ResolveOut)
    def resolve(path: str) -> ResolveOut:
        lookup = resolve_path(library, path)
        topic = _topic_out(lookup.section, lookup.topic) if lookup.topic is not None and lookup.section else None
        return ResolveOut(status=lookup.status, section=lookup.section, topic_key=lookup.topic_key, topic=topic)

    return app


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level)


def build_app_from_env() -> FastAPI:
    load_dotenv()
    settings = get_settings()
    _setup_logging(settings)

    library = build_library(
        Path(settings.content_dir),
        run_validation_checks=settings.run_validation,
        min_content_chars=settings.min_content_chars,
    )
    return create_app(library)
