from __future__ import annotations

from cheatsheet.kb.entities import CategoryIndex, Difficulty, Topic


def get_topic(index: CategoryIndex, key: str) -> Topic | None:
    return index.topic_index.get(key)


def get_all_topic_keys(index: CategoryIndex) -> list[str]:
    return list(index.topic_index.keys())


# Tag and difficulty lookups scan topic_index on every call; sections are small and static.
def get_topics_by_tag(index: CategoryIndex, tag: str) -> list[Topic]:
    return [t for t in index.topic_index.values() if tag in t.metadata.tags]


def get_topics_by_difficulty(index: CategoryIndex, difficulty: Difficulty | str) -> list[Topic]:
    level = Difficulty(difficulty)
    return [t for t in index.topic_index.values() if t.metadata.difficulty is level]
