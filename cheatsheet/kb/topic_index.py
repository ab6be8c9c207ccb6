from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from cheatsheet.kb.entities import Category, CategoryIndex, Topic


def build_index(categories: Iterable[Category]) -> CategoryIndex:
    """Fold ordered categories into a CategoryIndex.

    ``categories`` keeps every topic in its authored position. The key
    lookup keeps only the last topic seen for each key, so a shadowed topic
    is still listed in ``categories`` but ``topic_index[key]`` returns the
    later one. Nothing is reported here; ``validation`` flags duplicates.
    """
    ordered = tuple(categories)
    lookup: dict[str, Topic] = {}
    for category in ordered:
        for topic in category.topics:
            lookup[topic.key] = topic
    return CategoryIndex(categories=ordered, topic_index=MappingProxyType(lookup))
