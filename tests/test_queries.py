from __future__ import annotations

import pytest

from cheatsheet.kb.entities import Difficulty, create_category, create_topic
from cheatsheet.kb.queries import get_all_topic_keys, get_topic, get_topics_by_difficulty, get_topics_by_tag
from cheatsheet.kb.topic_index import build_index


def test_get_topic(hooks_index) -> None:
    assert get_topic(hooks_index, "usestate").title == "useState"
    assert get_topic(hooks_index, "missing") is None


def test_get_all_topic_keys(hooks_index) -> None:
    assert sorted(get_all_topic_keys(hooks_index)) == ["components", "custom-hooks", "jsx", "useeffect", "usestate"]


def test_get_topics_by_tag_spans_categories() -> None:
    index = build_index(
        [
            create_category("Core", [create_topic("Context", "", {"tags": ["hooks", "state"]}), create_topic("JSX", "")]),
            create_category("Hooks", [create_topic("useState", "", {"tags": ["hooks"]})]),
        ]
    )

    assert sorted(t.key for t in get_topics_by_tag(index, "hooks")) == ["context", "usestate"]
    assert get_topics_by_tag(index, "hook") == []


def test_get_topics_by_tag_only_sees_surviving_duplicates() -> None:
    shadowed = create_topic("X", "old", {"tags": ["hooks"]})
    survivor = create_topic("X", "new", {"tags": ["other"]})
    index = build_index([create_category("A", [shadowed, survivor])])

    assert get_topics_by_tag(index, "hooks") == []
    assert get_topics_by_tag(index, "other")[0] is survivor


def test_get_topics_by_difficulty(hooks_index) -> None:
    beginner = {t.key for t in get_topics_by_difficulty(hooks_index, "beginner")}
    assert beginner == {"jsx", "components", "usestate"}
    assert [t.key for t in get_topics_by_difficulty(hooks_index, Difficulty.INTERMEDIATE)] == ["useeffect"]
    assert [t.key for t in get_topics_by_difficulty(hooks_index, Difficulty.ADVANCED)] == ["custom-hooks"]


def test_get_topics_by_difficulty_rejects_unknown_level(hooks_index) -> None:
    with pytest.raises(ValueError):
        get_topics_by_difficulty(hooks_index, "expert")
