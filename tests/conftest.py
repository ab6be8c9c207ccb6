from __future__ import annotations

from pathlib import Path

import pytest

from cheatsheet.kb.entities import CategoryIndex, create_category, create_topic
from cheatsheet.kb.topic_index import build_index

from tests.helpers import LONG_TEXT, write_topic


@pytest.fixture
def hooks_index() -> CategoryIndex:
    return build_index(
        [
            create_category(
                "Core Fundamentals",
                [
                    create_topic("JSX", LONG_TEXT, {"difficulty": "beginner", "tags": ["syntax"]}),
                    create_topic("Components", LONG_TEXT, {"difficulty": "beginner", "tags": ["components"]}),
                ],
            ),
            create_category(
                "Hooks",
                [
                    create_topic("useState", LONG_TEXT, {"difficulty": "beginner", "tags": ["hooks", "state"]}),
                    create_topic(
                        "useEffect",
                        LONG_TEXT,
                        {"tags": ["hooks"], "prerequisites": ["usestate"]},
                    ),
                    create_topic("Custom Hooks", LONG_TEXT, {"difficulty": "advanced", "tags": ["hooks", "patterns"]}),
                ],
            ),
        ]
    )


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    (root / "react" / "01-core").mkdir(parents=True)
    (root / "react" / "01-core" / "_category.yml").write_text("title: Core Fundamentals\n", encoding="utf-8")
    write_topic(root / "react" / "01-core" / "01-jsx.md", "title: JSX\ndifficulty: beginner\ntags: [syntax]")
    write_topic(
        root / "react" / "02-hooks" / "01-usestate.md",
        "title: useState\ndifficulty: beginner\ntags: [hooks]\nprerequisites: [jsx]",
    )
    write_topic(
        root / "react" / "02-hooks" / "02-broken.md",
        "title: useEffect\ntags: [hooks]\nprerequisites: [nonexistent-key]",
        body="Too short.",
    )
    write_topic(root / "javascript" / "01-basics" / "01-closures.md", "title: Closures\ntags: [scope]")
    return root
