from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from cheatsheet.kb.library import build_library
from cheatsheet.main import build_app_from_env, create_app


@pytest.fixture
def client(content_root: Path) -> TestClient:
    return TestClient(create_app(build_library(content_root, run_validation_checks=True)))


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok", "sections": 4}


def test_sections_navigation(client: TestClient) -> None:
    body = client.get("/sections").json()
    assert [(i["section"], i["topic_count"]) for i in body] == [
        ("javascript", 1),
        ("typescript", 0),
        ("react", 3),
        ("angular", 0),
    ]
    assert body[2]["label"] == "React"
    assert body[2]["path"] == "/react"


def test_section_contents_keep_authored_order(client: TestClient) -> None:
    body = client.get("/sections/react").json()

    assert [c["title"] for c in body["categories"]] == ["Core Fundamentals", "Hooks"]
    hooks = body["categories"][1]["topics"]
    assert [t["key"] for t in hooks] == ["usestate", "useeffect"]
    assert hooks[0]["route"] == "/react/usestate"
    assert hooks[0]["difficulty"] == "beginner"


def test_unknown_section_is_404(client: TestClient) -> None:
    assert client.get("/sections/cobol").status_code == 404
    assert client.get("/sections/cobol/topics").status_code == 404
    assert client.get("/sections/cobol/diagnostics").status_code == 404


def test_topic_detail(client: TestClient) -> None:
    body = client.get("/sections/react/topics/usestate").json()

    assert body["title"] == "useState"
    assert body["tags"] == ["hooks"]
    assert body["prerequisites"] == ["jsx"]
    assert body["content"].startswith("This body")


def test_topic_detail_missing_is_404(client: TestClient) -> None:
    assert client.get("/sections/react/topics/nope").status_code == 404


def test_topic_filters(client: TestClient) -> None:
    by_tag = client.get("/sections/react/topics", params={"tag": "hooks"}).json()
    assert sorted(t["key"] for t in by_tag) == ["useeffect", "usestate"]

    by_level = client.get("/sections/react/topics", params={"difficulty": "beginner"}).json()
    assert sorted(t["key"] for t in by_level) == ["jsx", "usestate"]

    both = client.get("/sections/react/topics", params={"tag": "hooks", "difficulty": "intermediate"}).json()
    assert [t["key"] for t in both] == ["useeffect"]

    assert len(client.get("/sections/react/topics").json()) == 3


def test_topic_filters_reject_bad_difficulty(client: TestClient) -> None:
    assert client.get("/sections/react/topics", params={"difficulty": "expert"}).status_code == 422


def test_diagnostics_endpoint(client: TestClient) -> None:
    body = client.get("/sections/react/diagnostics").json()

    assert sorted(d["kind"] for d in body) == ["empty_content", "invalid_prerequisite"]
    assert all(d["topic_key"] == "useeffect" for d in body)
    assert client.get("/sections/javascript/diagnostics").json() == []


def test_resolve(client: TestClient) -> None:
    found = client.get("/resolve", params={"path": "/react/jsx"}).json()
    assert found["status"] == "found"
    assert found["topic"]["title"] == "JSX"

    assert client.get("/resolve", params={"path": "/react/nope"}).json()["status"] == "not_found"
    assert client.get("/resolve", params={"path": "/cobol"}).json()["status"] == "unknown_section"


def test_build_app_from_env(content_root: Path, monkeypatch) -> None:
    monkeypatch.setenv("CONTENT_DIR", str(content_root))
    monkeypatch.setenv("RUN_VALIDATION", "off")

    client = TestClient(build_app_from_env())

    assert client.get("/sections/react/diagnostics").json() == []
    assert client.get("/sections/react/topics/jsx").status_code == 200
