"""End-to-end tests for request-scoped transactions."""

import pytest
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.testclient import TestClient

from scribe.domain.error import ValidationError
from scribe.domain.repository import AfterCommit
from scribe.domain.service import TagService
from scribe.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def committed_hooks() -> list[str]:
    return []


@pytest.fixture
def client(committed_hooks):
    """Test client with an extra route that writes, queues a hook, then may fail."""
    router = APIRouter(route_class=DishkaRoute)

    @router.post("/write-then-maybe-fail")
    async def write_then_maybe_fail(
        tag_service: FromDishka[TagService],
        after_commit: FromDishka[AfterCommit],
        fail: bool = False,
    ) -> dict:
        tag = await tag_service.create("Written")

        async def record() -> None:
            committed_hooks.append(tag.name.root)

        after_commit.add(record)
        if fail:
            raise ValidationError("later step failed")
        return {"ok": True}

    app = create_app(build_test_container())
    app.include_router(router)
    return TestClient(app)


class TestRequestTransaction:
    """Commit and rollback at the end of a request."""

    def test_successful_request_commits_and_runs_hooks(self, client, committed_hooks):
        # Act
        response = client.post("/write-then-maybe-fail")

        # Assert
        assert response.status_code == 200
        assert committed_hooks == ["Written"]
        assert [t["name"] for t in client.get("/tags/all").json()["tags"]] == ["Written"]

    def test_domain_error_rolls_back_and_skips_hooks(self, client, committed_hooks):
        # Act
        response = client.post("/write-then-maybe-fail", params={"fail": True})

        # Assert
        assert response.status_code == 400
        assert response.json() == {"detail": "later step failed"}
        assert committed_hooks == []
        assert client.get("/tags/all").json()["tags"] == []

    def test_failed_request_does_not_affect_the_next_one(self, client, committed_hooks):
        client.post("/write-then-maybe-fail", params={"fail": True})

        response = client.post("/write-then-maybe-fail")

        assert response.status_code == 200
        assert committed_hooks == ["Written"]
