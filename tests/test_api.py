"""End-to-end tests for the HTTP API."""

import os

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.analytics_service import get_analytics_service
from app.services.classification import ClassificationRegistry
from app.services.comment_service import get_comment_service
from app.services.issue_service import IssueService, get_issue_service
from app.services.media_service import get_media_service
from app.storage import set_record_store

from conftest import ExplodingProvider, VALID_ISSUE, make_image_bytes


@pytest.fixture
def client(store, issue_service, comment_service, analytics_service, media_service):
    app.dependency_overrides[get_issue_service] = lambda: issue_service
    app.dependency_overrides[get_comment_service] = lambda: comment_service
    app.dependency_overrides[get_analytics_service] = lambda: analytics_service
    app.dependency_overrides[get_media_service] = lambda: media_service
    set_record_store(store)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    set_record_store(None)


def submit(client, **overrides):
    data = dict(VALID_ISSUE, **overrides)
    data = {k: v for k, v in data.items() if v is not None}
    return client.post("/api/issues", data=data)


class TestHealth:

    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "running"
        assert body["issues"] == "/api/issues"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_db_health(self, client):
        resp = client.get("/health/db")
        assert resp.status_code == 200
        assert resp.json()["database"] == "memory"


class TestSubmitIssue:

    def test_created_with_camel_case_fields(self, client):
        resp = submit(client)

        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == "new"
        assert body["id"]
        assert body["createdAt"] == body["updatedAt"]
        assert body["aiCategory"] is None
        assert body["aiConfidence"] is None
        assert body["imageUrl"] is None
        assert body["assignedTo"] is None

    def test_background_classification(self, client, stub_provider):
        issue_id = submit(client).json()["id"]

        fetched = client.get(f"/api/issues/{issue_id}").json()
        assert stub_provider.calls == [(VALID_ISSUE["title"], VALID_ISSUE["description"])]
        assert fetched["aiCategory"] == "roads"
        assert fetched["aiConfidence"] == 87
        assert fetched["category"] == VALID_ISSUE["category"]

    def test_classifier_outage_is_invisible(self, client, store, clock):
        failing = IssueService(store=store, classifier=ClassificationRegistry(provider=ExplodingProvider()), clock=clock)
        app.dependency_overrides[get_issue_service] = lambda: failing

        resp = submit(client)
        assert resp.status_code == 201

        fetched = client.get(f"/api/issues/{resp.json()['id']}").json()
        assert fetched["aiCategory"] is None
        assert fetched["aiConfidence"] is None

    def test_invalid_category(self, client, store):
        resp = submit(client, category="potholes")
        assert resp.status_code == 400
        assert "category" in resp.json()["detail"]
        assert store.list("issues") == []

    def test_missing_title(self, client, store):
        resp = submit(client, title=None)
        assert resp.status_code == 400
        assert store.list("issues") == []

    def test_long_text_accepted(self, client):
        resp = submit(client, title="Broken footpath " * 40, description="Detail. " * 1000)
        assert resp.status_code == 201
        assert len(resp.json()["description"]) > 5000

    def test_status_field_ignored(self, client):
        assert submit(client, status="closed").json()["status"] == "new"

    def test_coordinates_json(self, client):
        body = submit(client, coordinates='{"lat": 9.98, "lng": 76.29}').json()
        assert body["coordinates"] == {"lat": 9.98, "lng": 76.29}

    def test_bad_coordinates(self, client):
        assert submit(client, coordinates="9.98,76.29").status_code == 400

    def test_with_image(self, client, media_service):
        resp = client.post(
            "/api/issues",
            data=VALID_ISSUE,
            files={"image": ("pothole.jpg", make_image_bytes(fmt="JPEG"), "image/jpeg")},
        )

        assert resp.status_code == 201
        image_url = resp.json()["imageUrl"]
        assert image_url.startswith("/uploads/")
        assert os.path.exists(os.path.join(media_service.upload_dir, image_url.rsplit("/", 1)[1]))

    def test_rejected_image_creates_nothing(self, client, store):
        resp = client.post(
            "/api/issues",
            data=VALID_ISSUE,
            files={"image": ("notes.txt", b"hello", "text/plain")},
        )
        assert resp.status_code == 400
        assert store.list("issues") == []

    def test_invalid_input_does_not_store_image(self, client, media_service):
        resp = client.post(
            "/api/issues",
            data=dict(VALID_ISSUE, priority="urgent"),
            files={"image": ("pothole.jpg", b"\xff\xd8\xff", "image/jpeg")},
        )
        assert resp.status_code == 400
        assert not os.path.exists(media_service.upload_dir)

    def test_reporter_issues(self, client):
        mine = submit(client, reportedBy="user-42").json()
        submit(client)

        listed = client.get("/api/users/user-42/issues").json()
        assert [i["id"] for i in listed] == [mine["id"]]
        assert listed[0]["reportedBy"] == "user-42"


class TestQueryIssues:

    def test_get_unknown(self, client):
        assert client.get("/api/issues/missing").status_code == 404

    def test_list_filters_and_pagination(self, client):
        ids = [submit(client, title=f"Issue {i}").json()["id"] for i in range(5)]
        submit(client, category="water")

        roads = client.get("/api/issues", params={"category": "roads"}).json()
        assert [i["id"] for i in roads] == list(reversed(ids))

        page = client.get("/api/issues", params={"category": "roads", "limit": 2, "offset": 1}).json()
        assert [i["id"] for i in page] == [ids[3], ids[2]]

        assert client.get("/api/issues", params={"offset": 50}).json() == []

    def test_filter_by_status(self, client):
        first = submit(client).json()["id"]
        submit(client)
        client.patch(f"/api/issues/{first}", json={"status": "resolved"})

        resolved = client.get("/api/issues", params={"status": "resolved"}).json()
        assert [i["id"] for i in resolved] == [first]

    def test_empty_filters_are_ignored(self, client):
        first = submit(client).json()["id"]
        second = submit(client, state="goa", district="north-goa").json()["id"]

        listed = client.get("/api/issues?state=&district=&category=&status=").json()
        assert [i["id"] for i in listed] == [second, first]

    def test_invalid_limit(self, client):
        assert client.get("/api/issues", params={"limit": 0}).status_code == 422


class TestUpdateAndDelete:

    def test_patch(self, client):
        issue = submit(client).json()
        resp = client.patch(f"/api/issues/{issue['id']}", json={"status": "in_progress", "assignedTo": "PWD"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "in_progress"
        assert body["assignedTo"] == "PWD"
        assert body["title"] == issue["title"]

    def test_patch_unknown(self, client):
        assert client.patch("/api/issues/missing", json={"status": "closed"}).status_code == 404

    def test_patch_invalid_status(self, client):
        issue_id = submit(client).json()["id"]
        resp = client.patch(f"/api/issues/{issue_id}", json={"status": "done"})
        assert resp.status_code == 400
        assert client.get(f"/api/issues/{issue_id}").json()["status"] == "new"

    def test_delete(self, client):
        issue_id = submit(client).json()["id"]

        assert client.delete(f"/api/issues/{issue_id}").json() == {"success": True}
        assert client.get(f"/api/issues/{issue_id}").status_code == 404
        assert client.delete(f"/api/issues/{issue_id}").status_code == 404


class TestComments:

    def test_add_and_list(self, client):
        issue_id = submit(client).json()["id"]

        first = client.post(f"/api/issues/{issue_id}/comments", json={"content": "Seen this too"})
        second = client.post(
            f"/api/issues/{issue_id}/comments",
            json={"content": "Forwarded to PWD", "isInternal": True, "userId": "staff-1"},
        )
        assert first.status_code == 201
        assert second.json()["isInternal"] is True
        assert second.json()["userId"] == "staff-1"

        listed = client.get(f"/api/issues/{issue_id}/comments").json()
        assert [c["content"] for c in listed] == ["Seen this too", "Forwarded to PWD"]

        public = client.get(f"/api/issues/{issue_id}/comments", params={"includeInternal": "false"}).json()
        assert [c["content"] for c in public] == ["Seen this too"]

    def test_blank_comment(self, client):
        issue_id = submit(client).json()["id"]
        resp = client.post(f"/api/issues/{issue_id}/comments", json={"content": "  "})
        assert resp.status_code == 400

    def test_comment_on_unknown_issue(self, client):
        resp = client.post("/api/issues/missing/comments", json={"content": "hello"})
        assert resp.status_code == 404


class TestStatsAndLocations:

    def test_stats(self, client):
        first = submit(client).json()["id"]
        submit(client)
        submit(client, category="water", priority="low")
        client.patch(f"/api/issues/{first}", json={"status": "resolved"})

        stats = client.get("/api/analytics/stats").json()
        assert stats == {
            "total": 3,
            "byStatus": {"new": 2, "resolved": 1},
            "byCategory": {"roads": 2, "water": 1},
            "byPriority": {"high": 2, "low": 1},
        }

    def test_states_and_districts(self, client):
        assert {"value": "goa", "label": "Goa"} in client.get("/api/states").json()
        districts = client.get("/api/districts/goa").json()
        assert [d["value"] for d in districts] == ["north-goa", "south-goa"]
        assert client.get("/api/districts/atlantis").json() == []
