"""
Tests for the fake server and payload builders.
"""

import asyncio

import httpx
import pytest

from bbserver.envelope import decode
from bbserver.exceptions import NotFoundError
from bbserver.testing import (
    FakeBitbucketServer,
    changes_payload,
    create_pull_request,
    create_repo,
    merge_status_payload,
    pull_request_payload,
)
from bbserver.project import get_project_key
from bbserver.types import MergeabilityReport, PagedChangeSet, PullRequestSnapshot

MERGE_PATH = "/rest/api/1.0/projects/ops/repos/infra/pull-requests/1/merge"


class TestFakeServer:
    def test_queued_responses_in_order_then_sticky(self) -> None:
        server = FakeBitbucketServer()
        server.add("GET", "/a", json={"n": 1})
        server.add("GET", "/a", json={"n": 2})

        with httpx.Client(transport=server.transport()) as http:
            bodies = [http.get(server.base_url + "/a").json()["n"] for _ in range(3)]

        assert bodies == [1, 2, 2]

    def test_unrouted_request_is_not_found(self) -> None:
        server = FakeBitbucketServer()

        with server.client() as client, pytest.raises(NotFoundError):
            client.pull_is_mergeable(create_repo(), create_pull_request())

        assert server.call_count("GET", MERGE_PATH) == 1

    def test_handler_sees_request(self) -> None:
        server = FakeBitbucketServer()
        server.add(
            "GET",
            MERGE_PATH,
            handler=lambda request: httpx.Response(
                200, json=merge_status_payload(can_merge="Bearer" in request.headers["Authorization"])
            ),
        )

        with server.client() as client:
            assert client.pull_is_mergeable(create_repo(), create_pull_request())

    def test_base_path_is_stripped(self) -> None:
        server = FakeBitbucketServer("https://corp.com/bitbucket/")
        repo = create_repo(base_url=server.base_url)
        server.add("GET", MERGE_PATH, json=merge_status_payload())

        with server.client() as client:
            assert client.pull_is_mergeable(repo, create_pull_request(repo=repo))

        assert server.requests[0].path == MERGE_PATH

    def test_calls_filter_and_reset(self) -> None:
        server = FakeBitbucketServer()
        server.add("POST", "/b", status_code=204)

        with httpx.Client(transport=server.transport()) as http:
            http.get(server.base_url + "/a")
            http.post(server.base_url + "/b", json={"x": 1})

        assert [r.path for r in server.calls()] == ["/a", "/b"]
        assert server.calls("post")[0].body == {"x": 1}
        assert server.call_count("GET", "/a") == 1

        server.reset()

        assert server.requests == []
        assert not server.was_called("POST", "/b")

    def test_close_releases_built_http_clients(self) -> None:
        server = FakeBitbucketServer()
        client = server.client()

        client.close()
        assert not server.http_clients[0].is_closed

        server.close()
        assert server.http_clients[0].is_closed

    def test_aclose_releases_async_http_clients(self) -> None:
        server = FakeBitbucketServer()
        server.client()
        server.async_client()

        asyncio.run(server.aclose())

        assert [c.is_closed for c in server.http_clients] == [True, True]


class TestPayloadBuilders:
    def test_repo_clone_url_carries_project_key(self) -> None:
        repo = create_repo(name="app", project_key="WEB")

        assert get_project_key(repo.name, repo.sanitized_clone_url) == "WEB"

    def test_changes_payload_decodes(self) -> None:
        raw = httpx.Response(
            200, json=changes_payload(["a", "b"], is_last_page=False, next_page_start=2, renames={"b": "c"})
        ).content

        page = decode(raw, PagedChangeSet)

        assert page.is_last_page is False
        assert page.next_page_start == 2
        assert [v.touched_paths() for v in page.values] == [["a"], ["b", "c"]]

    def test_pull_request_payload_decodes(self) -> None:
        raw = httpx.Response(200, json=pull_request_payload(version=4, approvals=[False, True])).content

        snapshot = decode(raw, PullRequestSnapshot)

        assert snapshot.version == 4
        assert [r.approved for r in snapshot.reviewers] == [False, True]

    def test_merge_status_payload_decodes(self) -> None:
        raw = httpx.Response(200, json=merge_status_payload(False, True)).content

        report = decode(raw, MergeabilityReport)

        assert report.can_merge is False
        assert report.conflicted is True
