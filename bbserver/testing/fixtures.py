"""
Pytest fixtures for bbserver testing.
"""

from collections.abc import Generator

import pytest

from bbserver.client import BitbucketServerClient
from bbserver.testing.payloads import create_pull_request, create_repo
from bbserver.testing.server import FakeBitbucketServer
from bbserver.types.models import PullRequest, Repo


@pytest.fixture
def fake_server() -> Generator[FakeBitbucketServer, None, None]:
    """
    Provide an empty FakeBitbucketServer.

    Example:
        ```python
        def test_mergeable(fake_server, sample_repo, sample_pull):
            fake_server.add("GET", merge_path, json={"canMerge": True, "conflicted": False})
            ...
        ```
    """
    server = FakeBitbucketServer()
    yield server
    server.close()


@pytest.fixture
def fake_client(fake_server: FakeBitbucketServer) -> Generator[BitbucketServerClient, None, None]:
    """
    Provide a BitbucketServerClient wired to ``fake_server``.

    The underlying httpx client is closed by ``fake_server`` on teardown.
    """
    client = fake_server.client(status_url="https://atlantis.example.com")
    yield client
    client.close()


@pytest.fixture
def sample_repo() -> Repo:
    """Repository ``infra`` in project ``ops``."""
    return create_repo()


@pytest.fixture
def sample_pull(sample_repo: Repo) -> PullRequest:
    """Pull request #1 against ``sample_repo``."""
    return create_pull_request(repo=sample_repo)
