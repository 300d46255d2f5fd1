"""bbserver testing utilities.

Provides a fake Bitbucket Server and payload builders for testing code that
uses bbserver.
"""

from bbserver.testing.payloads import (
    changes_payload,
    create_pull_request,
    create_repo,
    merge_status_payload,
    pull_request_payload,
)
from bbserver.testing.server import FakeBitbucketServer, RecordedRequest

__all__ = [
    # Fake server
    "FakeBitbucketServer",
    "RecordedRequest",
    # Builders
    "create_repo",
    "create_pull_request",
    "changes_payload",
    "pull_request_payload",
    "merge_status_payload",
]
