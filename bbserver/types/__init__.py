"""bbserver type definitions.

This module exports all data model types used by the client.
"""

from bbserver.types.build_status import BuildStatusUpdate
from bbserver.types.changes import ChangeEntry, PagedChangeSet, PathRef
from bbserver.types.models import (
    ApprovalStatus,
    CommitStatus,
    PullRequest,
    PullRequestOptions,
    Repo,
    User,
)
from bbserver.types.pulls import MergeabilityReport, PullRequestSnapshot, Reviewer

__all__ = [
    # Response types
    "PathRef",
    "ChangeEntry",
    "PagedChangeSet",
    "Reviewer",
    "PullRequestSnapshot",
    "MergeabilityReport",
    # Request types
    "BuildStatusUpdate",
    # Orchestrator values
    "Repo",
    "PullRequest",
    "PullRequestOptions",
    "ApprovalStatus",
    "CommitStatus",
    "User",
]
