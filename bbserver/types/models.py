"""Orchestrator-side values passed into the client.

These carry only what the Bitbucket Server integration reads.
"""

from dataclasses import dataclass
from enum import Enum


class CommitStatus(str, Enum):
    """Abstract build status reported by the orchestrator."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class Repo:
    """A repository hosted on Bitbucket Server."""

    name: str
    sanitized_clone_url: str  # clone URL with credentials removed


@dataclass
class PullRequest:
    """A pull request as seen by the orchestrator."""

    num: int
    head_commit: str
    head_branch: str
    base_repo: Repo


@dataclass
class PullRequestOptions:
    """Caller options for merging."""

    delete_source_branch_on_merge: bool = False


@dataclass
class ApprovalStatus:
    """Result of an approval check."""

    is_approved: bool = False


@dataclass
class User:
    """A VCS user."""

    username: str
