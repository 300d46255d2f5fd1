"""bbserver resource clients."""

from bbserver.clients.branches import BranchesClient
from bbserver.clients.build_status import BuildStatusClient
from bbserver.clients.comments import CommentsClient
from bbserver.clients.pulls import PullsClient

__all__ = [
    "PullsClient",
    "CommentsClient",
    "BuildStatusClient",
    "BranchesClient",
]
