"""Build status resource client."""

from typing import TYPE_CHECKING

from bbserver import paths
from bbserver.types.build_status import BuildStatusUpdate

if TYPE_CHECKING:
    from bbserver.transport import HTTPTransport


class BuildStatusClient:
    """Client for commit build statuses."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def update(self, revision: str, update: BuildStatusUpdate) -> None:
        """Set the build status identified by ``update.key`` on a commit."""
        self.transport.request(
            method="POST",
            path=paths.build_status(revision),
            body=update.to_dict(),
        )
