"""Build status data models."""

from dataclasses import asdict, dataclass


@dataclass
class BuildStatusUpdate:
    """Body of a commit build status update."""

    key: str
    url: str
    state: str  # "INPROGRESS", "SUCCESSFUL", "FAILED"
    description: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
