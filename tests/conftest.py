"""Shared fixtures for the bbserver test suite."""

from bbserver.testing.fixtures import fake_client, fake_server, sample_pull, sample_repo

__all__ = ["fake_server", "fake_client", "sample_repo", "sample_pull"]
