"""
Pytest plugin for bbserver testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["bbserver.testing.conftest"]
"""

from bbserver.testing.fixtures import fake_client, fake_server, sample_pull, sample_repo

__all__ = [
    "fake_server",
    "fake_client",
    "sample_repo",
    "sample_pull",
]
