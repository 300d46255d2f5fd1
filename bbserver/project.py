"""Project key extraction from Bitbucket Server clone URLs."""

import re

from bbserver.exceptions import DerivationError


def get_project_key(repo_name: str, clone_url: str) -> str:
    """
    Extract the project key from a repository clone URL.

    Given ``http://bitbucket.corp:7990/scm/at/atlantis-example.git`` and the
    repo name ``atlantis-example``, returns ``at``.

    Raises:
        DerivationError: If the URL does not match ``.../<key>/<repo>.git``
    """
    expr = rf".*/(.*?)/{re.escape(repo_name)}\.git"
    match = re.search(expr, clone_url)
    if match is None or not match.group(1):
        raise DerivationError(
            f"could not extract project key from {clone_url!r} using {expr!r}"
        )
    return match.group(1)
