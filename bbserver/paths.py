"""REST endpoint paths, relative to the server base URL."""


def pull_request(project_key: str, repo_slug: str, pull_num: int) -> str:
    return f"/rest/api/1.0/projects/{project_key}/repos/{repo_slug}/pull-requests/{pull_num}"


def pull_request_changes(project_key: str, repo_slug: str, pull_num: int) -> str:
    return pull_request(project_key, repo_slug, pull_num) + "/changes"


def pull_request_comments(project_key: str, repo_slug: str, pull_num: int) -> str:
    return pull_request(project_key, repo_slug, pull_num) + "/comments"


def pull_request_merge(project_key: str, repo_slug: str, pull_num: int) -> str:
    return pull_request(project_key, repo_slug, pull_num) + "/merge"


def build_status(revision: str) -> str:
    return f"/rest/build-status/1.0/commits/{revision}"


def branches(project_key: str, repo_slug: str) -> str:
    return f"/rest/branch-utils/1.0/projects/{project_key}/repos/{repo_slug}/branches"
