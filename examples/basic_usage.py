#!/usr/bin/env python3
"""
Basic bbserver usage example.

Runs every pull request operation against the in-memory fake server, so no
Bitbucket instance is needed.
Run with: python examples/basic_usage.py
"""

import logging

from bbserver import BitbucketServerError, ConflictError, configure_logging, split_comment
from bbserver.testing import (
    FakeBitbucketServer,
    changes_payload,
    create_pull_request,
    create_repo,
    merge_status_payload,
    pull_request_payload,
)
from bbserver.types import CommitStatus, PullRequestOptions

configure_logging(level=logging.INFO)

print("=== bbserver Basic Usage Example ===\n")

server = FakeBitbucketServer()
repo = create_repo(name="infra", project_key="ops")
pull = create_pull_request(num=7, repo=repo)
pr_path = "/rest/api/1.0/projects/ops/repos/infra/pull-requests/7"

server.add("GET", pr_path + "/changes", json=changes_payload(["main.tf"], is_last_page=False, next_page_start=1))
server.add("GET", pr_path + "/changes", json=changes_payload(["vars.tf"], renames={"vars.tf": "variables.tf"}))
server.add("GET", pr_path, json=pull_request_payload(version=3, approvals=[True]))
server.add("GET", pr_path + "/merge", json=merge_status_payload())
server.add("POST", pr_path + "/comments", status_code=201, json={"id": 1})
server.add("POST", f"/rest/build-status/1.0/commits/{pull.head_commit}", status_code=204)
server.add("POST", pr_path + "/merge", json={"state": "MERGED"})
server.add("DELETE", "/rest/branch-utils/1.0/projects/ops/repos/infra/branches", status_code=204)

with server.client(status_url="https://atlantis.example.com") as client:
    # 1. Modified files
    print("1. Modified files...")
    print(f"   {client.get_modified_files(repo, pull)}\n")

    # 2. Comments
    print("2. Commenting...")
    long_output = "+ resource\n" * 5000
    print(f"   {len(long_output)} characters become {len(split_comment(long_output, 32768, '', ''))} comments")
    client.create_comment(repo, pull.num, long_output)
    print(f"   Posted {server.call_count('POST', pr_path + '/comments')} comments\n")

    # 3. Review state
    print("3. Review state...")
    print(f"   Approved: {client.pull_is_approved(repo, pull).is_approved}")
    print(f"   Mergeable: {client.pull_is_mergeable(repo, pull)}\n")

    # 4. Build status
    print("4. Build status...")
    client.update_status(repo, pull, CommitStatus.SUCCESS, "atlantis/plan", "Plan succeeded")
    print("   OK\n")

    # 5. Merge
    print("5. Merging...")
    try:
        client.merge_pull(pull, PullRequestOptions(delete_source_branch_on_merge=True))
    except ConflictError as e:
        print(f"   Pull request changed before merging: {e}")
    except BitbucketServerError as e:
        print(f"   Merge failed: {e}")
    print(f"   Requests sent: {[f'{r.method} {r.path}' for r in server.requests[-3:]]}\n")

print("=== Done ===")
