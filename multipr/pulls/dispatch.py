"""Pull Request Dispatch - One pull request per base branch."""

import time
from typing import Callable

from multipr.pulls.base import PullRequestResult, PullRequestTool


def tagged_message(message: str, branch: str, total: int) -> str:
    """Prefix the message with [BRANCH] when opening several pull requests."""
    if total <= 1:
        return message
    return f"[{branch.upper()}] {message}"


def dispatch(
    tool: PullRequestTool,
    message: str,
    branches: list[str],
    head: str,
    on_result: Callable[[PullRequestResult, float], None] | None = None,
) -> list[PullRequestResult]:
    """Open pull requests in branch order, continuing past failures."""
    results = []
    for branch in branches:
        t0 = time.time()
        result = tool.create(tagged_message(message, branch, len(branches)), base=branch, head=head)
        results.append(result)
        if on_result:
            on_result(result, time.time() - t0)
    return results
