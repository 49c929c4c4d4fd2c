"""Pull Request Tool Package"""

from multipr.pulls.base import PullRequestTool, PullRequestResult, PullRequestError, extract_url
from multipr.pulls.dispatch import dispatch, tagged_message
from multipr.pulls.gh import GhTool
from multipr.pulls.hub import HubTool

TOOLS = {
    "hub": HubTool,
    "gh": GhTool,
}


def get_tool(name: str = "hub") -> PullRequestTool:
    """Get a pull request tool by name: 'hub' or 'gh'."""
    if name in TOOLS:
        return TOOLS[name]()
    raise PullRequestError(f"Unknown tool: {name}. Use 'hub' or 'gh'.")


__all__ = [
    "PullRequestTool",
    "PullRequestResult",
    "PullRequestError",
    "HubTool",
    "GhTool",
    "get_tool",
    "dispatch",
    "tagged_message",
    "extract_url",
    "TOOLS",
]
