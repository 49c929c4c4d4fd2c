"""hub pull-request"""

from multipr.pulls.base import PullRequestTool


class HubTool(PullRequestTool):
    """GitHub's `hub` CLI. First message line becomes the title."""

    executable = "hub"

    def build_command(self, message: str, base: str, head: str) -> list[str]:
        return [self.executable, 'pull-request', '-m', message, '-b', base, '-h', head]
