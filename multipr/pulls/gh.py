"""gh pr create"""

from multipr.pulls.base import PullRequestTool


def split_message(message: str) -> tuple[str, str]:
    """Split a message into title and body at the first line break."""
    title, _, body = message.partition('\n')
    return title.strip(), body.strip()


class GhTool(PullRequestTool):
    """GitHub CLI. Needs title and body passed separately."""

    executable = "gh"

    def build_command(self, message: str, base: str, head: str) -> list[str]:
        title, body = split_message(message)
        return [
            self.executable, 'pr', 'create',
            '--title', title,
            '--body', body,
            '--base', base,
            '--head', head,
        ]
