"""Commit Preview - What each pull request will contain."""

from dataclasses import dataclass, field

from multipr.config import Config
from multipr.git import CommitSummary, GitRepo
from multipr.output import ARROW, bold, dim, info, rule


class MissingBranchError(Exception):
    """Raised when a configured base branch has no remote copy."""

    def __init__(self, branch: str, remote: str):
        self.branch = branch
        self.remote = remote
        super().__init__(
            f"Remote branch '{remote}/{branch}' does not exist. "
            f"Fix '{branch}' in your configured branches or push it first."
        )


@dataclass
class BranchView:
    """A base branch and the head commits it doesn't have yet."""
    name: str
    remote_ref: str
    commits: list[CommitSummary] = field(default_factory=list)

    @property
    def tag(self) -> str:
        return f"[{self.name.upper()}]"


def build_views(repo: GitRepo, config: Config) -> list[BranchView]:
    views = []
    for name in config.branches:
        if not repo.remote_branch_exists(config.remote, name):
            raise MissingBranchError(name, config.remote)
        remote_ref = f"{config.remote}/{name}"
        views.append(BranchView(name=name, remote_ref=remote_ref, commits=repo.unmerged_commits(remote_ref)))
    return views


def _count(n: int) -> str:
    return f"{n} commit" if n == 1 else f"{n} commits"


def display_preview(message: str, views: list[BranchView], head: str) -> None:
    """Show the message and the commits each pull request will carry."""
    lines = message.split('\n')
    width = max((len(line) for line in lines), default=40)
    print(f"\n{rule(width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(rule(width))

    multiple = len(views) > 1
    for view in views:
        label = f"{view.tag} " if multiple else ""
        print(f"\n{label}{info(view.remote_ref)} {dim(ARROW)} {bold(head)} {dim(f'({_count(len(view.commits))})')}")
        if not view.commits:
            print(dim("  no new commits"))
        for commit in view.commits:
            print(f"  {dim(commit.sha)} {commit.subject}")
