"""Shared fakes for the git CLI and the pull request tool."""

from pathlib import Path

import pytest

from multipr import BRANCHES_KEY
from multipr.git import CommitSummary, GitError
from multipr.pulls import PullRequestResult, PullRequestTool


class FakeRepo:
    """Stands in for GitRepo without touching git."""

    def __init__(self, root: Path, config=None, remote_branches=('staging', 'prod'),
                 commits=None, head='feature', last_subject='Add login throttling',
                 remote_head_sha=None, fetch_error=None, push_error=None):
        self._root = root
        self.config = dict(config if config is not None else {BRANCHES_KEY: 'staging prod'})
        self.remote_branches = set(remote_branches)
        self.commits = commits or {}
        self.head = head
        self.last_subject = last_subject
        self.remote_head_sha = remote_head_sha
        self.fetch_error = fetch_error
        self.push_error = push_error
        self.calls = []

    @property
    def root(self) -> Path:
        return self._root

    @property
    def git_dir(self) -> Path:
        return self._root / '.git'

    def current_branch(self) -> str:
        return self.head

    def get_config(self, key):
        return self.config.get(key)

    def set_config(self, key, value):
        self.config[key] = value

    def fetch(self, remote):
        self.calls.append(('fetch', remote))
        if self.fetch_error:
            raise GitError(self.fetch_error)

    def resolve(self, ref):
        if ref.endswith(f'/{self.head}'):
            return self.remote_head_sha
        return None

    def head_sha(self):
        return 'abc123'

    def remote_branch_exists(self, remote, branch):
        return branch in self.remote_branches

    def push(self, remote, branch):
        self.calls.append(('push', remote, branch))
        if self.push_error:
            raise GitError(self.push_error)

    def last_commit_subject(self):
        return self.last_subject

    def unmerged_commits(self, base_ref):
        return [CommitSummary.parse(line) for line in self.commits.get(base_ref, [])]


class FakeTool(PullRequestTool):
    """Records create() calls and hands back numbered URLs."""

    executable = "fake"

    def __init__(self, fail_on=()):
        self.created = []
        self.fail_on = set(fail_on)

    def build_command(self, message, base, head):
        return [self.executable, message, base, head]

    def create(self, message, base, head):
        self.created.append((message, base, head))
        if base in self.fail_on:
            return PullRequestResult(branch=base, ok=False)
        url = f"https://github.com/acme/app/pull/{len(self.created)}"
        return PullRequestResult(branch=base, url=url, ok=True, output=url)


@pytest.fixture
def repo(tmp_path):
    (tmp_path / '.git').mkdir()
    return FakeRepo(tmp_path, commits={
        'origin/staging': ['a1 First change', 'b2 Second change'],
        'origin/prod': ['c3 Older fix', 'a1 First change', 'b2 Second change'],
    })


@pytest.fixture
def tool():
    return FakeTool()
