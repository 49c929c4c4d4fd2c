"""Git Repository - Thin wrapper over the git CLI."""

import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass
class CommitSummary:
    """One line of `git log` output."""
    sha: str
    subject: str

    def __str__(self) -> str:
        return f"{self.sha} {self.subject}"

    @classmethod
    def parse(cls, line: str) -> 'CommitSummary':
        sha, _, subject = line.partition(' ')
        return cls(sha=sha, subject=subject)


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepo:
    """Runs git commands against the repository containing the working directory."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd
        self._verify_git_available()
        self._verify_in_repo()

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        result = self._run(*args)
        if result.returncode != 0:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{result.stderr.strip()}")
        return result.stdout

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    @property
    def root(self) -> Path:
        return Path(self._run_git('rev-parse', '--show-toplevel').strip())

    @property
    def git_dir(self) -> Path:
        return Path(self._run_git('rev-parse', '--absolute-git-dir').strip())

    def current_branch(self) -> str:
        result = self._run('symbolic-ref', '--quiet', '--short', 'HEAD')
        if result.returncode != 0:
            raise GitError("HEAD is detached. Check out a branch first.")
        return result.stdout.strip()

    def get_config(self, key: str) -> str | None:
        """Read a config value, None when unset."""
        result = self._run('config', '--get', key)
        # Exit status 1 means the key is not set
        if result.returncode == 1:
            return None
        if result.returncode != 0:
            raise GitError(f"Could not read git config {key}: {result.stderr.strip()}")
        return result.stdout.strip()

    def set_config(self, key: str, value: str) -> None:
        self._run_git('config', key, value)

    def fetch(self, remote: str) -> None:
        self._run_git('fetch', '--quiet', remote)

    def resolve(self, ref: str) -> str | None:
        """Return the sha a ref points to, or None if it doesn't exist."""
        result = self._run('rev-parse', '--verify', '--quiet', f'{ref}^{{commit}}')
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def head_sha(self) -> str:
        return self._run_git('rev-parse', 'HEAD').strip()

    def remote_branch_exists(self, remote: str, branch: str) -> bool:
        return self.resolve(f'refs/remotes/{remote}/{branch}') is not None

    def push(self, remote: str, branch: str) -> None:
        self._run_git('push', '--quiet', '--set-upstream', remote, branch)

    def last_commit_subject(self) -> str:
        return self._run_git('log', '-1', '--format=%s').strip()

    def unmerged_commits(self, base_ref: str) -> list[CommitSummary]:
        """Commits on HEAD missing from base_ref, oldest first."""
        output = self._run_git('log', '--format=%h %s', f'{base_ref}..HEAD')
        commits = [CommitSummary.parse(line) for line in output.splitlines() if line.strip()]
        # git log lists newest first
        commits.reverse()
        return commits
