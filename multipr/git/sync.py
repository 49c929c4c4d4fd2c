"""Remote Sync - Keep the head branch pushed while the user writes a message."""

import threading
import time
from dataclasses import dataclass, field

from multipr.git.repo import GitError, GitRepo


@dataclass
class SyncResult:
    """Outcome of one background sync."""
    fetched: bool = False
    pushed: bool = False
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


class RemoteSync:
    """Fetch, then push the head branch if its remote copy is missing or stale.

    Runs on a single background thread. Nothing is printed from the thread;
    call wait() to join and collect the result before opening pull requests.
    """

    def __init__(self, repo: GitRepo, remote: str, branch: str):
        self.repo = repo
        self.remote = remote
        self.branch = branch
        self._result = SyncResult()
        self._thread: threading.Thread | None = None

    def start(self) -> 'RemoteSync':
        self._thread = threading.Thread(target=self._sync, name='multipr-sync', daemon=True)
        self._thread.start()
        return self

    @property
    def done(self) -> bool:
        return self._thread is not None and not self._thread.is_alive()

    def wait(self) -> SyncResult:
        if self._thread is None:
            self._sync()
        else:
            self._thread.join()
        return self._result

    def _sync(self) -> None:
        t0 = time.time()
        result = self._result

        try:
            self.repo.fetch(self.remote)
            result.fetched = True
        except GitError as e:
            result.warnings.append(f"Could not fetch {self.remote}: {e}")

        try:
            remote_sha = self.repo.resolve(f'refs/remotes/{self.remote}/{self.branch}')
            if remote_sha is None or remote_sha != self.repo.head_sha():
                self.repo.push(self.remote, self.branch)
                result.pushed = True
        except GitError as e:
            result.error = f"Could not push {self.branch} to {self.remote}: {e}"

        result.elapsed = time.time() - t0
