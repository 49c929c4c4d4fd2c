"""Git Operations Package"""

from multipr.git.repo import GitRepo, GitError, CommitSummary
from multipr.git.sync import RemoteSync, SyncResult

__all__ = [
    "GitRepo",
    "GitError",
    "CommitSummary",
    "RemoteSync",
    "SyncResult",
]
