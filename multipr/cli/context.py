"""Per-run context passed to every step of the flow."""

import sys
from dataclasses import dataclass
from pathlib import Path

from multipr import MESSAGE_FILENAME
from multipr.config import Config
from multipr.git import GitRepo


@dataclass
class RunContext:
    repo: GitRepo
    config: Config
    head: str
    root: Path
    message_file: Path
    interactive: bool = True
    verbose: bool = False
    copy: bool = True

    @classmethod
    def create(cls, repo: GitRepo, config: Config, verbose: bool = False, copy: bool = True) -> 'RunContext':
        return cls(
            repo=repo,
            config=config,
            head=repo.current_branch(),
            root=repo.root,
            message_file=repo.git_dir / MESSAGE_FILENAME,
            interactive=sys.stdin.isatty(),
            verbose=verbose,
            copy=copy,
        )
