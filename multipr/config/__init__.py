"""Configuration Management Package

Settings live in the repository's git config under the `multipr` section:

    git config multipr.branches "staging prod"
    git config multipr.tool gh          # optional, default: hub
    git config multipr.remote upstream  # optional, default: origin
"""

import sys
from dataclasses import dataclass, field

from multipr import BRANCHES_KEY, REMOTE_KEY, TOOL_KEY
from multipr.git import GitRepo

VALID_TOOLS = {"hub", "gh"}


class ConfigError(Exception):
    """Raised when required configuration is missing."""
    pass


@dataclass(frozen=True)
class Config:
    """Per-project settings, read once per run."""
    branches: tuple[str, ...] = field(default_factory=tuple)
    tool: str = "hub"
    remote: str = "origin"

    def validate(self) -> tuple['Config', list[str]]:
        """Return a corrected copy and a list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()
        tool, remote = self.tool, self.remote

        if tool not in VALID_TOOLS:
            warnings.append(f"Invalid tool '{tool}', using '{defaults.tool}'")
            tool = defaults.tool

        if not remote or any(c.isspace() for c in remote):
            warnings.append(f"Invalid remote '{remote}', using '{defaults.remote}'")
            remote = defaults.remote

        return Config(branches=self.branches, tool=tool, remote=remote), warnings


def parse_branches(value: str | None) -> tuple[str, ...]:
    """Split a space-separated branch list, dropping repeats."""
    if not value:
        return ()
    seen = []
    for name in value.split():
        if name not in seen:
            seen.append(name)
    return tuple(seen)


def load_config(repo: GitRepo) -> Config:
    branches = parse_branches(repo.get_config(BRANCHES_KEY))
    if not branches:
        raise ConfigError(
            "No base branches configured.\n\n"
            "Set the branches to open pull requests against, e.g.:\n"
            f'  git config {BRANCHES_KEY} "staging prod"'
        )

    defaults = Config()
    config = Config(
        branches=branches,
        tool=repo.get_config(TOOL_KEY) or defaults.tool,
        remote=repo.get_config(REMOTE_KEY) or defaults.remote,
    )
    config, warnings = config.validate()
    for warning in warnings:
        print(f"Config warning: {warning}", file=sys.stderr)
    return config


def save_config(repo: GitRepo, config: Config) -> None:
    repo.set_config(BRANCHES_KEY, ' '.join(config.branches))
    repo.set_config(TOOL_KEY, config.tool)
    repo.set_config(REMOTE_KEY, config.remote)


__all__ = [
    "Config",
    "ConfigError",
    "load_config",
    "save_config",
    "parse_branches",
    "VALID_TOOLS",
]
