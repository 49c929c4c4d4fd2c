"""Pull Request Tool Base Classes and Shared Code"""

import subprocess
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class PullRequestResult:
    """Outcome of one pull request creation."""
    branch: str
    url: str | None = None
    ok: bool = False
    output: str = ""


class PullRequestError(Exception):
    """Raised when the pull request tool can't be used at all."""
    pass


def extract_url(stdout: str) -> str | None:
    """Last line of tool output that looks like a URL."""
    for line in reversed(stdout.strip().splitlines()):
        line = line.strip()
        if line.startswith(('http://', 'https://')):
            return line
    return None


class PullRequestTool(ABC):
    """Abstract base for external pull request creation tools."""

    executable: str = ""

    @abstractmethod
    def build_command(self, message: str, base: str, head: str) -> list[str]:
        pass

    def create(self, message: str, base: str, head: str) -> PullRequestResult:
        """Open one pull request. Tool errors are echoed, not raised."""
        cmd = self.build_command(message, base, head)
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, encoding='utf-8', errors='replace')
        except FileNotFoundError:
            raise PullRequestError(f"'{self.executable}' is not installed or not in PATH")

        if proc.stderr.strip():
            print(proc.stderr.rstrip(), file=sys.stderr)

        url = extract_url(proc.stdout)
        return PullRequestResult(
            branch=base,
            url=url,
            ok=proc.returncode == 0 and url is not None,
            output=proc.stdout.strip(),
        )
