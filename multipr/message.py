"""Message Composer - Pick or edit the pull request message."""

import os
import shlex
import subprocess
import sys
from pathlib import Path

from multipr import COMMENT_PREFIX, TEMPLATE_PATHS
from multipr.git import GitRepo

EDIT_HELP = [
    "Write the pull request message above. The first line is the title.",
    f"Lines starting with '{COMMENT_PREFIX}' are ignored; an empty message aborts.",
]


class MessageError(Exception):
    """Raised when no usable message could be produced."""
    pass


def clean_message(text: str) -> str:
    """Drop comment lines and surrounding whitespace."""
    lines = [line for line in text.splitlines() if not line.startswith(COMMENT_PREFIX)]
    return '\n'.join(lines).strip()


def find_template(root: Path) -> Path | None:
    for rel in TEMPLATE_PATHS:
        path = root / rel
        if path.is_file():
            return path
    return None


def get_editor() -> list[str]:
    editor = os.environ.get('VISUAL') or os.environ.get('EDITOR')
    if not editor:
        editor = 'notepad' if sys.platform == 'win32' else 'vi'
    return shlex.split(editor, posix=sys.platform != 'win32')


def seed_text(message: str, template: str) -> str:
    help_lines = '\n'.join(f"{COMMENT_PREFIX} {line}" for line in EDIT_HELP)
    parts = [message.strip(), template.strip(), help_lines]
    return '\n\n'.join(p for p in parts if p) + '\n'


def edit_message(path: Path, text: str) -> str:
    """Write text to path, open the editor on it, return the cleaned result."""
    path.write_text(text, encoding='utf-8')
    try:
        subprocess.run([*get_editor(), str(path)], check=True)
    except (subprocess.CalledProcessError, OSError) as e:
        raise MessageError(f"Editor failed: {e}")
    return clean_message(path.read_text(encoding='utf-8'))


def recover_text(path: Path) -> str | None:
    """Text left in the scratch file by a run that aborted, if it has any content."""
    if not path.is_file():
        return None
    text = path.read_text(encoding='utf-8')
    return text if clean_message(text) else None


def compose_message(repo: GitRepo, root: Path, message_file: Path,
                    argument: str | None = None, allow_edit: bool = True) -> str:
    """Argument beats the last commit subject; a template forces an edit.

    Without an argument, an edit resumes from text a failed run left behind.

    Raises MessageError if the final message is empty.
    """
    message = argument if argument is not None else repo.last_commit_subject()

    template = find_template(root) if allow_edit else None
    if template is not None:
        seed = recover_text(message_file) if argument is None else None
        if seed is None:
            seed = seed_text(message, template.read_text(encoding='utf-8'))
        message = edit_message(message_file, seed)
    else:
        message = clean_message(message)

    if not message:
        raise MessageError("Aborting: empty pull request message")
    return message


def remove_message_file(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        print(f"Warning: Could not delete {path}: {e}", file=sys.stderr)
