"""
multipr

Open pull requests from the current branch to every configured base branch.
"""

__version__ = "1.0.0"

# Git config keys, read per project
CONFIG_SECTION = 'multipr'
BRANCHES_KEY = f'{CONFIG_SECTION}.branches'
TOOL_KEY = f'{CONFIG_SECTION}.tool'
REMOTE_KEY = f'{CONFIG_SECTION}.remote'

# Lines starting with this are dropped from edited messages
COMMENT_PREFIX = ';'

# Checked in order under the repository root, first match wins
TEMPLATE_PATHS = [
    '.github/PULL_REQUEST_TEMPLATE.md',
    '.github/pull_request_template.md',
    'PULL_REQUEST_TEMPLATE.md',
    'pull_request_template.md',
    'docs/PULL_REQUEST_TEMPLATE.md',
    'docs/pull_request_template.md',
]

# Scratch file for template edits, created inside the git dir
MESSAGE_FILENAME = 'PULLREQ_EDITMSG'
