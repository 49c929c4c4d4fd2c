"""CLI Argument Parsing"""

import argparse
import argcomplete

from multipr import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='multipr',
        description='Open pull requests from the current branch to every configured base branch',
        epilog='Example: multipr "Add login throttling" (copies the last URL to clipboard)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('message', nargs='?', default=None, help='Pull request message (default: last commit subject)')

    # Flow options
    parser.add_argument('-y', '--yes', action='store_true', help='Open pull requests without asking')
    parser.add_argument('--no-edit', action='store_true', help='Skip the pull request template editor')
    parser.add_argument('--dry-run', action='store_true', help='Show the preview only, push and open nothing')

    # Output options
    parser.add_argument('--no-copy', action='store_true', help='Do not copy pull request URLs to clipboard')
    parser.add_argument('--verbose', action='store_true', help='Show timing details')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure base branches for this repository')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
