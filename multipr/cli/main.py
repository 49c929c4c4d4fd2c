"""CLI Main Entry Point"""

import os
import sys

from multipr.config import ConfigError, load_config
from multipr.git import GitError, GitRepo, RemoteSync, SyncResult
from multipr.message import MessageError, compose_message, find_template, remove_message_file
from multipr.output import CHECK, CROSS, bold, dim, error, print_error, print_warning, success, warning, Spinner
from multipr.preview import MissingBranchError, build_views, display_preview
from multipr.pulls import PullRequestError, PullRequestResult, PullRequestTool, dispatch, get_tool

from multipr.cli.args import parse_args
from multipr.cli.commands import display_config, run_install_completion, run_setup
from multipr.cli.context import RunContext
from multipr.cli.utils import confirm, copy_to_clipboard

FATAL_ERRORS = (GitError, ConfigError, MessageError, MissingBranchError, PullRequestError)


def _get_tool_name(config) -> str:
    """Precedence: environment variable > git config > default."""
    return os.environ.get('MULTIPR_TOOL') or config.tool


def _wait_for_sync(sync: RemoteSync, ctx: RunContext) -> SyncResult:
    """Block until the background push is done, then surface what happened."""
    if sync.done:
        result = sync.wait()
    else:
        with Spinner(f"Pushing {ctx.head} to {ctx.config.remote}..."):
            result = sync.wait()

    for message in result.warnings:
        print_warning(message)
    if ctx.verbose:
        state = "pushed" if result.pushed else "up to date"
        print(dim(f"  Sync: {state}, fetch={'ok' if result.fetched else 'failed'}, {result.elapsed:.2f}s"))
    return result


def _report_result(ctx: RunContext, result: PullRequestResult, elapsed: float) -> None:
    """Print one pull request outcome and copy its URL."""
    if not result.ok:
        print(f"{error(CROSS)} {bold(result.branch)}: {error('pull request failed')}")
        return

    print(f"{success(CHECK)} {bold(result.branch)}: {result.url}")
    if ctx.verbose:
        print(dim(f"  took {elapsed:.2f}s"))
    if ctx.copy:
        copied, reason = copy_to_clipboard(result.url)
        if not copied:
            print(f"{warning('!')} Could not copy to clipboard{': ' + reason if reason else ''}")


def _report_summary(results: list[PullRequestResult]) -> None:
    failed = [r.branch for r in results if not r.ok]
    if failed:
        print_warning(f"{len(failed)} of {len(results)} pull requests failed: {', '.join(failed)}")


def _pull_request_flow(args, repo: GitRepo, tool: PullRequestTool | None = None) -> int:
    """Main pull request flow.

    Returns:
        int: Exit code
    """
    config = load_config(repo)
    ctx = RunContext.create(repo, config, verbose=args.verbose, copy=not args.no_copy)
    tool = tool or get_tool(_get_tool_name(config))

    # Push in the background while the message is being written
    sync = None if args.dry_run else RemoteSync(repo, config.remote, ctx.head).start()

    if not args.no_edit and not ctx.interactive and find_template(ctx.root):
        print(dim("Not a terminal, skipping the pull request template editor."))

    message = compose_message(
        repo, ctx.root, ctx.message_file,
        argument=args.message,
        allow_edit=ctx.interactive and not args.no_edit,
    )
    views = build_views(repo, config)
    display_preview(message, views, ctx.head)

    if sync is None:
        remove_message_file(ctx.message_file)
        return 0

    if not args.yes and not confirm(len(views)):
        print(dim("Cancelled."))
        remove_message_file(ctx.message_file)
        return 0

    # Best effort: a failed push is reported, the tool gets its say per branch
    result = _wait_for_sync(sync, ctx)
    if not result.ok:
        print_warning(result.error)

    print()
    results = dispatch(
        tool, message, [view.name for view in views], ctx.head,
        on_result=lambda r, elapsed: _report_result(ctx, r, elapsed),
    )
    _report_summary(results)

    remove_message_file(ctx.message_file)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()

    try:
        repo = GitRepo()
        if args.display_config:
            return display_config(repo)
        if args.setup:
            return run_setup(repo)
        return _pull_request_flow(args, repo)
    except FATAL_ERRORS as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print(dim("\nCancelled."))
        return 130


def run() -> None:
    sys.exit(main())
