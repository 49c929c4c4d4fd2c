"""CLI Commands"""

import os
import sys

from multipr import BRANCHES_KEY, REMOTE_KEY, TOOL_KEY
from multipr.config import Config, ConfigError, load_config, parse_branches, save_config
from multipr.git import GitRepo
from multipr.output import bold, dim, info, print_success, print_warning


def display_config(repo: GitRepo) -> int:
    """Display current configuration."""
    print(f"\n{bold('Current Configuration')}\n")

    try:
        config = load_config(repo)
    except ConfigError as e:
        print_warning(str(e).split('\n')[0])
        config = None

    env_tool = os.environ.get('MULTIPR_TOOL')
    if env_tool:
        print(f"  {dim('Environment overrides:')}")
        print(f"    MULTIPR_TOOL={env_tool}")
        print()

    if config:
        print(f"  {bold('Settings:')}")
        print(f"    branches: {info(' '.join(config.branches))}")
        print(f"    tool:     {info(config.tool)}")
        print(f"    remote:   {info(config.remote)}")

    print(f"\n  {dim('Git config keys:')}")
    print(f"    {BRANCHES_KEY}  space-separated base branches (required)")
    print(f"    {TOOL_KEY}      hub or gh (default: hub)")
    print(f"    {REMOTE_KEY}    remote name (default: origin)")
    print(f"\n  {dim('Run')} multipr --setup {dim('to configure')}\n")

    return 0


def run_setup(repo: GitRepo) -> int:
    """Quick setup wizard, stores answers in the repository's git config."""
    current = Config(
        branches=parse_branches(repo.get_config(BRANCHES_KEY)),
        tool=repo.get_config(TOOL_KEY) or Config.tool,
        remote=repo.get_config(REMOTE_KEY) or Config.remote,
    )

    print(f"\n{bold('Setup Wizard')}\n")
    default_branches = ' '.join(current.branches)
    hint = f" [{default_branches}]" if default_branches else ""

    while True:
        branches = parse_branches(input(f"Base branches, space-separated{hint}: ").strip() or default_branches)
        if branches:
            break
        print("Enter at least one branch")

    print("\nChoose pull request tool:\n")
    print("  1. hub (default)")
    print("  2. gh\n")
    tool = current.tool
    while True:
        choice = input("Select [1/2] (Enter to keep current): ").strip()
        if choice == '':
            break
        elif choice == '1':
            tool = 'hub'
            break
        elif choice == '2':
            tool = 'gh'
            break

    remote = input(f"\nRemote [{current.remote}]: ").strip() or current.remote

    config, warnings = Config(branches=branches, tool=tool, remote=remote).validate()
    for warning in warnings:
        print_warning(warning)
    save_config(repo, config)

    print_success(f"Saved to git config ({BRANCHES_KEY}={' '.join(config.branches)})")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = 'eval "$(register-python-argcomplete multipr)"'
    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell multipr | Out-String | Invoke-Expression\n")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish multipr | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0

