"""Allow `python -m multipr`."""

from multipr.cli.main import run

run()
