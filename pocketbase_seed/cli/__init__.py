"""Command line interface for pocketbase-seed."""

from pocketbase_seed.cli.main import cli

__all__ = ["cli"]
