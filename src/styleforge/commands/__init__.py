"""Subcommands of the styleforge CLI."""
