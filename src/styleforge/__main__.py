"""Run the styleforge CLI with ``python -m styleforge``."""

from styleforge import cli


cli.main()
