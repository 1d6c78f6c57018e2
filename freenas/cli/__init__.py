"""FreeNAS CLI."""

from freenas.cli.public import cli_main, cli_parser
