"""Main file for CLI."""

import os
import sys
import argparse
from typing import List, Optional

import shtab

import freenas
from freenas.cli.dataset import handle_dataset
from freenas.common.constants import (
    DEFAULT_URL,
    DEFAULT_USERNAME,
    PASSWORD_ENV_VAR,
    URL_ENV_VAR,
    USERNAME_ENV_VAR,
)
from freenas.common.errors import FreenasError
from freenas.utils.logging import log_error, logger


def cli_parser() -> argparse.ArgumentParser:
    """Initialize argument parser."""
    parser = argparse.ArgumentParser(
        prog="freenas",
        description="Manage the datasets of a FreeNAS storage appliance. "
        + f"The password is read from ${PASSWORD_ENV_VAR}.",
    )
    parser.add_argument("-v", "--version", action="version", version=freenas.version())
    parser.add_argument(
        "--url",
        default=os.environ.get(URL_ENV_VAR) or DEFAULT_URL,
        help=f"Appliance url (default: ${URL_ENV_VAR} or {DEFAULT_URL})",
    )
    parser.add_argument(
        "--username",
        default=os.environ.get(USERNAME_ENV_VAR) or DEFAULT_USERNAME,
        help=f"Appliance user (default: ${USERNAME_ENV_VAR} or {DEFAULT_USERNAME})",
    )
    shtab.add_argument_to(parser, "--completion")

    commands = parser.add_subparsers(title="Commands", dest="command", required=True)
    dataset = commands.add_parser(
        "dataset",
        help="Get, create or delete a dataset",
        description="""
Get, create or delete a dataset of a pool.

```bash
$ freenas dataset get tank k8s/volumes
```
""",
    )
    actions = dataset.add_subparsers(title="Actions", dest="action", required=True)
    for action, text in (
        ("get", "Show a dataset"),
        ("create", "Create a dataset"),
        ("delete", "Delete a dataset"),
    ):
        sub = actions.add_parser(action, help=text, description=text)
        sub.add_argument("pool", help="Pool the dataset lives in")
        sub.add_argument("name", help="Dataset path inside the pool")
        if action == "create":
            sub.add_argument("--mountpoint", default="", help="Mountpoint")
            sub.add_argument("--comments", default="", help="Comments")

    return parser


def cli_main(argv: Optional[List[str]] = None) -> None:
    """CLI main handler."""
    parser = cli_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    logger.debug(args)

    password = os.environ.get(PASSWORD_ENV_VAR)
    if not password:
        parser.error(f"{PASSWORD_ENV_VAR} is not set")

    server = freenas.get_server(args.username, password, args.url)
    try:
        handle_dataset(server, args)
    except KeyboardInterrupt:
        logger.warning("User interrupted")
    except FreenasError as error:
        log_error(error)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
