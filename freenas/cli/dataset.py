"""Handlers of the `freenas dataset` command."""

import argparse

from rich.console import Console
from rich.table import Table

from freenas.common.server import FreenasServer
from freenas.dataset import Dataset
from freenas.utils.logging import logger


def _show(dataset: Dataset) -> None:
    table = Table(title=f"[bold green]{dataset}", show_header=False, header_style=None)
    table.add_row("Pool", dataset.pool)
    table.add_row("Name", dataset.name)
    table.add_row("Mountpoint", dataset.mountpoint)
    table.add_row("Comments", dataset.comments)
    table.add_row("Available", str(dataset.available))
    table.add_row("Referenced", str(dataset.referenced))
    table.add_row("Used", str(dataset.used))
    Console().print(table)


def handle_dataset(server: FreenasServer, args: argparse.Namespace) -> None:
    """Run a dataset subcommand against the server."""
    dataset = Dataset(
        pool=args.pool,
        name=args.name,
        mountpoint=getattr(args, "mountpoint", "") or "",
        comments=getattr(args, "comments", "") or "",
    )
    if args.action == "get":
        with Console().status("Fetching dataset"):
            dataset.get(server)
        _show(dataset)
    elif args.action == "create":
        dataset.create(server)
        logger.info(f"Created {dataset}")
    else:
        dataset.delete(server)
        logger.info(f"Deleted {dataset}")
