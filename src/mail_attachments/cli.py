# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Command-line interface for mail-attachments.

Usage:
    mail-attachments fetch /reports/q3.pdf --token sl.B0a1...
    mail-attachments fetch /reports/q3.pdf --config config.ini --save
    mail-attachments fetch /reports/q3.pdf --output ./q3.pdf --json

The token is taken from ``--token``, then from the ``[dropbox]`` section of
``--config``, then from ``MAIL_ATTACHMENTS_DROPBOX_TOKEN``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

import aiohttp
import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from mail_attachments.attachments import DropboxError, fetch as fetch_attachment
from mail_attachments.config_loader import load_dropbox_config

console = Console()
err_console = Console(stderr=True)


def run_async(coro):
    """Execute an async coroutine synchronously from CLI context."""
    return asyncio.run(coro)


def print_error(message: str) -> None:
    """Print a formatted error message to stderr."""
    err_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print a formatted success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_json(data: Any) -> None:
    """Print data as syntax-highlighted JSON."""
    console.print_json(json.dumps(data, indent=2, default=str))


@click.group()
@click.version_option(package_name="mail-attachments")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """mail-attachments CLI - Retrieve email attachments from remote storage."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command("fetch")
@click.argument("file_path")
@click.option("--token", "-t", help="Dropbox access token.")
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(dir_okay=False),
    help="Path to config.ini with a [dropbox] section.",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the attachment content to this file.",
)
@click.option("--save", is_flag=True, help="Write the content to the attachment name in the current directory.")
@click.option("--json", "as_json", is_flag=True, help="Print attachment info as JSON.")
def fetch_command(
    file_path: str,
    token: str | None,
    config_path: str | None,
    output: str | None,
    save: bool,
    as_json: bool,
) -> None:
    """Download FILE_PATH from Dropbox as an attachment."""
    config = load_dropbox_config(config_path)
    access_token = token or config.access_token
    if not access_token:
        print_error("No Dropbox access token: use --token, --config or MAIL_ATTACHMENTS_DROPBOX_TOKEN.")
        sys.exit(1)

    try:
        attachment = run_async(fetch_attachment(access_token, file_path, endpoint=config.endpoint))
    except DropboxError as e:
        print_error(f"{type(e).__name__}: {e.message}")
        sys.exit(1)
    except ValidationError as e:
        print_error(f"Unexpected Dropbox response: {e}")
        sys.exit(1)
    except aiohttp.ClientError as e:
        print_error(f"Connection failed: {e}")
        sys.exit(1)

    info = {
        "file_name": attachment.file_name,
        "content_type": attachment.content_type,
        "size": attachment.size,
        "downloaded_bytes": len(attachment.content),
    }

    if as_json:
        print_json(info)
    else:
        table = Table(title="Dropbox Attachment")
        table.add_column("Name", style="cyan")
        table.add_column("Size", justify="right")
        table.add_column("Downloaded", justify="right")
        table.add_row(attachment.file_name, str(attachment.size), str(len(attachment.content)))
        console.print(table)

    target = output or (attachment.file_name if save else None)
    if target:
        Path(target).write_bytes(attachment.content)
        print_success(f"Saved {len(attachment.content)} bytes to {target}")


if __name__ == "__main__":
    main()
