"""CLI entry point for shiplog.

Commands:
  entry  — write a changelog entry for a merged pull request
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from shiplog_cli.commands.entry import entry_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("shiplog"),
    prog_name="shiplog",
)
@click.option(
    "--config",
    "config_path",
    default=".shiplog.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="SHIPLOG_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """AI-written changelog entries for merged pull requests."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(entry_cmd)
