"""
CLI utilities for command line reconstruction and logging setup.
"""

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

PROGRAM_NAME = "capnp_parse"


def configure_logging(verbose: bool = False) -> None:
    """Configure application logging with a Rich handler on stderr.

    Args:
        verbose: Log every node and member when set
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    cmd_parts = [PROGRAM_NAME]

    for param in click_command.params:
        if not isinstance(param, click.Option):
            continue

        value = cli_args.get(param.name)
        if value is None or value is False or value == ():
            continue

        flag = param.opts[0] if param.opts else f"--{param.name}"
        if param.is_flag:
            cmd_parts.append(flag)
            continue

        values = value if isinstance(value, tuple) else (value,)
        for item in values:
            # Show file names only for cleaner display
            if isinstance(item, (str, Path)) and Path(str(item)).exists():
                item = Path(str(item)).name
            cmd_parts.extend([flag, str(item)])

    return " ".join(cmd_parts)
