"""Subcommand modules for identiconctl.

Provides register_commands(), which uses deferred imports to keep
``identiconctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from identiconctl.commands.encode import encode
    from identiconctl.commands.render import render

    cli.add_command(render)
    cli.add_command(encode)
