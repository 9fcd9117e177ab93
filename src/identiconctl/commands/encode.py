"""Command: print the identicon as base64 text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from identiconctl.commands._base import IdcCommand
from identiconctl.domain.types import ImageFormat

if TYPE_CHECKING:
    from identiconctl.commands._context import AppContext


@click.command(
    cls=IdcCommand,
    examples="""\
  identiconctl alice encode PNG
  identiconctl --size 8 alice encode gif
  identiconctl alice encode PNG | base64 -d > alice.png
  identiconctl --json alice encode JPEG""",
)
@click.argument(
    "fmt",
    metavar="FORMAT",
    type=click.Choice([f.name for f in ImageFormat], case_sensitive=False),
)
@click.pass_obj
def encode(app: AppContext, fmt: str) -> None:
    """Print the identicon in FORMAT (PNG, JPEG or GIF) as base64 text."""
    result = app.service.encode(ImageFormat[fmt.upper()])

    if not result.ok or app.settings.json_output or app.settings.verbose:
        app.emit(result)
        return

    # Pipe-friendly: raw base64 to stdout
    click.echo(result.data["encoded"])
