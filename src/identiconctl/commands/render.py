"""Command: render the identicon to an image file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from identiconctl.commands._base import IdcCommand

if TYPE_CHECKING:
    from identiconctl.commands._context import AppContext


@click.command(
    cls=IdcCommand,
    examples="""\
  identiconctl alice render alice.png
  identiconctl --size 16 alice render avatars/alice.gif
  identiconctl --background 255,255,255 alice render alice.jpg
  identiconctl --json alice render alice.png""",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def render(app: AppContext, path: Path) -> None:
    """Write the identicon to PATH (.png, .jpg/.jpeg or .gif)."""
    app.emit(app.service.render(path))
