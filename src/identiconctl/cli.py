"""Root CLI group: the identicon name, its look, and global output flags."""

from __future__ import annotations

from typing import Any

import click
from pydantic import ValidationError

from identiconctl import __version__
from identiconctl.commands import register_commands
from identiconctl.commands._base import RGB_COLOR, IdcGroup
from identiconctl.commands._context import AppContext
from identiconctl.config.settings import IdenticonctlSettings
from identiconctl.domain.color import RGBColor
from identiconctl.domain.compositor import MAX_SIZE

_ROOT_EXAMPLES = """\
  identiconctl alice render alice.png
  identiconctl --size 16 --background 255,255,255 alice render alice.gif
  identiconctl alice encode PNG
  identiconctl --json alice encode GIF"""


@click.group(cls=IdcGroup, examples=_ROOT_EXAMPLES, no_args_is_help=True)
@click.version_option(version=__version__, prog_name="identiconctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.argument("name", metavar="NAME")
@click.option(
    "-s",
    "--size",
    type=click.IntRange(1, MAX_SIZE),
    default=None,
    help="Pixels per grid square (default 60); the image is 7 squares wide.",
)
@click.option(
    "-b",
    "--background",
    type=RGB_COLOR,
    default=None,
    help="Background color as r,g,b, e.g. 255,0,0 (default 240,240,240).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    name: str,
    size: int | None,
    background: RGBColor | None,
) -> None:
    """identiconctl — turn any string into a symmetric identicon.

    NAME is your name, or any string; the same NAME always yields the same
    image.
    """
    overrides: dict[str, Any] = {}
    if size is not None:
        overrides["size"] = size
    if background is not None:
        overrides["background"] = str(background)

    cli_flags: dict[str, Any] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    if overrides:
        cli_flags["identicon"] = overrides

    try:
        settings = IdenticonctlSettings.from_cli(config_path=config_path, **cli_flags)
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc

    ctx.obj = AppContext(settings, name)


register_commands(cli)
