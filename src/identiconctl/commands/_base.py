"""Custom Click base classes and parameter types.

IdcCommand and IdcGroup accept an ``examples`` parameter: ``--examples``
prints usage examples and exits, keeping ``--help`` concise.
RGBColorType parses ``r,g,b`` arguments into :class:`RGBColor`.
"""

from __future__ import annotations

from typing import Any

import click

from identiconctl.domain.color import RGBColor, parse_color
from identiconctl.domain.errors import InvalidColorStringError


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class IdcCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class IdcGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = IdcCommand`` so subcommands accept ``examples``
    without an explicit ``cls=``.
    """

    command_class = IdcCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class RGBColorType(click.ParamType):
    """``r,g,b`` with each channel in 0-255."""

    name = "RGB"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> RGBColor:
        if isinstance(value, RGBColor):
            return value
        try:
            return parse_color(str(value))
        except InvalidColorStringError as exc:
            self.fail(str(exc), param, ctx)


RGB_COLOR = RGBColorType()
