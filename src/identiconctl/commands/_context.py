"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Holds the settings and the identicon name, builds
the service lazily and centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from identiconctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from identiconctl.config.settings import IdenticonctlSettings
    from identiconctl.services.identicon import IdenticonService
    from identiconctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: IdenticonctlSettings, name: str) -> None:
        self.settings = settings
        self.name = name
        self._service: IdenticonService | None = None

        from identiconctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        structlog.contextvars.bind_contextvars(identicon=name)

        if settings.verbose:
            from identiconctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> IdenticonService:
        """The identicon service for this invocation (created on first access)."""
        if self._service is None:
            from identiconctl.services.identicon import IdenticonService

            self._service = IdenticonService(
                self.name,
                size=self.settings.identicon.size,
                background=self.settings.identicon.background_color,
            )
        return self._service

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr outside JSON mode.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
