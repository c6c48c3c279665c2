"""The object the root group hands to every command via ``@click.pass_obj``.

It holds the resolved :class:`CliOptions`, sets up logging from them, and
turns a ServiceResult into output and an exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bombadil.output.formatters import format_result

if TYPE_CHECKING:
    from bombadil.config.options import CliOptions
    from bombadil.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, options: CliOptions) -> None:
        self.options = options

        from bombadil.config.logging import configure_logging

        configure_logging(verbose=options.verbose, log_json=options.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are not echoed again: the import diagnostics behind
          them were already written to stderr by the logger.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.options.json_output,
            verbose=self.options.verbose,
        )
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
