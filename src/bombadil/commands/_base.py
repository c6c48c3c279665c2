"""``--examples``: usage examples on demand, keeping ``--help`` short."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

_F = TypeVar("_F", bound=Callable[..., Any])


def examples_option(*lines: str) -> Callable[[_F], _F]:
    """Add an eager ``--examples`` flag printing one example per line.

    Place it under ``@click.command``/``@click.group``::

        @click.command()
        @examples_option("bombadil install ~/dotfiles")
        def install(...): ...
    """

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in lines:
            click.echo(f"  {line}")
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )
