from __future__ import annotations

from typing import Callable, TypeAlias

import typer

EchoFn: TypeAlias = Callable[[str], None]


def echo(message: str) -> None:
    typer.echo(message)


def warn(message: str) -> None:
    typer.echo(message, err=True)
