"""embedded-schnorr generators - print hash-to-curve generators."""
from __future__ import annotations

import click

from ..generators import DEFAULT_DOMAIN_SEPARATOR, derive_generators


@click.command("generators")
@click.option("--separator", default=DEFAULT_DOMAIN_SEPARATOR.decode(), show_default=True,
              help="Domain separator string")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1), show_default=True)
@click.option("--start", default=0, type=click.IntRange(min=0), show_default=True,
              help="Index of the first generator")
def generators_command(separator: str, count: int, start: int) -> None:
    """Derive generators for a domain separator."""
    try:
        points = derive_generators(separator.encode("utf-8"), count, start)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--start/--count")
    for offset, point in enumerate(points):
        click.echo(f"{start + offset}: x=0x{point.x:064x} y=0x{point.y:064x}")


__all__ = ["generators_command"]
