"""embedded-schnorr CLI.

Commands:
    verify      - Verify a JSON signature vector
    challenge   - Print the recomputed challenge for a vector
    generators  - Print derived Pedersen generators
"""
from __future__ import annotations

import click

from ..config import VerifierSettings
from .generators_cmd import generators_command
from .verify_cmd import challenge_command, verify_command


@click.group()
@click.option("--log-level", default=None, help="Override SCHNORR_LOG_LEVEL")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Schnorr signatures over the embedded curve."""
    try:
        settings = VerifierSettings.from_env()
    except ValueError as exc:
        raise click.UsageError(f"invalid SCHNORR_* environment setting: {exc}")
    if log_level:
        try:
            settings = VerifierSettings(
                max_message_bytes=settings.max_message_bytes, log_level=log_level
            )
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--log-level")
    settings.configure_logging()
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


cli.add_command(verify_command)
cli.add_command(challenge_command)
cli.add_command(generators_command)


def main() -> None:
    cli(obj={})


__all__ = ["cli", "main"]
