"""embedded-schnorr verify / challenge - check signature vectors.

Usage:
    embedded-schnorr verify vector.json [--strict] [--json]
    embedded-schnorr challenge vector.json

Exit codes:
    0  - Verified successfully
    10 - Signature rejected
    20 - Malformed vector file
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import click

from ..config import VerifierSettings
from ..errors import InvalidSignatureError, VectorFormatError
from ..scalar import SCALAR_BYTES, decode_scalar
from ..schnorr import SIGNATURE_BYTES, assert_valid_signature, compute_challenge, verify_signature
from ..vectors import load_vector
from .exit_codes import (
    EXIT_INVALID_SIGNATURE,
    EXIT_MALFORMED,
    EXIT_VERIFIED,
    exit_code_description,
)

LOGGER = logging.getLogger(__name__)


def _load(ctx: click.Context, vector_path: str):
    settings: VerifierSettings = ctx.obj["settings"]
    try:
        return load_vector(Path(vector_path), max_message_bytes=settings.max_message_bytes)
    except VectorFormatError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(EXIT_MALFORMED)


@click.command("verify")
@click.argument("vector", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Stop at the first failed check and report it")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON result object")
@click.pass_context
def verify_command(ctx: click.Context, vector: str, strict: bool, as_json: bool) -> None:
    """Verify the signature stored in a JSON vector file."""
    sig_vector = _load(ctx, vector)
    result: Dict[str, Any] = {"vector": vector, "reason": None}

    if strict:
        try:
            assert_valid_signature(
                sig_vector.public_key, sig_vector.signature, sig_vector.message
            )
            ok = True
        except InvalidSignatureError as exc:
            ok = False
            result["reason"] = exc.reason
            result["detail"] = str(exc)
    else:
        ok = verify_signature(sig_vector.public_key, sig_vector.signature, sig_vector.message)

    code = EXIT_VERIFIED if ok else EXIT_INVALID_SIGNATURE
    result["valid"] = ok
    result["exit_code"] = code
    LOGGER.info("%s: %s", vector, exit_code_description(code))

    if as_json:
        click.echo(json.dumps(result, indent=2))
    elif ok:
        click.echo("VALID")
    else:
        suffix = f" ({result['reason']}: {result['detail']})" if result["reason"] else ""
        click.echo(f"INVALID{suffix}")
    raise SystemExit(code)


@click.command("challenge")
@click.argument("vector", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def challenge_command(ctx: click.Context, vector: str) -> None:
    """Print the challenge recomputed from a vector's key, s, e and message."""
    sig_vector = _load(ctx, vector)
    if len(sig_vector.signature) != SIGNATURE_BYTES:
        click.echo(f"Error: signature must be {SIGNATURE_BYTES} bytes", err=True)
        raise SystemExit(EXIT_MALFORMED)
    sig_s = decode_scalar(sig_vector.signature, 0)
    sig_e = decode_scalar(sig_vector.signature, SCALAR_BYTES)
    r_is_infinite, challenge = compute_challenge(
        sig_vector.public_key, sig_s, sig_e, sig_vector.message
    )
    click.echo(f"challenge: {challenge.hex()}")
    click.echo(f"embedded:  {sig_vector.signature[SCALAR_BYTES:].hex()}")
    click.echo(f"r_is_infinite: {str(r_is_infinite).lower()}")


__all__ = ["verify_command", "challenge_command"]
