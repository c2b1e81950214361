"""JSON signature vectors: ``{"public_key", "signature", "message"}``."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .curve import CurvePoint
from .errors import VectorFormatError


@dataclass
class SignatureVector:
    public_key: CurvePoint
    signature: bytes
    message: bytes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "public_key": {
                "x": hex(self.public_key.x),
                "y": hex(self.public_key.y),
                "is_infinite": self.public_key.is_infinite,
            },
            "signature": self.signature.hex(),
            "message": self.message.hex(),
        }


def _parse_field(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise VectorFormatError(f"{name} must be an integer or hex string")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 0) if value.lower().startswith("0x") else int(value)
        except ValueError as exc:
            raise VectorFormatError(f"{name} is not a number: {value!r}") from exc
    raise VectorFormatError(f"{name} must be an integer or hex string")


def _parse_bytes(value: Any, name: str) -> bytes:
    if isinstance(value, str):
        text = value[2:] if value.lower().startswith("0x") else value
        try:
            return bytes.fromhex(text)
        except ValueError as exc:
            raise VectorFormatError(f"{name} is not valid hex") from exc
    if isinstance(value, list):
        try:
            return bytes(value)
        except (TypeError, ValueError) as exc:
            raise VectorFormatError(f"{name} must be a list of byte values") from exc
    raise VectorFormatError(f"{name} must be a hex string or a list of bytes")


def vector_from_dict(data: Dict[str, Any]) -> SignatureVector:
    if not isinstance(data, dict):
        raise VectorFormatError("vector must be a JSON object")
    key = data.get("public_key")
    if not isinstance(key, dict):
        raise VectorFormatError("missing public_key object")
    x = _parse_field(key.get("x"), "public_key.x")
    y = _parse_field(key.get("y"), "public_key.y")
    is_infinite = key.get("is_infinite", False)
    if not isinstance(is_infinite, bool):
        raise VectorFormatError("public_key.is_infinite must be a JSON boolean")
    try:
        public_key = CurvePoint(x=x, y=y, is_infinite=is_infinite)
    except ValueError as exc:
        raise VectorFormatError(f"invalid public key: {exc}") from exc

    if "signature" not in data:
        raise VectorFormatError("missing signature")
    signature = _parse_bytes(data["signature"], "signature")

    if "message" in data:
        message = _parse_bytes(data["message"], "message")
    elif "message_utf8" in data:
        message = str(data["message_utf8"]).encode("utf-8")
    else:
        raise VectorFormatError("missing message")
    return SignatureVector(public_key=public_key, signature=signature, message=message)


def load_vector(path: Path, *, max_message_bytes: Optional[int] = None) -> SignatureVector:
    try:
        data = json.loads(Path(path).read_bytes().decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise VectorFormatError(f"{path}: not UTF-8 text ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise VectorFormatError(f"{path}: invalid JSON ({exc})") from exc
    vector = vector_from_dict(data)
    if max_message_bytes is not None and len(vector.message) > max_message_bytes:
        raise VectorFormatError(
            f"message is {len(vector.message)} bytes, limit is {max_message_bytes}"
        )
    return vector


__all__ = ["SignatureVector", "vector_from_dict", "load_vector"]
