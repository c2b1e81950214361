"""Pytest configuration and fixtures for the embedded Schnorr verifier."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from embedded_schnorr.curve import CURVE_ORDER, GENERATOR, CurvePoint, scalar_mul
from embedded_schnorr.field import to_be_bytes
from embedded_schnorr.hashes import blake2s, pedersen_hash
from embedded_schnorr.vectors import SignatureVector, load_vector

FIXTURES = Path(__file__).parent / "fixtures"


@dataclass
class KeyPair:
    secret: int
    public_key: CurvePoint

    def sign(self, message: bytes) -> bytes:
        """Produce a signature the verifier accepts (test-only signer)."""
        nonce = int.from_bytes(
            blake2s(self.secret.to_bytes(32, "big") + message), "big"
        ) % CURVE_ORDER
        commitment = scalar_mul(GENERATOR, nonce)
        binding = pedersen_hash([commitment.x, self.public_key.x, self.public_key.y])
        e_bytes = blake2s(to_be_bytes(binding) + message)
        e = int.from_bytes(e_bytes, "big")
        s = (nonce - e * self.secret) % CURVE_ORDER
        return s.to_bytes(32, "big") + e_bytes


def make_keypair(secret: int) -> KeyPair:
    return KeyPair(secret=secret, public_key=scalar_mul(GENERATOR, secret))


@pytest.fixture(scope="session")
def smoke_vector() -> SignatureVector:
    return load_vector(FIXTURES / "smoke_vector.json")


@pytest.fixture(scope="session")
def keypair() -> KeyPair:
    return make_keypair(0x1F2E3D4C5B6A79881726354453627180A9B8C7D6E5F4031201F2E3D4C5B6A7)


@pytest.fixture
def write_vector(tmp_path):
    """Write a vector dict to a temporary JSON file and return its path."""

    def _write(data: dict, name: str = "vector.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write
