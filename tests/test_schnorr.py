from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from embedded_schnorr import (
    GENERATOR,
    CURVE_ORDER,
    FIELD_MODULUS,
    CurvePoint,
    InvalidSignatureError,
    assert_valid_signature,
    compute_challenge,
    decode_scalar,
    verify_signature,
)


def _flip(data: bytes, index: int, bit: int = 0) -> bytes:
    mutated = bytearray(data)
    mutated[index] ^= 1 << bit
    return bytes(mutated)


def test_reference_vector_verifies(smoke_vector) -> None:
    assert verify_signature(smoke_vector.public_key, smoke_vector.signature, smoke_vector.message)
    assert_valid_signature(smoke_vector.public_key, smoke_vector.signature, smoke_vector.message)


def test_reference_vector_challenge_matches_embedded_bytes(smoke_vector) -> None:
    sig = smoke_vector.signature
    r_is_infinite, challenge = compute_challenge(
        smoke_vector.public_key, decode_scalar(sig, 0), decode_scalar(sig, 32), smoke_vector.message
    )
    assert not r_is_infinite
    assert challenge == sig[32:]


def test_zero_signature_is_rejected(smoke_vector) -> None:
    assert not verify_signature(smoke_vector.public_key, bytes(64), bytes(10))
    assert not verify_signature(smoke_vector.public_key, bytes(64), smoke_vector.message)


def test_zero_signature_is_rejected_for_any_key(keypair) -> None:
    assert not verify_signature(keypair.public_key, bytes(64), b"")
    assert not verify_signature(GENERATOR, bytes(64), b"anything")


@pytest.mark.parametrize("index", range(64))
def test_signature_bit_flip_is_rejected(smoke_vector, index: int) -> None:
    mutated = _flip(smoke_vector.signature, index, bit=index % 8)
    assert not verify_signature(smoke_vector.public_key, mutated, smoke_vector.message)


@pytest.mark.parametrize("index", range(10))
def test_message_bit_flip_is_rejected(smoke_vector, index: int) -> None:
    mutated = _flip(smoke_vector.message, index, bit=7 - index % 8)
    assert not verify_signature(smoke_vector.public_key, smoke_vector.signature, mutated)


def test_truncated_or_extended_message_is_rejected(smoke_vector) -> None:
    key, sig, msg = smoke_vector.public_key, smoke_vector.signature, smoke_vector.message
    assert not verify_signature(key, sig, msg[:-1])
    assert not verify_signature(key, sig, msg + b"\x00")


def test_off_curve_key_is_rejected(smoke_vector) -> None:
    key = smoke_vector.public_key
    off_curve = CurvePoint(key.x, (key.y + 1) % FIELD_MODULUS)
    assert not off_curve.is_on_curve()
    assert not verify_signature(off_curve, smoke_vector.signature, smoke_vector.message)
    with pytest.raises(InvalidSignatureError) as excinfo:
        assert_valid_signature(off_curve, smoke_vector.signature, smoke_vector.message)
    assert excinfo.value.reason == "public_key_not_on_curve"


def test_infinite_key_is_rejected(smoke_vector) -> None:
    key = smoke_vector.public_key
    flagged = CurvePoint(key.x, key.y, is_infinite=True)
    assert not verify_signature(flagged, smoke_vector.signature, smoke_vector.message)
    assert not verify_signature(CurvePoint.infinity(), smoke_vector.signature, smoke_vector.message)
    with pytest.raises(InvalidSignatureError) as excinfo:
        assert_valid_signature(flagged, smoke_vector.signature, smoke_vector.message)
    assert excinfo.value.reason == "public_key_infinite"


def test_zero_response_scalar_is_reported_first(smoke_vector) -> None:
    with pytest.raises(InvalidSignatureError) as excinfo:
        assert_valid_signature(smoke_vector.public_key, bytes(64), smoke_vector.message)
    assert excinfo.value.reason == "zero_sig_s"


def test_zero_challenge_scalar_is_reported(smoke_vector) -> None:
    signature = smoke_vector.signature[:32] + bytes(32)
    assert not verify_signature(smoke_vector.public_key, signature, smoke_vector.message)
    with pytest.raises(InvalidSignatureError) as excinfo:
        assert_valid_signature(smoke_vector.public_key, signature, smoke_vector.message)
    assert excinfo.value.reason == "zero_sig_e"


def test_commitment_at_infinity_is_rejected() -> None:
    # with key = G, s = n - 1 and e = 1 give R = (n - 1 + 1) * G = O
    signature = (CURVE_ORDER - 1).to_bytes(32, "big") + (1).to_bytes(32, "big")
    r_is_infinite, _ = compute_challenge(
        GENERATOR, decode_scalar(signature, 0), decode_scalar(signature, 32), b"msg"
    )
    assert r_is_infinite
    assert not verify_signature(GENERATOR, signature, b"msg")
    with pytest.raises(InvalidSignatureError) as excinfo:
        assert_valid_signature(GENERATOR, signature, b"msg")
    assert excinfo.value.reason == "commitment_infinite"


def test_challenge_mismatch_reports_byte_index(smoke_vector) -> None:
    with pytest.raises(InvalidSignatureError) as excinfo:
        assert_valid_signature(smoke_vector.public_key, smoke_vector.signature, b"other message")
    assert excinfo.value.reason == "challenge_mismatch"
    assert 0 <= excinfo.value.byte_index < 32


@pytest.mark.parametrize("length", [0, 63, 65])
def test_wrong_length_signature(smoke_vector, length: int) -> None:
    signature = (smoke_vector.signature * 2)[:length]
    assert not verify_signature(smoke_vector.public_key, signature, smoke_vector.message)
    with pytest.raises(InvalidSignatureError) as excinfo:
        assert_valid_signature(smoke_vector.public_key, signature, smoke_vector.message)
    assert excinfo.value.reason == "malformed_signature"


@pytest.mark.parametrize(
    "message",
    [b"", b"hello", bytes(range(256)) * 3],
)
def test_fresh_signatures_verify(keypair, message: bytes) -> None:
    signature = keypair.sign(message)
    assert verify_signature(keypair.public_key, signature, message)
    assert_valid_signature(keypair.public_key, signature, message)
    assert not verify_signature(keypair.public_key, signature, message + b"!")


def test_signature_is_bound_to_key(keypair, smoke_vector) -> None:
    message = b"bound to one key"
    signature = keypair.sign(message)
    assert not verify_signature(smoke_vector.public_key, signature, message)


def test_unreduced_challenge_bytes_are_compared_raw(keypair) -> None:
    # the embedded challenge is compared as bytes, so e + n as a scalar fails
    message = b"raw byte comparison"
    signature = keypair.sign(message)
    e = int.from_bytes(signature[32:], "big")
    if e + CURVE_ORDER >= 1 << 256:
        pytest.skip("challenge too large to shift by the group order")
    shifted = signature[:32] + (e + CURVE_ORDER).to_bytes(32, "big")
    assert not verify_signature(keypair.public_key, shifted, message)


def test_accepts_bytearray_and_memoryview(smoke_vector) -> None:
    assert verify_signature(
        smoke_vector.public_key,
        bytearray(smoke_vector.signature),
        memoryview(smoke_vector.message),
    )


def test_concurrent_verification_agrees(smoke_vector) -> None:
    args = (smoke_vector.public_key, smoke_vector.signature, smoke_vector.message)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: verify_signature(*args), range(8)))
    assert results == [True] * 8
