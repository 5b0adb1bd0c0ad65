"""Seeded trapdoor derivation.

signal --keccak256--> digest --chacha20(key=digest, nonce=0)--> keystream
keystream[0:32] --LE int--> mod BN254 r --> trapdoor (debug trace)

Seeded identities read the same two keystream halves big-endian:
keystream[0:32] --BE int--> mod BN254 r --> trapdoor
keystream[32:64] --BE int--> mod BN254 r --> nullifier
"""

from __future__ import annotations  # keep type hints lightweight

import logging  # module logger
from dataclasses import dataclass  # frozen trace containers

from field import FIELD_BYTES, FieldEncodingError, Fr  # BN254 scalar field
from hasher import DIGEST_BYTES, keccak256  # Keccak-256 digest
from keystream import KeystreamLengthError, chacha20_keystream  # ChaCha20 keystream

log = logging.getLogger(__name__)

DEFAULT_SIGNAL = bytes(range(10))  # 00 01 .. 09
DEFAULT_KEYSTREAM_LEN = 2 * FIELD_BYTES  # trapdoor half + nullifier half
BYTEORDER = "little"  # debug trace reads keystream slices least-significant byte first
IDENTITY_BYTEORDER = "big"  # seeded identities read them most-significant byte first

class TrapdoorError(Exception):  # Base for derivation failures.
    pass

class PipelineLengthError(TrapdoorError, ValueError):  # A stage produced, or was asked for, a slice of the wrong width.
    pass

def _expect_len(what, b, n):  # Fatal on any width mismatch; never truncate or pad.
    if len(b) != n:
        raise PipelineLengthError(f"{what}: expected {n} bytes, got {len(b)}")
    return b

def _keystream_half(keystream, i):  # i-th 32-byte half of the keystream.
    if len(keystream) < (i + 1) * FIELD_BYTES:
        raise PipelineLengthError(f"need {(i + 1) * FIELD_BYTES} keystream bytes, have {len(keystream)}")
    return keystream[i * FIELD_BYTES : (i + 1) * FIELD_BYTES]

@dataclass(frozen=True)
class TrapdoorTrace:  # Every intermediate value of one derivation, in pipeline order.
    signal: bytes  # input bytes
    digest: bytes  # keccak256(signal)
    keystream: bytes  # chacha20(digest) prefix
    trapdoor_bytes: bytes  # keystream[0:32]
    trapdoor_int: int  # LE int of trapdoor_bytes (may exceed the modulus)
    trapdoor: Fr  # trapdoor_int mod r

    @property
    def nullifier_bytes(self) -> bytes:  # keystream[32:64]
        return _keystream_half(self.keystream, 1)

    @property
    def nullifier(self) -> Fr:  # LE, like the trapdoor line of the trace
        return Fr.from_bytes_mod_order(self.nullifier_bytes, BYTEORDER)

    def lines(self) -> list[str]:  # Fixed debug output order, compared line-by-line across runtimes.
        return [
            self.digest.hex(),
            self.keystream.hex(),
            self.trapdoor_bytes.hex(),
            str(self.trapdoor_int),
            str(int(self.trapdoor)),
        ]

def derive_trapdoor_trace(signal=DEFAULT_SIGNAL, keystream_len=DEFAULT_KEYSTREAM_LEN) -> TrapdoorTrace:
    if isinstance(signal, (str, int)):
        raise TypeError(f"signal must be bytes, got {type(signal).__name__}")
    if isinstance(keystream_len, bool) or not isinstance(keystream_len, int):
        raise TypeError(f"keystream_len must be int, got {type(keystream_len).__name__}")
    if keystream_len < FIELD_BYTES:
        raise PipelineLengthError(f"keystream_len must be >= {FIELD_BYTES}, got {keystream_len}")
    signal = bytes(signal)
    try:
        digest = _expect_len("digest", keccak256(signal), DIGEST_BYTES)
        keystream = _expect_len("keystream", chacha20_keystream(digest, keystream_len), keystream_len)
        trapdoor_bytes = _expect_len("trapdoor slice", keystream[:FIELD_BYTES], FIELD_BYTES)
        trapdoor = Fr.from_bytes_mod_order(trapdoor_bytes, BYTEORDER)
    except (KeystreamLengthError, FieldEncodingError) as e:
        raise PipelineLengthError(str(e)) from e
    trapdoor_int = int.from_bytes(trapdoor_bytes, BYTEORDER)
    log.debug("trapdoor(%s) = %d", signal.hex(), int(trapdoor))
    return TrapdoorTrace(signal, digest, keystream, trapdoor_bytes, trapdoor_int, trapdoor)

def derive_trapdoor(signal=DEFAULT_SIGNAL) -> Fr:
    return derive_trapdoor_trace(signal, FIELD_BYTES).trapdoor

def seed_to_signal(seed) -> bytes:  # Text seeds are UTF-8 encoded; bytes pass through.
    if isinstance(seed, str):
        return seed.encode("utf-8")
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return bytes(seed)
    raise TypeError(f"seed must be str or bytes, got {type(seed).__name__}")

@dataclass(frozen=True)
class IdentitySecrets:  # Trapdoor/nullifier pair derived from one seed.
    trapdoor: Fr
    nullifier: Fr

    def trapdoor_bytes_be(self) -> bytes:
        return self.trapdoor.to_bytes("big")

    def nullifier_bytes_be(self) -> bytes:
        return self.nullifier.to_bytes("big")

def derive_identity_secrets(seed) -> IdentitySecrets:
    keystream = derive_trapdoor_trace(seed_to_signal(seed), DEFAULT_KEYSTREAM_LEN).keystream
    try:
        trapdoor = Fr.from_bytes_mod_order(_keystream_half(keystream, 0), IDENTITY_BYTEORDER)
        nullifier = Fr.from_bytes_mod_order(_keystream_half(keystream, 1), IDENTITY_BYTEORDER)
    except FieldEncodingError as e:
        raise PipelineLengthError(str(e)) from e
    log.debug("identity trapdoor = %d, nullifier = %d", int(trapdoor), int(nullifier))
    return IdentitySecrets(trapdoor, nullifier)
