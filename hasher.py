import logging  # module logger

from Crypto.Hash import keccak  # original Keccak padding (0x01), not NIST SHA3 (0x06)

log = logging.getLogger(__name__)

DIGEST_BYTES = 32  # Keccak-256 output width

def keccak256(data):  # Keccak-256 digest of any bytes-like value (empty input allowed).
    if isinstance(data, (str, int)):
        raise TypeError(f"keccak256 expects bytes, got {type(data).__name__}")
    b = bytes(data)
    out = keccak.new(digest_bits=256, data=b).digest()
    log.debug("keccak256(%d bytes) = %s", len(b), out.hex())
    return out

def keccak256_hex(data):  # Lowercase hex of keccak256(data).
    return keccak256(data).hex()
