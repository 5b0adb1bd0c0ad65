import logging  # module logger

from Crypto.Cipher import ChaCha20  # RFC 7539 ChaCha20 (12-byte nonce, 32-bit counter)

log = logging.getLogger(__name__)

KEY_BYTES = 32  # ChaCha20 key width
ZERO_NONCE = b"\x00" * 12  # default nonce; block counter also starts at 0

class KeystreamLengthError(ValueError):  # Raised when the cipher yields fewer bytes than requested.
    pass

def _check_len(name, b, n):  # Reject keys/nonces of the wrong width instead of padding.
    if len(b) != n:
        raise ValueError(f"{name} must be {n} bytes, got {len(b)}")
    return b

class ChaCha20Stream:  # Incremental reader over the ChaCha20 keystream of (key, nonce).
    def __init__(self, key, nonce=ZERO_NONCE):
        self.key = _check_len("key", bytes(key), KEY_BYTES)
        self.nonce = _check_len("nonce", bytes(nonce), len(ZERO_NONCE))
        self._cipher = ChaCha20.new(key=self.key, nonce=self.nonce)
        self.position = 0

    def read(self, n):  # Next n keystream bytes; consecutive reads extend the same stream.
        n = int(n)
        if n < 0:
            raise ValueError("n must be non-negative")
        if n == 0:
            return b""
        out = self._cipher.encrypt(b"\x00" * n)  # keystream XOR zeros == keystream
        if len(out) != n:
            raise KeystreamLengthError(f"requested {n} keystream bytes, got {len(out)}")
        self.position += n
        return out

def chacha20_keystream(key, n, nonce=ZERO_NONCE):  # First n bytes of the keystream for (key, nonce).
    out = ChaCha20Stream(key, nonce).read(n)
    log.debug("chacha20 keystream[%d] = %s", n, out.hex())
    return out
