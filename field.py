import logging  # module logger

log = logging.getLogger(__name__)

FIELD_BYTES = 32  # canonical encoding width of a scalar

class FieldEncodingError(ValueError):  # Raised when a byte slice is not exactly FIELD_BYTES long.
    pass

def _check_byteorder(byteorder):  # Accept only the two int.from_bytes orders.
    if byteorder not in ("little", "big"):
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")
    return byteorder

class PrimeField:  # Prime field element stored as a canonical int in [0, MODULUS).
    def __init_subclass__(cls):  # Validate the modulus once per subclass.
        if "MODULUS" not in cls.__dict__:
            return
        p = cls.MODULUS
        if p % 2 == 0 or p.bit_length() > 8 * FIELD_BYTES:
            raise ValueError(f"MODULUS must be odd and fit in {FIELD_BYTES} bytes")

    def __init__(self, x=0):  # Python % is Euclidean for a positive modulus, so negatives land in range.
        if not isinstance(x, int):
            raise TypeError(f"expected int, got {type(x).__name__}")
        self.v = x % type(self).MODULUS

    zero = classmethod(lambda cls: cls(0))  # Additive identity.

    one = classmethod(lambda cls: cls(1))  # Multiplicative identity.

    @classmethod
    def from_bytes_mod_order(cls, data, byteorder="little"):  # Interpret 32 bytes as an unsigned int, then reduce.
        if isinstance(data, (str, int)):
            raise TypeError(f"expected bytes, got {type(data).__name__}")
        b = bytes(data)
        if len(b) != FIELD_BYTES:
            raise FieldEncodingError(f"expected {FIELD_BYTES} bytes, got {len(b)}")
        x = int.from_bytes(b, _check_byteorder(byteorder), signed=False)
        out = cls(x)
        if out.v != x:
            log.debug("reduced %d-bit value mod %s", x.bit_length(), cls.__name__)
        return out

    def to_bytes(self, byteorder="little"):  # Canonical 32-byte encoding.
        return self.v.to_bytes(FIELD_BYTES, _check_byteorder(byteorder))

    def to_int(self): return self.v  # Canonical integer form.

    def __eq__(self, other):  # Equality with field elements or ints (compared mod MODULUS).
        if isinstance(other, type(self)):
            return self.v == other.v
        return self.v == (other % type(self).MODULUS) if isinstance(other, int) else NotImplemented

    def __hash__(self): return hash((type(self).__name__, self.v))

    def __int__(self): return self.v  # int(...) exposes canonical integer.

    def __repr__(self): return f"{type(self).__name__}({self.v})"  # Debug-friendly printable form.

class Fr(PrimeField):  # BN254 scalar field.
    MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617  # BN254 Fr modulus

def reduce_mod_order(x):  # x mod BN254 r for any int; idempotent.
    return Fr(x).v
