import hashlib
import pathlib
import random
import sys
import unittest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from hasher import DIGEST_BYTES, keccak256, keccak256_hex


class HasherTests(unittest.TestCase):
    def test_known_vectors(self):
        self.assertEqual(keccak256_hex(b""), "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470")
        self.assertEqual(keccak256_hex(b"abc"), "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45")

    def test_not_nist_sha3(self):  # same sponge, different padding byte
        for msg in (b"", b"abc", bytes(range(10))):
            self.assertNotEqual(keccak256(msg), hashlib.sha3_256(msg).digest())

    def test_deterministic_and_fixed_width(self):
        rng = random.Random(0)
        for n in (0, 1, 135, 136, 137, 1000):
            msg = bytes(rng.getrandbits(8) for _ in range(n))
            d = keccak256(msg)
            self.assertEqual(len(d), DIGEST_BYTES)
            self.assertEqual(d, keccak256(bytearray(msg)))
            self.assertEqual(d, keccak256(memoryview(msg)))

    def test_rejects_non_bytes(self):
        with self.assertRaises(TypeError):
            keccak256("abc")
        with self.assertRaises(TypeError):
            keccak256(10)


if __name__ == "__main__":
    unittest.main()
