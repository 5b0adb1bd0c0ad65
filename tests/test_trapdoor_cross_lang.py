import pathlib
import random
import sys
import unittest

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from tests.oracle import run_js_oracle
from trapdoor import derive_identity_secrets, derive_trapdoor_trace


class CrossLangTrapdoorTests(unittest.TestCase):
    def cases(self):
        rng = random.Random(7)
        out = [(bytes(range(10)), 64), (b"", 32), (b"\xff" * 200, 128)]
        for _ in range(20):
            n = rng.randrange(0, 300)
            out.append((bytes(rng.getrandbits(8) for _ in range(n)), rng.randrange(32, 160)))
        return out

    def test_trace_matches_js(self):
        cases = self.cases()
        payload = "".join(f"{sig.hex() or '-'} {n}\n" for sig, n in cases)  # "-" marks the empty signal
        js_lines = run_js_oracle("trace", payload).strip().splitlines()
        py_lines = [line for sig, n in cases for line in derive_trapdoor_trace(sig, n).lines()]
        self.assertEqual(len(js_lines), 5 * len(cases))
        self.assertEqual(py_lines, js_lines)

    def test_identity_matches_js(self):
        seeds = ["This is a test seed", "seed", "test-seed", "ünïcödé", "x" * 100]
        js_lines = run_js_oracle("identity", "".join(s.encode().hex() + "\n" for s in seeds)).strip().splitlines()
        py_lines = []
        for s in seeds:
            secrets = derive_identity_secrets(s)
            py_lines += [str(int(secrets.trapdoor)), str(int(secrets.nullifier))]
        self.assertEqual(py_lines, js_lines)


if __name__ == "__main__":
    unittest.main()
