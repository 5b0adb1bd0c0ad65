#!/usr/bin/env python3
"""
Print every intermediate value of the seeded trapdoor derivation.

Output order (one value per line, stdout):
  1. keccak256 digest (hex)
  2. chacha20 keystream (hex)
  3. first 32 keystream bytes (hex)
  4. little-endian integer of those bytes (decimal)
  5. that integer mod the BN254 scalar field order (decimal)

Diff this against the same printout from another implementation.
"""

from __future__ import annotations

import argparse
import logging
import sys

from trapdoor import DEFAULT_KEYSTREAM_LEN, DEFAULT_SIGNAL, derive_trapdoor_trace, seed_to_signal

log = logging.getLogger("trapdoor_debug")

def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="trapdoor-debug",
        description="Derive a BN254 trapdoor via keccak256 -> chacha20 -> LE mod r and print each step",
    )
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--signal-hex", default=None, help="Input signal as hex (default: 00010203040506070809)")
    src.add_argument("--seed", default=None, help="Input signal as a UTF-8 text seed")
    ap.add_argument("--length", type=int, default=DEFAULT_KEYSTREAM_LEN, help="Keystream bytes to generate (default 64)")
    ap.add_argument("--nullifier", action="store_true", help="Also print keystream[32:64] and its reduced value")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log each stage to stderr")
    return ap

def _signal_from_args(args) -> bytes:
    if args.seed is not None:
        return seed_to_signal(args.seed)
    if args.signal_hex is not None:
        return bytes.fromhex(args.signal_hex)
    return DEFAULT_SIGNAL

def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        signal = _signal_from_args(args)
        trace = derive_trapdoor_trace(signal, args.length)
        lines = trace.lines()
        if args.nullifier:
            lines += [trace.nullifier_bytes.hex(), str(int(trace.nullifier))]
    except ValueError as e:  # bad hex, bad length, or a pipeline width mismatch
        log.debug("derivation failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    for line in lines:
        print(line)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
