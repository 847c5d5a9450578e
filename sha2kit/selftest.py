"""
Self-Test

Checks the from-scratch engine against NIST test vectors and against the
SHA-2 implementations of the cryptography package.

Run with: python -m sha2kit.selftest
"""

import os
from dataclasses import dataclass
from typing import List, Sequence

from cryptography.hazmat.primitives import hashes

from .core.constants import SHA224, SHA256, SHA384, SHA512, Variant
from .core.sha2 import digest


# ============================================================================
# Reference Data
# ============================================================================

# Test vectors from NIST (FIPS 180-4 examples)
NIST_VECTORS = [
    (SHA256, b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (SHA256, b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (SHA224, b"", "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f"),
    (SHA224, b"abc", "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7"),
    (SHA512, b"",
     "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
     "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"),
    (SHA512, b"abc",
     "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
     "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"),
    (SHA384, b"",
     "38b060a751ac96384cd9327eb1b1e36a21fdb71114be0743"
     "4c0cc7bf63f6e1da274edebfe76f65fbd51ad2f14898b95b"),
    (SHA384, b"abc",
     "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded163"
     "1a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7"),
]

# Lengths around every padding boundary of both block sizes
BOUNDARY_LENGTHS = (0, 1, 55, 56, 63, 64, 65, 111, 112, 119, 127, 128, 129, 200)


def _reference_algorithm(variant: Variant) -> hashes.HashAlgorithm:
    return {
        SHA224.name: hashes.SHA224(),
        SHA256.name: hashes.SHA256(),
        SHA384.name: hashes.SHA384(),
        SHA512.name: hashes.SHA512(),
    }[variant.name]


def reference_digest(data: bytes, variant: Variant) -> bytes:
    """Digest of data computed by the cryptography package."""
    h = hashes.Hash(_reference_algorithm(variant))
    h.update(data)
    return h.finalize()


# ============================================================================
# Checks
# ============================================================================

@dataclass
class CheckResult:
    """Outcome of one comparison."""
    variant: str
    label: str
    expected: str
    got: str

    @property
    def passed(self) -> bool:
        return self.expected == self.got


def check_vectors() -> List[CheckResult]:
    """Compare against the published NIST digests."""
    return [
        CheckResult(variant.name, repr(data), expected, digest(data, variant).hex())
        for variant, data, expected in NIST_VECTORS
    ]


def check_reference(lengths: Sequence[int] = BOUNDARY_LENGTHS, seed: bytes = b"") -> List[CheckResult]:
    """
    Compare against the cryptography package for messages of the given lengths.

    Args:
        lengths: Message lengths in bytes
        seed: If empty, messages are random; otherwise seed is repeated
            to the required length
    """
    results = []
    for length in lengths:
        if seed:
            data = (seed * (length // len(seed) + 1))[:length]
        else:
            data = os.urandom(length)
        for variant in (SHA224, SHA256, SHA384, SHA512):
            results.append(CheckResult(
                variant.name,
                f"{length} bytes",
                reference_digest(data, variant).hex(),
                digest(data, variant).hex(),
            ))
    return results


def run_selftest(verbose: bool = True) -> bool:
    """Run all checks, print a report, and return True if everything passed."""
    results = check_vectors() + check_reference()

    if verbose:
        print("SHA-2 Implementation Test")
        print("=" * 60)
        for r in results:
            status = "PASS" if r.passed else "FAIL"
            print(f"{status}  {r.variant:8} {r.label}")
            if not r.passed:
                print(f"      Expected: {r.expected}")
                print(f"      Got:      {r.got}")
        print("=" * 60)

    all_passed = all(r.passed for r in results)
    if verbose:
        print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
    return all_passed


if __name__ == "__main__":
    raise SystemExit(0 if run_selftest() else 1)
