# tripboard/core/selftest.py

from dataclasses import dataclass
from typing import List

from cryptography.hazmat.primitives import hashes

from tripboard.core.sha1 import sha1_digest

REFERENCE_VECTORS = (
    (b"", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
    (b"abc", "a9993e364706816aba3e25717850c26c9cd0d89d"),
    (
        b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
        "84983e441c3bd26ebaae4aa1f95129e5e54670f1",
    ),
)


@dataclass
class CheckResult:
    message: bytes
    expected: str
    actual: str
    library: str

    @property
    def ok(self) -> bool:
        return self.actual == self.expected == self.library


def library_sha1(message: bytes) -> bytes:
    h = hashes.Hash(hashes.SHA1())
    h.update(message)
    return h.finalize()


def run_selftest(extra=()) -> List[CheckResult]:
    """
    Check the local digest against pinned vectors and the cryptography backend.

    extra: additional messages; their expected value is the backend's digest.
    """
    results = []
    for message, expected in REFERENCE_VECTORS:
        results.append(
            CheckResult(
                message=message,
                expected=expected,
                actual=sha1_digest(message).hex(),
                library=library_sha1(message).hex(),
            )
        )

    for message in extra:
        if isinstance(message, str):
            message = message.encode("utf-8")
        reference = library_sha1(message).hex()
        results.append(
            CheckResult(
                message=message,
                expected=reference,
                actual=sha1_digest(message).hex(),
                library=reference,
            )
        )
    return results
