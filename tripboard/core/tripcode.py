# tripboard/core/tripcode.py

from tripboard.core.encoding import encode_base64
from tripboard.core.sha1 import sha1_digest

TRIP_LENGTH = 10


def derive_tripcode(seed: str) -> str:
    """
    Public tag for a secret seed.

    sha1(utf8(seed)) -> base64 -> strip trailing '=' -> first TRIP_LENGTH chars.
    The display marker is added by the caller.
    """
    encoded = encode_base64(sha1_digest(seed.encode("utf-8")))
    return encoded.rstrip("=")[:TRIP_LENGTH]
