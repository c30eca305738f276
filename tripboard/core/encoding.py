# tripboard/core/encoding.py

import base64


def encode_base64(data: bytes) -> str:
    """
    Standard alphabet, '=' padded, single line.
    """
    return base64.b64encode(bytes(data)).decode("ascii")
