# tripboard/core/sha1.py

import struct

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

MASK32 = 0xFFFFFFFF


def rotl32(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK32


def compress(state, block: bytes):
    """
    Run one 64-byte block through the 80-round mixing function.

    Returns the new five-word state. Every word stays masked to 32 bits.
    """
    w = [0] * 80
    w[:16] = struct.unpack(">16L", block)
    for i in range(16, 80):
        w[i] = rotl32(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1)

    a, b, c, d, e = state

    for i in range(80):
        if i < 20:
            f = (b & c) | (~b & d)
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6

        temp = (rotl32(a, 5) + f + e + k + w[i]) & MASK32
        e = d
        d = c
        c = rotl32(b, 30)
        b = a
        a = temp

    return tuple((x + y) & MASK32 for x, y in zip(state, (a, b, c, d, e)))


def pad(pending: bytes, total_length: int) -> bytes:
    """
    0x80 marker, zero fill up to 56 mod 64, then the bit length (big-endian).
    """
    zeros = (55 - total_length) % 64
    return pending + b"\x80" + b"\x00" * zeros + struct.pack(">Q", (total_length * 8) & 0xFFFFFFFFFFFFFFFF)


class Sha1:
    """
    Incremental 160-bit digest with a hashlib-like interface.

    - update() may be called any number of times
    - digest() does not consume the object
    """

    name = "sha1"
    digest_size = 20
    block_size = 64

    def __init__(self, data=None):
        self._state = INITIAL_STATE
        self._pending = b""
        self._length = 0
        if data is not None:
            self.update(data)

    def update(self, data):
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data)
        else:
            raise TypeError(f"expected str or bytes-like object, not {type(data).__name__}")

        self._length += len(data)
        buf = self._pending + data

        offset = 0
        while len(buf) - offset >= self.block_size:
            self._state = compress(self._state, buf[offset:offset + self.block_size])
            offset += self.block_size

        self._pending = buf[offset:]
        return self

    def digest(self) -> bytes:
        state = self._state
        tail = pad(self._pending, self._length)
        for offset in range(0, len(tail), self.block_size):
            state = compress(state, tail[offset:offset + self.block_size])
        return struct.pack(">5L", *state)

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self):
        other = Sha1()
        other._state, other._pending, other._length = self._state, self._pending, self._length
        return other


def sha1_digest(message) -> bytes:
    """
    One-shot digest. Text is UTF-8 encoded first.
    """
    return Sha1(message).digest()
