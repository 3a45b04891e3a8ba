"""MD4 message digest (RFC 1320).

MD4 is cryptographically broken; it is provided for interoperability with
legacy formats (NTLM hashes, ed2k links, rsync checksums).
"""

from __future__ import annotations

import struct

from ..buffer import AccumulatorBuffer
from ..config import ALGORITHM_SPECS, Algorithm
from .base import MASK32, MASK64, PaddedBlock, rotl32

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# (message word order, rotation amounts, additive constant) per pass
ROUNDS = (
    (tuple(range(16)), (3, 7, 11, 19), 0x00000000),
    ((0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15), (3, 5, 9, 13), 0x5A827999),
    ((0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15), (3, 9, 11, 15), 0x6ED9EBA1),
)


def _f(x: int, y: int, z: int) -> int:
    return (x & (y ^ z)) ^ z


def _g(x: int, y: int, z: int) -> int:
    return (x & y) | ((x | y) & z)


def _h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


_FUNCTIONS = (_f, _g, _h)


class MD4Algorithm:
    """MD4 compression function and Merkle-Damgard padding."""

    spec = ALGORITHM_SPECS[Algorithm.MD4]

    def initial_state(self) -> list[int]:
        return list(INITIAL_STATE)

    def compress(self, state: list[int], words: list[int], counter: int, last: bool) -> None:
        v = list(state)
        for fn, (order, shifts, constant) in zip(_FUNCTIONS, ROUNDS):
            for step, k in enumerate(order):
                # registers rotate a, d, c, b
                i = -step % 4
                a = v[i]
                b = v[(i + 1) % 4]
                c = v[(i + 2) % 4]
                d = v[(i + 3) % 4]
                v[i] = rotl32((a + fn(b, c, d) + words[k] + constant) & MASK32, shifts[step % 4])

        for i in range(4):
            state[i] = (state[i] + v[i]) & MASK32

    def pad(self, buffer: AccumulatorBuffer, message_length: int) -> list[PaddedBlock]:
        block_size = self.spec.block_size
        buffer.fill(0x80)
        buffer.fill(0x00, (block_size - 8 - buffer.size) % block_size)
        buffer.append(struct.pack("<Q", (message_length * 8) & MASK64))

        return [PaddedBlock(message_length)] * (buffer.size // block_size)
