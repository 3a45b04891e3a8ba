"""BLAKE-256, the round-3 SHA-3 submission (14 rounds).

References:
    https://131002.net/blake/
"""

from __future__ import annotations

import struct

from ..buffer import AccumulatorBuffer
from ..config import ALGORITHM_SPECS, Algorithm
from .base import G_LANES, MASK32, MASK64, SIGMA, PaddedBlock, rotr32

INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

# Leading digits of pi.
CONSTANTS = (
    0x243F6A88, 0x85A308D3, 0x13198A2E, 0x03707344,
    0xA4093822, 0x299F31D0, 0x082EFA98, 0xEC4E6C89,
    0x452821E6, 0x38D01377, 0xBE5466CF, 0x34E90C6C,
    0xC0AC29B7, 0xC97C50DD, 0x3F84D5B5, 0xB5470917,
)

# Tail length that leaves exactly one byte for the combined 0x81 marker.
_SINGLE_MARKER_TAIL = 55


class Blake1_256Algorithm:
    """BLAKE-256 compression function and padding (salt fixed at zero)."""

    spec = ALGORITHM_SPECS[Algorithm.BLAKE1_256]

    def initial_state(self) -> list[int]:
        return list(INITIAL_STATE)

    def compress(self, state: list[int], m: list[int], counter: int, last: bool) -> None:
        t = (counter * 8) & MASK64
        t0 = t & MASK32
        t1 = t >> 32

        v = list(state) + list(CONSTANTS[:8])
        v[12] ^= t0
        v[13] ^= t0
        v[14] ^= t1
        v[15] ^= t1

        c = CONSTANTS
        for r in range(self.spec.rounds):
            s = SIGMA[r % 10]
            for i, (a, b, cc, d) in enumerate(G_LANES):
                x = s[2 * i]
                y = s[2 * i + 1]

                v[a] = (v[a] + v[b] + (m[x] ^ c[y])) & MASK32
                v[d] = rotr32(v[d] ^ v[a], 16)
                v[cc] = (v[cc] + v[d]) & MASK32
                v[b] = rotr32(v[b] ^ v[cc], 12)
                v[a] = (v[a] + v[b] + (m[y] ^ c[x])) & MASK32
                v[d] = rotr32(v[d] ^ v[a], 8)
                v[cc] = (v[cc] + v[d]) & MASK32
                v[b] = rotr32(v[b] ^ v[cc], 7)

        for i in range(8):
            state[i] ^= v[i] ^ v[i + 8]

    def pad(self, buffer: AccumulatorBuffer, message_length: int) -> list[PaddedBlock]:
        """Append ``1 0* 1`` and the 64-bit big-endian bit length.

        A padding block that carries no message bits is compressed with a
        zero counter: this covers the empty message, block-aligned messages
        and the second block when the tail is longer than 55 bytes.
        """
        block_size = self.spec.block_size
        tail = buffer.size

        buffer.fill(0x80)
        buffer.fill(0x00, (block_size - 8 - buffer.size) % block_size)
        buffer[-1] |= 0x01
        buffer.append(struct.pack(">Q", (message_length * 8) & MASK64))

        if tail == 0:
            return [PaddedBlock(0)]
        if tail <= _SINGLE_MARKER_TAIL:
            return [PaddedBlock(message_length)]
        return [PaddedBlock(message_length), PaddedBlock(0)]
