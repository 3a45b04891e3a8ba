"""Unkeyed BLAKE2s-256 (RFC 7693)."""

from __future__ import annotations

from ..buffer import AccumulatorBuffer
from ..config import ALGORITHM_SPECS, Algorithm
from .base import G_LANES, MASK32, MASK64, SIGMA, PaddedBlock, rotr32

IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

# Parameter block word 0: digest length 32, key length 0, fanout 1, depth 1.
PARAMETER_BLOCK = 0x01010000 | (0 << 8) | 32


class Blake2sAlgorithm:
    """BLAKE2s compression function and zero padding.

    The last block is signalled through the finalization word rather than an
    embedded length, so the engine must hold the last full block back until
    it knows whether more input follows.
    """

    spec = ALGORITHM_SPECS[Algorithm.BLAKE2S]

    def initial_state(self) -> list[int]:
        state = list(IV)
        state[0] ^= PARAMETER_BLOCK
        return state

    def compress(self, state: list[int], m: list[int], counter: int, last: bool) -> None:
        t = counter & MASK64

        v = list(state) + list(IV)
        v[12] ^= t & MASK32
        v[13] ^= t >> 32
        if last:
            v[14] ^= MASK32

        for r in range(self.spec.rounds):
            s = SIGMA[r]
            for i, (a, b, c, d) in enumerate(G_LANES):
                v[a] = (v[a] + v[b] + m[s[2 * i]]) & MASK32
                v[d] = rotr32(v[d] ^ v[a], 16)
                v[c] = (v[c] + v[d]) & MASK32
                v[b] = rotr32(v[b] ^ v[c], 12)
                v[a] = (v[a] + v[b] + m[s[2 * i + 1]]) & MASK32
                v[d] = rotr32(v[d] ^ v[a], 8)
                v[c] = (v[c] + v[d]) & MASK32
                v[b] = rotr32(v[b] ^ v[c], 7)

        for i in range(8):
            state[i] ^= v[i] ^ v[i + 8]

    def pad(self, buffer: AccumulatorBuffer, message_length: int) -> list[PaddedBlock]:
        buffer.fill(0x00, self.spec.block_size - buffer.size)
        return [PaddedBlock(message_length, last=True)]
