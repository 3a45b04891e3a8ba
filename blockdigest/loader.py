"""Word loading and storing over raw byte buffers.

Blocks are parsed into unsigned 32-bit words through numpy views with an
explicit byte order, so the host endianness never leaks into a digest.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .config import ByteOrder

WORD_SIZE = 4
MASK32 = 0xFFFFFFFF

_DTYPES = {
    ByteOrder.LITTLE: np.dtype("<u4"),
    ByteOrder.BIG: np.dtype(">u4"),
}


def load_word(data: bytes | memoryview, offset: int, byte_order: ByteOrder) -> int:
    """Read one 32-bit word at an arbitrary byte ``offset``."""

    if offset < 0 or offset + WORD_SIZE > len(data):
        raise IndexError(f"word at offset {offset} is outside a {len(data)}-byte buffer")
    return int(np.frombuffer(data, dtype=_DTYPES[byte_order], count=1, offset=offset)[0])


def load_words(block: bytes | memoryview, byte_order: ByteOrder) -> list[int]:
    """Parse a block into a list of 32-bit words."""

    if len(block) % WORD_SIZE:
        raise ValueError("block length must be a multiple of the word size")
    return np.frombuffer(block, dtype=_DTYPES[byte_order]).tolist()


def iter_blocks(
    data: bytes | memoryview, block_size: int, byte_order: ByteOrder
) -> Iterator[list[int]]:
    """Yield the words of each whole block of ``data``.

    ``len(data)`` must be a multiple of ``block_size``.
    """

    if len(data) % block_size:
        raise ValueError("data length must be a multiple of the block size")
    words = np.frombuffer(data, dtype=_DTYPES[byte_order]).reshape(-1, block_size // WORD_SIZE)
    for row in words:
        yield row.tolist()


def store_words(words: list[int], byte_order: ByteOrder) -> bytes:
    """Serialize 32-bit words in ``byte_order``."""

    return np.array(words, dtype=_DTYPES[byte_order]).tobytes()
