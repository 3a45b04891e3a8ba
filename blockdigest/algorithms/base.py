"""Protocol and shared helpers for the block compression algorithms."""

from __future__ import annotations

from typing import NamedTuple, Protocol

from ..buffer import AccumulatorBuffer
from ..config import AlgorithmSpec

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def rotl32(x: int, s: int) -> int:
    return ((x << s) | (x >> (32 - s))) & MASK32


def rotr32(x: int, s: int) -> int:
    return ((x >> s) | (x << (32 - s))) & MASK32


class PaddedBlock(NamedTuple):
    """Compression parameters for one block produced by padding."""

    counter: int
    """Message bytes covered up to and including this block (0 if none)."""

    last: bool = False
    """Whether this block is flagged as final."""


class BlockAlgorithm(Protocol):
    """Compression core plus padding scheme of one digest family.

    The engine owns the buffer and the chaining state; implementations only
    transform state words and lay out the final block(s).
    """

    spec: AlgorithmSpec

    def initial_state(self) -> list[int]: ...

    def compress(self, state: list[int], words: list[int], counter: int, last: bool) -> None:
        """Fold one 16-word block into ``state`` in place.

        ``counter`` is the number of message bytes absorbed through this block.
        """

    def pad(self, buffer: AccumulatorBuffer, message_length: int) -> list[PaddedBlock]:
        """Pad the buffered tail in place to whole blocks.

        Returns one entry per resulting block, in order.
        """


# Message word permutations shared by BLAKE-256 and BLAKE2s. Round r uses
# SIGMA[r % 10].
SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)

# Working-vector lanes mixed by G: four columns, then four diagonals.
G_LANES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)
