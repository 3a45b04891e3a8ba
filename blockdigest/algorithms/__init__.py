"""Compression cores and padding schemes.

Each module provides one :class:`~blockdigest.algorithms.base.BlockAlgorithm`
implementation; :class:`~blockdigest.engine.HashEngine` supplies the shared
buffering and lifecycle.
"""

from __future__ import annotations

from .base import BlockAlgorithm, PaddedBlock
from .blake1_256 import Blake1_256Algorithm
from .blake2s import Blake2sAlgorithm
from .md4 import MD4Algorithm

__all__ = [
    "Blake1_256Algorithm",
    "Blake2sAlgorithm",
    "BlockAlgorithm",
    "MD4Algorithm",
    "PaddedBlock",
]
