"""blockdigest: streaming BLAKE-256, BLAKE2s and MD4 digests."""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Algorithm, Config, EngineConfig, get_config, set_config
from .engine import EngineState, HashEngine
from .errors import (
    AlreadyFinalizedError,
    BufferCapacityError,
    ContractViolation,
    DigestError,
    NotFinalizedError,
    UnsupportedAlgorithmError,
)
from .hashes import MD4, Blake1_256, Blake2s, hash_bytes, hash_stream, new

algorithms_available = frozenset(algorithm.value for algorithm in Algorithm)

__all__ = [
    "Algorithm",
    "AlreadyFinalizedError",
    "Blake1_256",
    "Blake2s",
    "BufferCapacityError",
    "Config",
    "ContractViolation",
    "DigestError",
    "EngineConfig",
    "EngineState",
    "HashEngine",
    "MD4",
    "NotFinalizedError",
    "UnsupportedAlgorithmError",
    "algorithms_available",
    "get_config",
    "hash_bytes",
    "hash_stream",
    "new",
    "set_config",
]
