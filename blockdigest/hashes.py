"""Digest primitives.

Named engine classes plus ``hashlib``-style constructors over the registry of
supported algorithms.
"""

from __future__ import annotations

from typing import BinaryIO, Callable, Dict, Optional, Union

from .algorithms.blake1_256 import Blake1_256Algorithm
from .algorithms.blake2s import Blake2sAlgorithm
from .algorithms.md4 import MD4Algorithm
from .config import Algorithm, EngineConfig, get_config, parse_algorithm
from .engine import HashEngine


class Blake1_256(HashEngine):
    """BLAKE-256 engine (32-byte digest)."""

    def __init__(self, data: bytes = b"", *, config: Optional[EngineConfig] = None) -> None:
        super().__init__(Blake1_256Algorithm(), data, config=config)


class Blake2s(HashEngine):
    """Unkeyed BLAKE2s-256 engine (32-byte digest)."""

    def __init__(self, data: bytes = b"", *, config: Optional[EngineConfig] = None) -> None:
        super().__init__(Blake2sAlgorithm(), data, config=config)


class MD4(HashEngine):
    """MD4 engine (16-byte digest)."""

    def __init__(self, data: bytes = b"", *, config: Optional[EngineConfig] = None) -> None:
        super().__init__(MD4Algorithm(), data, config=config)


ENGINES: Dict[Algorithm, Callable[..., HashEngine]] = {
    Algorithm.BLAKE1_256: Blake1_256,
    Algorithm.BLAKE2S: Blake2s,
    Algorithm.MD4: MD4,
}

AlgorithmLike = Union[Algorithm, str, None]


def new(
    algorithm: AlgorithmLike = None,
    data: bytes = b"",
    *,
    config: Optional[EngineConfig] = None,
) -> HashEngine:
    """Create an engine for ``algorithm``, optionally pre-fed with ``data``.

    Args:
        algorithm: Enum member or name (``"blake2s"``, ``"md4"``,
            ``"blake1-256"``). If None, the configured default is used.
        data: Initial input.
        config: Engine settings. If None, the process-wide config is used.

    Raises:
        UnsupportedAlgorithmError: If ``algorithm`` is not registered.
    """

    config = config or get_config().engine
    if algorithm is None:
        algorithm = config.default_algorithm
    return ENGINES[parse_algorithm(algorithm)](data, config=config)


def hash_bytes(data: bytes, algorithm: AlgorithmLike = None) -> bytes:
    """One-shot digest of ``data``."""

    return new(algorithm, data).finalize().digest()


def hash_stream(
    stream: BinaryIO,
    algorithm: AlgorithmLike = None,
    *,
    chunk_size: Optional[int] = None,
) -> bytes:
    """Digest a binary file object, reading ``chunk_size`` bytes at a time."""

    engine = new(algorithm)
    chunk_size = chunk_size or get_config().engine.chunk_size
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        engine.update(chunk)
    return engine.finalize().digest()
