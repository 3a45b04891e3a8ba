"""Configuration management for blockdigest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, Optional, List
from enum import Enum
import logging
import os

from .errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Supported digest algorithms."""
    BLAKE1_256 = "blake1-256"
    BLAKE2S = "blake2s"
    MD4 = "md4"


class ByteOrder(Enum):
    """Word byte order used when loading blocks and exporting digests."""
    LITTLE = "little"
    BIG = "big"


@dataclass(frozen=True)
class AlgorithmSpec:
    """Static parameters of one compression-function family."""

    algorithm: Algorithm
    block_size: int = 64
    digest_size: int = 32
    state_words: int = 8
    byte_order: ByteOrder = ByteOrder.LITTLE
    rounds: int = 10

    # Capacity of the accumulator buffer, in blocks. Two blocks are needed
    # when the padding is built in place and can spill into a second block.
    buffer_blocks: int = 1

    # Keep the last full block buffered until more input arrives, so the
    # final compression can be flagged.
    defer_last_block: bool = False

    @property
    def buffer_capacity(self) -> int:
        return self.block_size * self.buffer_blocks

    @classmethod
    def blake1_256(cls) -> AlgorithmSpec:
        """BLAKE-256 (round-3 SHA-3 submission)."""
        return cls(
            algorithm=Algorithm.BLAKE1_256,
            digest_size=32,
            state_words=8,
            byte_order=ByteOrder.BIG,
            rounds=14,
            buffer_blocks=2,
        )

    @classmethod
    def blake2s(cls) -> AlgorithmSpec:
        """Unkeyed BLAKE2s with a 32-byte digest."""
        return cls(
            algorithm=Algorithm.BLAKE2S,
            digest_size=32,
            state_words=8,
            byte_order=ByteOrder.LITTLE,
            rounds=10,
            buffer_blocks=1,
            defer_last_block=True,
        )

    @classmethod
    def md4(cls) -> AlgorithmSpec:
        """MD4 (RFC 1320)."""
        return cls(
            algorithm=Algorithm.MD4,
            digest_size=16,
            state_words=4,
            byte_order=ByteOrder.LITTLE,
            rounds=3,
            buffer_blocks=2,
        )


ALGORITHM_SPECS: Dict[Algorithm, AlgorithmSpec] = {
    Algorithm.BLAKE1_256: AlgorithmSpec.blake1_256(),
    Algorithm.BLAKE2S: AlgorithmSpec.blake2s(),
    Algorithm.MD4: AlgorithmSpec.md4(),
}


@dataclass
class EngineConfig:
    """Runtime settings shared by all engines."""

    default_algorithm: Algorithm = Algorithm.BLAKE2S
    check_contracts: bool = True
    chunk_size: int = 64 * 1024  # 64KB reads for streaming helpers


def parse_algorithm(value: Any) -> Algorithm:
    """Resolve an :class:`Algorithm` from an enum member or a name.

    Names are matched case-insensitively against both the enum values
    (``"blake2s"``) and member names (``"BLAKE2S"``); ``_`` and ``-`` are
    interchangeable.

    Raises:
        UnsupportedAlgorithmError: If ``value`` does not name an algorithm.
    """
    if isinstance(value, Algorithm):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("_", "-")
        for algorithm in Algorithm:
            if key in (algorithm.value, algorithm.name.lower().replace("_", "-")):
                return algorithm
    raise UnsupportedAlgorithmError(f"Unsupported digest algorithm: {value!r}")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off", "")


class Config:
    """
    Main configuration manager for blockdigest.

    Holds the engine defaults and supports environment-specific overrides
    through ``BLOCKDIGEST_*`` variables. A malformed override keeps the
    default, logs a warning and is reported by :meth:`validate`.
    """

    ENV_ALGORITHM = "BLOCKDIGEST_ALGORITHM"
    ENV_CHECK_CONTRACTS = "BLOCKDIGEST_CHECK_CONTRACTS"
    ENV_CHUNK_SIZE = "BLOCKDIGEST_CHUNK_SIZE"

    def __init__(self, engine: Optional[EngineConfig] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            engine: Engine settings. If None, defaults are loaded and then
                overridden from the environment.
        """
        self.environment_errors: List[str] = []
        if engine is None:
            engine = EngineConfig()
            self._load_environment(engine)
        self.engine = engine

    def _load_environment(self, engine: EngineConfig) -> None:
        """Apply ``BLOCKDIGEST_*`` environment overrides."""
        algorithm = os.getenv(self.ENV_ALGORITHM)
        if algorithm:
            try:
                engine.default_algorithm = parse_algorithm(algorithm)
            except UnsupportedAlgorithmError:
                self._reject(self.ENV_ALGORITHM, algorithm)

        check = os.getenv(self.ENV_CHECK_CONTRACTS)
        if check is not None:
            engine.check_contracts = _parse_bool(check)

        chunk_size = os.getenv(self.ENV_CHUNK_SIZE)
        if chunk_size:
            try:
                engine.chunk_size = int(chunk_size)
            except ValueError:
                self._reject(self.ENV_CHUNK_SIZE, chunk_size)

    def _reject(self, name: str, value: str) -> None:
        logger.warning("Ignoring invalid %s=%r; using the default", name, value)
        self.environment_errors.append(f"{name}: invalid value {value!r}")

    def validate(self) -> List[str]:
        """
        Validate current configuration.

        Returns:
            List of validation errors. Empty if valid.
        """
        errors = list(self.environment_errors)

        if not isinstance(self.engine.default_algorithm, Algorithm):
            errors.append("default_algorithm must be an Algorithm")

        if self.engine.chunk_size <= 0:
            errors.append("chunk_size must be positive")

        for spec in ALGORITHM_SPECS.values():
            if spec.block_size % 4 != 0:
                errors.append(f"{spec.algorithm.value}: block_size must be a multiple of 4")
            if spec.digest_size != spec.state_words * 4:
                errors.append(f"{spec.algorithm.value}: digest_size must match state_words")

        return errors


_default_config: Optional[Config] = None


def get_config() -> Config:
    """Return the process-wide configuration, creating it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = Config()
    return _default_config


def set_config(config: Optional[Config]) -> None:
    """Replace the process-wide configuration. ``None`` reloads from the environment."""
    global _default_config
    _default_config = config
