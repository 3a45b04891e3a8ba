"""Generic streaming block-hash engine.

One :class:`HashEngine` drives any :class:`~blockdigest.algorithms.base.BlockAlgorithm`:
it owns the chaining state, the fixed-capacity accumulator buffer and the
message length counter, and enforces the absorb / finalize / export lifecycle.

Example::

    engine = HashEngine(Blake2sAlgorithm())
    engine.update(b"ab").update(b"c").finalize()
    engine.hexdigest()
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from cryptography.hazmat.primitives import constant_time

from .algorithms.base import BlockAlgorithm
from .buffer import AccumulatorBuffer
from .config import AlgorithmSpec, EngineConfig, get_config
from .errors import AlreadyFinalizedError, NotFinalizedError
from .loader import iter_blocks, load_words, store_words

logger = logging.getLogger(__name__)


class EngineState(Enum):
    """Lifecycle of a :class:`HashEngine`."""
    ABSORBING = "absorbing"
    FINALIZED = "finalized"


class HashEngine:
    """Incremental digest computation over one algorithm.

    Lifecycle: construct, ``update`` any number of times, ``finalize`` exactly
    once, then export with ``digest``/``hexdigest``/``to_int`` as often as
    needed. ``reset`` returns the engine to its initial state from anywhere.

    Instances are not safe for concurrent mutation; use one engine per thread.
    """

    def __init__(
        self,
        algorithm: BlockAlgorithm,
        data: bytes = b"",
        *,
        config: Optional[EngineConfig] = None,
    ) -> None:
        """
        Initialize an engine.

        Args:
            algorithm: Compression core and padding scheme to drive.
            data: Optional initial input, fed immediately.
            config: Engine settings. If None, the process-wide config is used.
        """
        self._algorithm = algorithm
        self._spec: AlgorithmSpec = algorithm.spec
        self._config = config or get_config().engine
        self._buffer = AccumulatorBuffer(self._spec.buffer_capacity, self._spec.block_size)
        self._state: list[int] = []
        self._length = 0
        self._lifecycle = EngineState.ABSORBING
        self.reset()
        self.update(data)

    @property
    def name(self) -> str:
        return self._spec.algorithm.value

    @property
    def algorithm(self) -> BlockAlgorithm:
        return self._algorithm

    @property
    def block_size(self) -> int:
        return self._spec.block_size

    @property
    def digest_size(self) -> int:
        return self._spec.digest_size

    @property
    def is_finalized(self) -> bool:
        return self._lifecycle is EngineState.FINALIZED

    def reset(self) -> HashEngine:
        """Return to the initial state: IV loaded, buffer empty, counter zero."""
        self._buffer.clear()
        self._length = 0
        self._state = self._algorithm.initial_state()
        self._lifecycle = EngineState.ABSORBING
        logger.debug("%s engine reset", self.name)
        return self

    def update(self, data: bytes) -> HashEngine:
        """Absorb ``data``. Chunking never changes the resulting digest.

        Args:
            data: Any bytes-like object.

        Returns:
            The engine, for chaining.

        Raises:
            AlreadyFinalizedError: If the engine was already finalized.
            TypeError: If ``data`` does not support the buffer protocol or
                is a non-contiguous view, as with :mod:`hashlib`.
        """
        self._ensure_absorbing("update")

        view = memoryview(data).cast("B")
        if not view:
            return self

        block_size = self._spec.block_size
        defer = self._spec.defer_last_block
        buffer = self._buffer

        # A deferred full block is only known not to be last once more data arrives.
        if buffer.is_full():
            self._compress_buffer()

        if not buffer.is_empty():
            take = min(block_size - buffer.size, len(view))
            buffer.append(view[:take])
            view = view[take:]

            if not buffer.is_full():
                return self
            if not view and defer:
                return self
            self._compress_buffer()

        remainder = len(view) % block_size
        if defer and view and remainder == 0:
            remainder = block_size
        bulk = len(view) - remainder

        if bulk:
            self._compress_blocks(view[:bulk])
        if remainder:
            buffer.assign(view[bulk:])

        return self

    feed = update

    def finalize(self) -> HashEngine:
        """Pad, compress the final block(s) and enter the terminal state.

        Must be called exactly once per message; only export methods and
        ``reset`` are valid afterwards.

        Raises:
            AlreadyFinalizedError: If the engine was already finalized.
        """
        self._ensure_absorbing("finalize")

        message_length = self._length + self._buffer.size
        blocks = self._algorithm.pad(self._buffer, message_length)

        data = self._buffer.view()
        block_size = self._spec.block_size
        for index, padded in enumerate(blocks):
            block = data[index * block_size:(index + 1) * block_size]
            self._algorithm.compress(
                self._state,
                load_words(block, self._spec.byte_order),
                padded.counter,
                padded.last,
            )

        self._length = message_length
        self._buffer.clear()
        self._lifecycle = EngineState.FINALIZED
        logger.debug(
            "%s engine finalized: %d message bytes, %d padding block(s)",
            self.name,
            message_length,
            len(blocks),
        )
        return self

    def digest(self) -> bytes:
        """Serialize the chaining state in the algorithm's byte order."""
        self._ensure_finalized("digest")
        return store_words(self._state, self._spec.byte_order)

    to_digest_bytes = digest

    def hexdigest(self) -> str:
        return self.digest().hex()

    def to_int(self, width: int = 8) -> int:
        """Read the first ``width`` digest bytes as a big-endian unsigned int.

        Widths beyond the digest size use the whole digest.
        """
        if width <= 0:
            raise ValueError("width must be positive")
        return int.from_bytes(self.digest()[:width], "big")

    def copy(self) -> HashEngine:
        """Return an independent engine with identical state."""
        other = object.__new__(type(self))
        other._algorithm = self._algorithm
        other._spec = self._spec
        other._config = self._config
        other._buffer = self._buffer.copy()
        other._state = list(self._state)
        other._length = self._length
        other._lifecycle = self._lifecycle
        return other

    def state_bytes(self) -> bytes:
        """Chaining state serialized regardless of lifecycle."""
        return store_words(self._state, self._spec.byte_order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashEngine):
            return NotImplemented
        if self._spec.algorithm is not other._spec.algorithm:
            return False
        return constant_time.bytes_eq(self.state_bytes(), other.state_bytes())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.name} {self._lifecycle.value} "
            f"length={self._length + self._buffer.size}>"
        )

    def _compress_buffer(self) -> None:
        data = self._buffer.view()
        self._compress_blocks(data)
        self._buffer.clear()

    def _compress_blocks(self, data: memoryview) -> None:
        block_size = self._spec.block_size
        for words in iter_blocks(data, block_size, self._spec.byte_order):
            self._length += block_size
            self._algorithm.compress(self._state, words, self._length, False)

    def _ensure_absorbing(self, operation: str) -> None:
        if self._config.check_contracts and self._lifecycle is EngineState.FINALIZED:
            logger.warning("%s called on finalized %s engine", operation, self.name)
            raise AlreadyFinalizedError(
                f"{operation}() called after finalize(); call reset() to reuse the engine"
            )

    def _ensure_finalized(self, operation: str) -> None:
        if self._config.check_contracts and self._lifecycle is not EngineState.FINALIZED:
            logger.warning("%s called on unfinalized %s engine", operation, self.name)
            raise NotFinalizedError(f"{operation}() called before finalize()")
