"""Shared exceptions for :mod:`blockdigest`.

Inputs are unconstrained byte streams, so the only failures the library raises
are programmer errors (contract violations) and unknown algorithm names.
"""

from __future__ import annotations


class DigestError(Exception):
    """Base error for digest operations."""


class ContractViolation(DigestError):
    """Raised when an engine is driven outside of its lifecycle contract."""


class AlreadyFinalizedError(ContractViolation):
    """Raised when data is fed to, or finalize is called on, a finalized engine."""


class NotFinalizedError(ContractViolation):
    """Raised when a digest is exported before the engine was finalized."""


class BufferCapacityError(ContractViolation):
    """Raised when the accumulator buffer would exceed its fixed capacity."""


class UnsupportedAlgorithmError(DigestError, ValueError):
    """Raised for an algorithm name that is not registered."""
