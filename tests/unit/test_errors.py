"""Unit tests for blockdigest.errors module."""

import pytest

from blockdigest.errors import (
    AlreadyFinalizedError,
    BufferCapacityError,
    ContractViolation,
    DigestError,
    NotFinalizedError,
    UnsupportedAlgorithmError,
)


class TestErrorHierarchy:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize("error", [AlreadyFinalizedError, NotFinalizedError, BufferCapacityError])
    def test_contract_violations(self, error):
        assert issubclass(error, ContractViolation)
        assert issubclass(error, DigestError)

    def test_unsupported_algorithm(self):
        assert issubclass(UnsupportedAlgorithmError, DigestError)
        assert issubclass(UnsupportedAlgorithmError, ValueError)
        assert not issubclass(UnsupportedAlgorithmError, ContractViolation)

    def test_error_message(self):
        error = AlreadyFinalizedError("update() called after finalize()")
        assert str(error) == "update() called after finalize()"
        assert isinstance(error, Exception)
