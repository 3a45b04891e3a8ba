"""Test configuration for blockdigest package."""

import pytest

from blockdigest import Algorithm, new, set_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from BLOCKDIGEST_* variables and the cached config."""
    for var in ("BLOCKDIGEST_ALGORITHM", "BLOCKDIGEST_CHECK_CONTRACTS", "BLOCKDIGEST_CHUNK_SIZE"):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(params=list(Algorithm), ids=lambda a: a.value)
def algorithm(request):
    """Every supported algorithm."""
    return request.param


@pytest.fixture
def engine(algorithm):
    """A fresh engine for each supported algorithm."""
    return new(algorithm)


@pytest.fixture
def sample_message():
    """A deterministic multi-block message with an unaligned tail."""
    return bytes((i * 31 + 7) & 0xFF for i in range(1000))
