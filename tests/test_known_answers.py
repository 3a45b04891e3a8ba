"""Known-answer tests against published digests."""
from __future__ import annotations

import hashlib

import pytest
from cryptography.hazmat.primitives import hashes

from blockdigest import MD4, Algorithm, Blake1_256, Blake2s, hash_bytes, new

KNOWN_ANSWERS = [
    # RFC 1320, appendix A.5
    (Algorithm.MD4, b"", "31d6cfe0d16ae931b73c59d7e0c089c0"),
    (Algorithm.MD4, b"a", "bde52cb31de33e46245e05fbdbd6fb24"),
    (Algorithm.MD4, b"abc", "a448017aaf21d8525fc10ae87aa6729d"),
    (Algorithm.MD4, b"message digest", "d9130a8164549fe818874806e1c7014b"),
    (Algorithm.MD4, b"abcdefghijklmnopqrstuvwxyz", "d79e1c308aa5bbcdeea8ed63df412da9"),
    (
        Algorithm.MD4,
        b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        "043f8582f241db351ce627e153e7f0e4",
    ),
    (Algorithm.MD4, b"1234567890" * 8, "e33b4ddc9c38f2199c3e7b164fcc0536"),
    # Block-aligned messages, whose padding fills a block of its own
    (Algorithm.MD4, b"a" * 64, "52f5076fabd22680234a3fa9f9dc5732"),
    (Algorithm.MD4, b"a" * 128, "cb4a20a561558e29460190c91dced59f"),
    # BLAKE submission document, appendix A, and the empty-message digest
    (
        Algorithm.BLAKE1_256,
        b"",
        "716f6e863f744b9ac22c97ec7b76ea5f5908bc5b2f67c61510bfc4751384ea7a",
    ),
    (
        Algorithm.BLAKE1_256,
        b"\x00",
        "0ce8d4ef4dd7cd8d62dfded9d4edb0a774ae6a41929a74da23109e8f11139c87",
    ),
    (
        Algorithm.BLAKE1_256,
        b"\x00" * 72,
        "d419bad32d504fb7d44d460c42c5593fe544fa4c135dec31e21bd9abdcc22d41",
    ),
    (
        Algorithm.BLAKE1_256,
        b"The quick brown fox jumps over the lazy dog",
        "7576698ee9cad30173080678e5965916adbb11cb5245d386bf1ffda1cb26c9d7",
    ),
    # Padding boundaries. A 56-63 byte tail spills the length into a block
    # with no message bits, compressed with a zero counter.
    (
        Algorithm.BLAKE1_256,
        b"a" * 55,
        "6e8d7898571228c1106fcec9ef9c5db9df8a3a2dcd2655a848af596d181bbae4",
    ),
    (
        Algorithm.BLAKE1_256,
        b"a" * 56,
        "ea7a29472a26148914abb8033869be9bdea294fdd2b73ed7a02a7692940f5b9e",
    ),
    (
        Algorithm.BLAKE1_256,
        b"a" * 63,
        "3155fc3c426c938d522812423bc93266fb5bdd61ca0cab971dc190d93a6e51c7",
    ),
    (
        Algorithm.BLAKE1_256,
        b"a" * 64,
        "84d7f3bbf2cfc3ee940ddb6d25045c6d3f756c4b2077a8128e171d5d165be170",
    ),
    (
        Algorithm.BLAKE1_256,
        b"a" * 128,
        "27b3a0409242108a02ce6392221d02eb587e855c709714a9194ab2983ceed3d5",
    ),
    # RFC 7693, appendix B
    (
        Algorithm.BLAKE2S,
        b"",
        "69217a3079908094e11121d042354a7c1f55b6482ca1a51e1b250dfd1ed0eef9",
    ),
    (
        Algorithm.BLAKE2S,
        b"abc",
        "508c5e8c327c14e2e1a72ba34eeb452f37458b209ed63a294d999b4c86675982",
    ),
]


@pytest.mark.parametrize(
    ("algorithm", "message", "expected"),
    KNOWN_ANSWERS,
    ids=[f"{a.value}-{len(m)}" for a, m, _ in KNOWN_ANSWERS],
)
def test_known_answer(algorithm: Algorithm, message: bytes, expected: str) -> None:
    assert new(algorithm, message).finalize().hexdigest() == expected


@pytest.mark.parametrize(
    ("algorithm", "message", "expected"),
    KNOWN_ANSWERS,
    ids=[f"{a.value}-{len(m)}" for a, m, _ in KNOWN_ANSWERS],
)
def test_known_answer_bytewise(algorithm: Algorithm, message: bytes, expected: str) -> None:
    engine = new(algorithm)
    for i in range(len(message)):
        engine.update(message[i:i + 1])
    assert engine.finalize().hexdigest() == expected


def test_blake2s_abc_scenario() -> None:
    engine = Blake2s()
    engine.update(b"abc")
    engine.finalize()
    assert engine.digest() == bytes.fromhex(
        "508c5e8c327c14e2e1a72ba34eeb452f37458b209ed63a294d999b4c86675982"
    )


def test_digest_sizes() -> None:
    assert len(MD4().finalize().digest()) == 16
    assert len(Blake1_256().finalize().digest()) == 32
    assert len(Blake2s().finalize().digest()) == 32


@pytest.mark.parametrize("length", [0, 1, 3, 55, 56, 63, 64, 65, 127, 128, 129, 192, 1000])
def test_blake2s_matches_hashlib(length: int) -> None:
    message = bytes(range(256)) * 4
    message = message[:length]
    assert hash_bytes(message, "blake2s") == hashlib.blake2s(message).digest()


@pytest.mark.parametrize("length", [0, 64, 128, 200])
def test_blake2s_matches_cryptography(length: int) -> None:
    message = b"\xa5" * length
    h = hashes.Hash(hashes.BLAKE2s(32))
    h.update(message)
    assert hash_bytes(message, Algorithm.BLAKE2S) == h.finalize()


def test_blake2s_block_aligned_input_has_no_trailing_block() -> None:
    # A 64-byte message is exactly one block and must be compressed as the final one.
    message = b"x" * 64
    assert Blake2s(message).finalize().digest() == hashlib.blake2s(message).digest()
