import pytest

from beldex.hash import Hash, Hash8, HexError, keccak_256
from beldex.keys import PrivateKey

EMPTY_KECCAK = bytes(
    [
        197, 210, 70, 1, 134, 247, 35, 60, 146, 126, 125, 178, 220, 199, 3, 192,
        229, 0, 182, 83, 202, 130, 39, 59, 123, 250, 216, 4, 93, 133, 164, 112,
    ]
)


def test_keccak_empty():
    assert keccak_256(b"") == EMPTY_KECCAK


def test_keccak_abc():
    assert keccak_256(b"abc").hex() == (
        "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"
    )


def test_hash_new_empty_string():
    assert Hash.new("").data == EMPTY_KECCAK
    assert Hash.new(b"") == Hash.new("")


def test_hash_null():
    assert Hash.null().data == bytes(32)
    assert Hash.null().to_hex() == "00" * 32


@pytest.mark.parametrize("text", ["abcd", "a" * 66])
def test_hash_from_hex_wrong_length(text):
    with pytest.raises(HexError):
        Hash.from_hex(text)


def test_hash_from_hex_invalid_character():
    with pytest.raises(HexError):
        Hash.from_hex("zz" * 32)


def test_hash_hex_round_trip():
    digest = Hash.new("")
    text = digest.to_hex()
    assert Hash.from_hex(text) == digest
    assert Hash.from_hex("0x" + text) == digest
    assert str(digest) == text


@pytest.mark.parametrize("text", ["abcd", "a" * 10])
def test_hash8_from_hex_wrong_length(text):
    with pytest.raises(HexError):
        Hash8.from_hex(text)


def test_hash8_hex_round_trip():
    value = Hash8.from_hex("0123456789abcdef")
    assert value.data == bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF])
    text = value.to_hex()
    assert Hash8.from_hex(text) == value
    assert Hash8.from_hex("0x" + text) == value


def test_wrong_size_construction():
    with pytest.raises(ValueError):
        Hash(bytes(31))
    with pytest.raises(ValueError):
        Hash8(bytes(9))


def test_as_scalar_small_value():
    digest = Hash(bytes([1]) + bytes(31))
    assert digest.as_scalar() == PrivateKey.from_int(1)


def test_as_scalar_reduces_modulo_order():
    digest = Hash(b"\xff" * 32)
    scalar = digest.as_scalar()
    assert scalar == PrivateKey.from_int(2**256 - 1)
    assert scalar.scalar < 2**253


def test_hash_to_scalar_matches_as_scalar():
    assert Hash.hash_to_scalar(b"SubAddr") == Hash.new(b"SubAddr").as_scalar()


def test_bytes_conversion():
    digest = Hash.new(b"abc")
    assert bytes(digest) == keccak_256(b"abc")
    assert len(digest) == 32