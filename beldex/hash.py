"""Keccak-256 hashing and fixed-size hash values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from Crypto.Hash import keccak

from .keys import PrivateKey

BytesLike = Union[bytes, bytearray, memoryview, str]


class HexError(ValueError):
    """Raised when a hexadecimal string cannot be turned into a hash."""


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def keccak_256(data: BytesLike) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    hasher = keccak.new(digest_bits=256)
    hasher.update(_as_bytes(data))
    return hasher.digest()


def _parse_hex(text: BytesLike, size: int) -> bytes:
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as exc:
            raise HexError("invalid character") from exc
    if text.startswith("0x"):
        text = text[2:]
    if len(text) != size * 2:
        raise HexError("invalid string length")
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise HexError("invalid character") from exc


@dataclass(frozen=True)
class _FixedBytes:
    data: bytes
    SIZE: ClassVar[int] = 0

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} needs {self.SIZE} bytes, got {len(data)}"
            )
        object.__setattr__(self, "data", data)

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return self.SIZE

    def __str__(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class Hash(_FixedBytes):
    """Result of the Keccak-256 hashing function."""

    SIZE: ClassVar[int] = 32

    @classmethod
    def null(cls) -> Hash:
        """Return the all-zero hash."""
        return cls(bytes(cls.SIZE))

    @classmethod
    def new(cls, data: BytesLike) -> Hash:
        """Hash ``data`` with Keccak-256."""
        return cls(keccak_256(data))

    @classmethod
    def from_hex(cls, text: BytesLike) -> Hash:
        """Parse 64 hex digits, optionally prefixed by ``0x``."""
        return cls(_parse_hex(text, cls.SIZE))

    def to_hex(self) -> str:
        """Return the lower-case hexadecimal form."""
        return self.data.hex()

    def as_scalar(self) -> PrivateKey:
        """Read the hash as a little-endian number modulo the curve order."""
        return PrivateKey.from_int(int.from_bytes(self.data, "little"))

    @classmethod
    def hash_to_scalar(cls, data: BytesLike) -> PrivateKey:
        """Hash ``data`` and return the result as a scalar."""
        return cls.new(data).as_scalar()


@dataclass(frozen=True)
class Hash8(_FixedBytes):
    """An 8-byte hash value."""

    SIZE: ClassVar[int] = 8

    @classmethod
    def from_hex(cls, text: BytesLike) -> Hash8:
        """Parse 16 hex digits, optionally prefixed by ``0x``."""
        return cls(_parse_hex(text, cls.SIZE))

    def to_hex(self) -> str:
        """Return the lower-case hexadecimal form."""
        return self.data.hex()