"""Networks and the magic bytes that mark their addresses."""

from __future__ import annotations

from enum import Enum


class NetworkError(ValueError):
    """Raised when a magic byte names no known network."""


class AddressKind(Enum):
    """The kind of an address, without any payload it carries."""

    STANDARD = "standard"
    INTEGRATED = "integrated"
    SUBADDRESS = "subaddress"


_MAGIC_BYTES: dict[str, dict[AddressKind, int]] = {
    "mainnet": {
        AddressKind.STANDARD: 0xD1,
        AddressKind.INTEGRATED: 19,
        AddressKind.SUBADDRESS: 42,
    },
    "testnet": {
        AddressKind.STANDARD: 53,
        AddressKind.INTEGRATED: 54,
        AddressKind.SUBADDRESS: 63,
    },
    "stagenet": {
        AddressKind.STANDARD: 24,
        AddressKind.INTEGRATED: 25,
        AddressKind.SUBADDRESS: 36,
    },
}


class Network(Enum):
    """The existing networks; mainnet is the default one."""

    MAINNET = "mainnet"
    STAGENET = "stagenet"
    TESTNET = "testnet"

    def as_u8(self, addr_type) -> int:
        """Return the magic byte for an address kind on this network.

        Accepts an ``AddressKind`` or any object exposing one as ``kind``.
        """
        kind = getattr(addr_type, "kind", addr_type)
        if not isinstance(kind, AddressKind):
            raise TypeError(f"not an address kind: {addr_type!r}")
        return _MAGIC_BYTES[self.value][kind]

    @classmethod
    def from_u8(cls, byte: int) -> Network:
        """Recover the network from an address magic byte."""
        for network in cls:
            if byte in _MAGIC_BYTES[network.value].values():
                return network
        raise NetworkError("Invalid magic network byte")