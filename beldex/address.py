"""Typed addresses and their base58 text form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .hash import HexError, keccak_256
from .keys import KeyFormatError, KeyPair, PublicKey, ViewPair
from .network import AddressKind, Network, NetworkError

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: position for position, char in enumerate(_ALPHABET)}
_FULL_BLOCK = 8
_FULL_ENCODED_BLOCK = 11
_ENCODED_BLOCK_SIZES = (0, 2, 3, 5, 6, 7, 9, 10, 11)


class AddressError(ValueError):
    """Raised when an address cannot be parsed or built."""


def _encode_block(block: bytes) -> str:
    number = int.from_bytes(block, "big")
    chars = []
    for _ in range(_ENCODED_BLOCK_SIZES[len(block)]):
        number, rest = divmod(number, 58)
        chars.append(_ALPHABET[rest])
    return "".join(reversed(chars))


def _decode_block(block: str) -> bytes:
    try:
        size = _ENCODED_BLOCK_SIZES.index(len(block))
    except ValueError:
        raise AddressError("Base58 error: Invalid block size") from None
    number = 0
    for char in block:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise AddressError("Base58 error: Invalid symbol") from None
    if number >= 1 << (8 * size):
        raise AddressError("Base58 error: Overflow")
    return number.to_bytes(size, "big")


def base58_encode(data: bytes) -> str:
    """Encode bytes in the block-wise base58 used for addresses."""
    data = bytes(data)
    return "".join(
        _encode_block(data[start:start + _FULL_BLOCK])
        for start in range(0, len(data), _FULL_BLOCK)
    )


def base58_decode(text: str) -> bytes:
    """Decode block-wise base58 text back to bytes."""
    return b"".join(
        _decode_block(text[start:start + _FULL_ENCODED_BLOCK])
        for start in range(0, len(text), _FULL_ENCODED_BLOCK)
    )


@dataclass(frozen=True)
class PaymentId:
    """Short payment id of an integrated address: exactly 8 bytes."""

    data: bytes

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != 8:
            raise ValueError(f"PaymentId needs 8 bytes, got {len(data)}")
        object.__setattr__(self, "data", data)

    @classmethod
    def from_hex(cls, text: Union[str, bytes]) -> PaymentId:
        """Parse 16 hex digits, optionally prefixed by ``0x``."""
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("ascii")
            except UnicodeDecodeError as exc:
                raise HexError("invalid character") from exc
        if text.startswith("0x"):
            text = text[2:]
        if len(text) != 16:
            raise HexError("invalid string length")
        try:
            return cls(bytes.fromhex(text))
        except ValueError as exc:
            raise HexError("invalid character") from exc

    def to_hex(self) -> str:
        """Return the lower-case hexadecimal form."""
        return self.data.hex()

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class AddressType:
    """Standard, integrated (with a payment id) or sub-address."""

    kind: AddressKind = AddressKind.STANDARD
    payment_id: Optional[PaymentId] = None

    def __post_init__(self) -> None:
        if (self.kind is AddressKind.INTEGRATED) != (self.payment_id is not None):
            raise ValueError("only integrated addresses carry a payment id")

    @classmethod
    def from_slice(cls, data: bytes, network: Network) -> AddressType:
        """Recover the address type from address bytes on a given network."""
        data = bytes(data)
        if not data:
            raise AddressError(
                "Encode error: Not enough bytes to decode the AddressType"
            )
        magic = data[0]
        kind = next(
            (kind for kind in AddressKind if network.as_u8(kind) == magic), None
        )
        if kind is None:
            raise AddressError("Invalid magic byte")
        if kind is AddressKind.INTEGRATED:
            if len(data) < 73:
                raise AddressError(
                    "Encode error: from_slice: Not enough bytes to decode "
                    "the AddressType (<73)"
                )
            return cls(kind, PaymentId(data[65:73]))
        return cls(kind)

    def __str__(self) -> str:
        return {
            AddressKind.STANDARD: "Standard address",
            AddressKind.INTEGRATED: "Integrated address",
            AddressKind.SUBADDRESS: "Subaddress",
        }[self.kind]


@dataclass(frozen=True)
class Address:
    """A typed address valid on one network."""

    network: Network
    addr_type: AddressType
    public_spend: PublicKey
    public_view: PublicKey

    @classmethod
    def standard(
        cls, network: Network, public_spend: PublicKey, public_view: PublicKey
    ) -> Address:
        return cls(network, AddressType(AddressKind.STANDARD), public_spend, public_view)

    @classmethod
    def subaddress(
        cls, network: Network, public_spend: PublicKey, public_view: PublicKey
    ) -> Address:
        return cls(
            network, AddressType(AddressKind.SUBADDRESS), public_spend, public_view
        )

    @classmethod
    def integrated(
        cls,
        network: Network,
        public_spend: PublicKey,
        public_view: PublicKey,
        payment_id: PaymentId,
    ) -> Address:
        return cls(
            network,
            AddressType(AddressKind.INTEGRATED, payment_id),
            public_spend,
            public_view,
        )

    @classmethod
    def from_viewpair(cls, network: Network, keys: ViewPair) -> Address:
        """Standard address from a view pair ``(v, S)``."""
        return cls.standard(network, keys.spend, PublicKey.from_private_key(keys.view))

    @classmethod
    def from_keypair(cls, network: Network, keys: KeyPair) -> Address:
        """Standard address from private keys ``(v, s)``."""
        return cls.standard(
            network,
            PublicKey.from_private_key(keys.spend),
            PublicKey.from_private_key(keys.view),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Address:
        """Parse address bytes, checking magic byte, keys and checksum."""
        data = bytes(data)
        if len(data) < 66:
            raise AddressError("Encode error: Not enough bytes")

        # Mainnet standard may carry its magic byte as the varint [0xd1, 0x01].
        prefix_len = 2 if data[0] == 0xD1 and data[1] == 0x01 else 1
        try:
            network = Network.from_u8(data[0])
        except NetworkError as exc:
            raise AddressError(f"Network error: {exc}") from exc

        addr_type = AddressType.from_slice(data, network)

        try:
            public_spend = PublicKey(data[prefix_len:prefix_len + 32])
            public_view = PublicKey(data[prefix_len + 32:prefix_len + 64])
        except KeyFormatError as exc:
            raise AddressError("Invalid format") from exc

        data_end = prefix_len + 64
        if addr_type.kind is AddressKind.INTEGRATED:
            if len(data) < data_end + 12:
                raise AddressError(
                    "Encode error: Not enough bytes for integrated checksum"
                )
            signed, checksum = data[:data_end + 8], data[data_end + 8:data_end + 12]
        else:
            if len(data) < data_end + 4:
                raise AddressError("Encode error: Not enough bytes for checksum")
            signed, checksum = data[:data_end], data[data_end:data_end + 4]

        if keccak_256(signed)[:4] != checksum:
            raise AddressError("Invalid checksum")

        return cls(network, addr_type, public_spend, public_view)

    def as_bytes(self) -> bytes:
        """Serialize as magic byte, keys, optional payment id and checksum."""
        body = bytearray([self.network.as_u8(self.addr_type)])
        body += bytes(self.public_spend)
        body += bytes(self.public_view)
        if self.addr_type.payment_id is not None:
            body += bytes(self.addr_type.payment_id)
        body += keccak_256(bytes(body))[:4]
        return bytes(body)

    def as_hex(self) -> str:
        return self.as_bytes().hex()

    @classmethod
    def from_hex(cls, text: str) -> Address:
        """Parse the hexadecimal form, optionally prefixed by ``0x``."""
        if text.startswith("0x"):
            text = text[2:]
        try:
            data = bytes.fromhex(text)
        except ValueError as exc:
            raise AddressError("Invalid format") from exc
        return cls.from_bytes(data)

    @classmethod
    def from_str(cls, text: str) -> Address:
        """Parse the base58 text form."""
        return cls.from_bytes(base58_decode(text))

    def __str__(self) -> str:
        return base58_encode(self.as_bytes())