"""One-time output keys: generating them, spotting owned ones, recovering secrets.

The sender derives a one-time key from random data and the receiver's address.
The receiver scans output keys and recovers the matching secret key exactly
when the output was sent to one of its addresses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .hash import Hash
from .keys import KeyPair, PrivateKey, PublicKey, ViewPair
from .subaddress import Index, get_spend_public_key, get_spend_secret_key

MUL_FACTOR = 8


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as a little-endian base-128 varint."""
    if value < 0:
        raise ValueError("varint cannot encode a negative value")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


@dataclass(frozen=True)
class KeyGenerator:
    """Generates one-time public keys from the spend key ``S`` and ``rv``."""

    spend: PublicKey
    rv: PublicKey

    @classmethod
    def from_random(
        cls, view: PublicKey, spend: PublicKey, random: PrivateKey
    ) -> KeyGenerator:
        """Sender side: ``rv = r*8*V`` from the address keys and a secret random."""
        return cls(spend=spend, rv=random * MUL_FACTOR * view)

    @classmethod
    def from_key(cls, keys: ViewPair, random: PublicKey) -> KeyGenerator:
        """Receiver side: ``rv = v*8*R`` from the view pair and the tx public key."""
        return cls(spend=keys.spend, rv=keys.view * MUL_FACTOR * random)

    def one_time_key(self, index: int) -> PublicKey:
        """Compute ``P = Hn(rv || n)*G + S`` for output index ``n``."""
        return PublicKey.from_private_key(self.get_rvn_scalar(index)) + self.spend

    def check(self, index: int, key: PublicKey) -> bool:
        """Return whether ``key`` is the one-time key for output ``index``."""
        return key == self.one_time_key(index)

    def get_rvn_scalar(self, index: int) -> PrivateKey:
        """Compute ``Hn(rv || n)`` as a scalar."""
        return Hash.hash_to_scalar(bytes(self.rv) + encode_varint(index))


@dataclass
class SubKeyChecker:
    """Precomputed table of sub-address spend keys for ownership checks."""

    keys: ViewPair
    table: dict[PublicKey, Index] = field(default_factory=dict)

    def __init__(self, keys: ViewPair, major: range, minor: range) -> None:
        self.keys = keys
        self.table = {}
        for maj in major:
            for mnr in minor:
                index = Index(major=maj, minor=mnr)
                self.table[get_spend_public_key(keys, index)] = index

    def check(
        self, index: int, key: PublicKey, tx_pubkey: PublicKey
    ) -> Optional[Index]:
        """Return the sub-address index owning output ``index``, if in the table."""
        keygen = KeyGenerator.from_key(self.keys, tx_pubkey)
        return self.check_with_key_generator(keygen, index, key)

    def check_with_key_generator(
        self, keygen: KeyGenerator, index: int, key: PublicKey
    ) -> Optional[Index]:
        """Like ``check`` but with a key generator built beforehand."""
        # D' = P - Hn(v*8*R || n)*G
        candidate = key - PublicKey.from_private_key(keygen.get_rvn_scalar(index))
        return self.table.get(candidate)


@dataclass
class KeyRecoverer:
    """Recovers one-time private keys from the private key pair."""

    keys: KeyPair
    checker: KeyGenerator

    def __init__(self, keys: KeyPair, tx_pubkey: PublicKey) -> None:
        self.keys = keys
        self.checker = KeyGenerator.from_key(ViewPair.from_keypair(keys), tx_pubkey)

    def recover(self, oindex: int, aindex: Index) -> PrivateKey:
        """Return ``Hn(v*8*R || n) + s'`` for output ``oindex`` at address ``aindex``."""
        return self.checker.get_rvn_scalar(oindex) + get_spend_secret_key(
            self.keys, aindex
        )