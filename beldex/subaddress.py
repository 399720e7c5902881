"""Sub-address indexes and the key derivations behind them.

Sub-addresses are grouped by a pair of indexes ``(major, minor)``: the major
index names an account, the minor index a sub-address within that account.
The primary address is ``0/0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .address import Address
from .hash import Hash
from .keys import KeyPair, PrivateKey, PublicKey, ViewPair
from .network import Network

_U32_MAX = 0xFFFFFFFF
_SUBADDR_PREFIX = b"SubAddr\x00"


@dataclass(frozen=True)
class Index:
    """A sub-address index; ``Index()`` is the primary address ``0/0``."""

    major: int = 0
    minor: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} index must be an integer")
            if not 0 <= value <= _U32_MAX:
                raise ValueError(f"{name} index out of range: {value}")

    def is_zero(self) -> bool:
        """Return whether both indexes are zero, the primary address case."""
        return self.major == 0 and self.minor == 0

    def __str__(self) -> str:
        return f"{self.major}/{self.minor}"


def get_secret_scalar(view: PrivateKey, index: Index) -> PrivateKey:
    """Compute ``m = Hn("SubAddr" || v || major || minor)``."""
    payload = (
        _SUBADDR_PREFIX
        + bytes(view)
        + index.major.to_bytes(4, "little")
        + index.minor.to_bytes(4, "little")
    )
    return Hash.hash_to_scalar(payload)


def get_spend_secret_key(keys: KeyPair, index: Index) -> PrivateKey:
    """Compute the private spend key ``s' = s + m``, or ``s`` at index zero."""
    if index.is_zero():
        return keys.spend
    return keys.spend + get_secret_scalar(keys.view, index)


def get_view_secret_key(keys: KeyPair, index: Index) -> PrivateKey:
    """Compute the private view key ``v' = v * s'``, or ``v`` at index zero."""
    if index.is_zero():
        return keys.view
    return keys.view * get_spend_secret_key(keys, index)


def get_secret_keys(keys: KeyPair, index: Index) -> KeyPair:
    """Compute the sub-key pair ``(v', s')`` from the root pair ``(v, s)``."""
    return KeyPair(
        view=get_view_secret_key(keys, index),
        spend=get_spend_secret_key(keys, index),
    )


def get_spend_public_key(keys: ViewPair, index: Index) -> PublicKey:
    """Compute ``S' = S + m*G``, or ``S`` at index zero."""
    if index.is_zero():
        return keys.spend
    scalar = get_secret_scalar(keys.view, index)
    return keys.spend + PublicKey.from_private_key(scalar)


def get_public_keys(keys: ViewPair, index: Index) -> tuple[PublicKey, PublicKey]:
    """Compute ``(V', S')`` with ``V' = v*S'``; ``(v*G, S)`` at index zero."""
    if index.is_zero():
        return PublicKey.from_private_key(keys.view), keys.spend
    spend = get_spend_public_key(keys, index)
    return keys.view * spend, spend


def get_subaddress(
    keys: ViewPair, index: Index, network: Optional[Network] = None
) -> Address:
    """Compute the sub-address at ``index``; mainnet when no network is given."""
    net = network if network is not None else Network.MAINNET
    view, spend = get_public_keys(keys, index)
    return Address.subaddress(net, spend, view)