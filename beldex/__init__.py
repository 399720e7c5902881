"""Beldex addresses, keys, sub-addresses, one-time keys and hashing primitives."""

__version__ = "0.21.0"

__all__ = [
    "address",
    "endian",
    "hash",
    "keys",
    "network",
    "onetime_key",
    "subaddress",
    "tree_hash",
]