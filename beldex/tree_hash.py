"""Tree hash of a root hash and extra hashes, as used for block merkle roots."""

from __future__ import annotations

from collections.abc import Iterable

from .hash import Hash, keccak_256

_MAX_TREE_LEAVES = 0x10000000


def _largest_power_of_two_below(count: int) -> int:
    """Return ``1 << floor(log2(count))`` for ``3 <= count <= 2**28``."""
    if count < 3:
        raise ValueError(f"tree hash count must be at least 3, got {count}")
    if count > _MAX_TREE_LEAVES:
        raise ValueError(f"tree hash count too large: {count}")
    power = 2
    while power < count:
        power <<= 1
    return power >> 1


def _hash_concat(left: Hash, right: Hash) -> Hash:
    return Hash(keccak_256(bytes(left) + bytes(right)))


def _pairwise(hashes: list[Hash]) -> list[Hash]:
    return [_hash_concat(left, right) for left, right in zip(hashes[0::2], hashes[1::2])]


def tree_hash(root_hash: Hash, extra_hashes: Iterable[Hash]) -> Hash:
    """Compute the tree hash of ``root_hash`` followed by ``extra_hashes``."""
    hashes = [root_hash, *extra_hashes]
    count = len(hashes)
    if count == 1:
        return root_hash
    if count == 2:
        return _hash_concat(hashes[0], hashes[1])

    width = _largest_power_of_two_below(count)
    # Leaves before ``start`` pass through; the rest are paired down so the
    # level holds exactly ``width`` hashes.
    start = 2 * width - count
    level = hashes[:start] + _pairwise(hashes[start:])
    while len(level) > 2:
        level = _pairwise(level)
    return _hash_concat(level[0], level[1])