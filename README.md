# beldex

Primitives for working with Beldex (CryptoNote-family) addresses and keys in
pure Python:

- Keccak-256 hashing, 32-byte `Hash` and 8-byte `Hash8` values, and the
  CryptoNote tree hash.
- Ed25519 private and public keys with the arithmetic used by CryptoNote.
- Standard, integrated and sub-addresses for mainnet, testnet and stagenet,
  encoded in the block-wise base58 format.
- Sub-address key derivation and one-time output key generation, checking
  and recovery.

Transaction signing is not part of this package.

## Installing

```
pip install beldex
```

## Parsing and printing an address

```python
from beldex.address import Address

address = Address.from_str("4ADT1BtbxqEWeMKp9GgPr2NeyJXXtNxvoDawpyA4WpzFcGcoHUvXeijE66DNfohE9r1bQYaBiQjEtKE7CtkTdLwiDznFzra")
print(address.network, address.addr_type)
print(address.public_spend, address.public_view)
assert str(address) == "4ADT1BtbxqEWeMKp9GgPr2NeyJXXtNxvoDawpyA4WpzFcGcoHUvXeijE66DNfohE9r1bQYaBiQjEtKE7CtkTdLwiDznFzra"
```

A malformed address raises `AddressError`.

## Hashing

```python
from beldex.hash import Hash, keccak_256
from beldex.tree_hash import tree_hash

digest = Hash.new(b"")
print(digest.to_hex())
scalar = Hash.hash_to_scalar(b"some data")   # a PrivateKey
root = tree_hash(digest, [Hash.new(b"a"), Hash.new(b"b")])
```

## Sub-addresses

```python
from beldex.keys import PrivateKey, PublicKey, ViewPair
from beldex.network import Network
from beldex.subaddress import Index, get_subaddress

view = PrivateKey.from_hex("77916d0cd56ed1920aef6ca56d8a41bac915b68e4c46a589e0956e27a7b77404")
spend = PrivateKey.from_hex("8163466f1883598e6dd14027b8da727057165da91485834314f5500a65846f09")
pair = ViewPair(view=view, spend=PublicKey.from_private_key(spend))

print(get_subaddress(pair, Index(major=2, minor=18), Network.MAINNET))
```

## Scanning outputs

```python
from beldex.onetime_key import KeyGenerator, SubKeyChecker

checker = SubKeyChecker(pair, range(0, 3), range(0, 3))
found = checker.check(output_index, output_key, tx_pubkey)  # an Index or None
```

`KeyRecoverer` derives the one-time private key of an output that belongs to a
`KeyPair`.

## Running the tests

```
pip install -e ".[test]"
pytest
```