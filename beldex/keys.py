"""Private scalars and public Ed25519 points used as keys."""

from __future__ import annotations

from dataclasses import dataclass, field

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_D = (-121665 * pow(121666, -1, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

# Extended twisted Edwards coordinates (X, Y, Z, T) with x = X/Z, y = Y/Z, xy = T/Z.
_Point = tuple[int, int, int, int]
_IDENTITY: _Point = (0, 1, 1, 0)


class KeyFormatError(ValueError):
    """Raised when bytes do not form a valid key."""


def _add(p: _Point, q: _Point) -> _Point:
    x1, y1, z1, t1 = p
    x2, y2, z2, t2 = q
    a = (y1 - x1) * (y2 - x2) % _P
    b = (y1 + x1) * (y2 + x2) % _P
    c = 2 * _D * t1 * t2 % _P
    d = 2 * z1 * z2 % _P
    e, f, g, h = b - a, d - c, d + c, b + a
    return (e * f % _P, g * h % _P, f * g % _P, e * h % _P)


def _neg(p: _Point) -> _Point:
    x, y, z, t = p
    return (-x % _P, y, z, -t % _P)


def _mul(scalar: int, point: _Point) -> _Point:
    result = _IDENTITY
    for bit in bin(scalar)[2:]:
        result = _add(result, result)
        if bit == "1":
            result = _add(result, point)
    return result


def _compress(point: _Point) -> bytes:
    x, y, z, _ = point
    inv = pow(z, -1, _P)
    x, y = x * inv % _P, y * inv % _P
    return (y | ((x & 1) << 255)).to_bytes(32, "little")


def _decompress(data: bytes) -> _Point | None:
    raw = int.from_bytes(data, "little")
    sign = raw >> 255
    y = (raw & ((1 << 255) - 1)) % _P
    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x = u * pow(v, 3, _P) * pow(u * pow(v, 7, _P), (_P - 5) // 8, _P) % _P
    check = v * x * x % _P
    if check == (-u) % _P:
        x = x * _SQRT_M1 % _P
    elif check != u:
        return None
    if (x & 1) != sign:
        x = -x % _P
    return (x, y, 1, x * y % _P)


_BASE = _decompress((4 * pow(5, -1, _P) % _P).to_bytes(32, "little"))


@dataclass(frozen=True)
class PrivateKey:
    """A scalar modulo the curve order."""

    scalar: int

    def __post_init__(self) -> None:
        if not 0 <= self.scalar < _L:
            raise KeyFormatError("scalar out of range")

    @classmethod
    def from_bytes(cls, data: bytes) -> PrivateKey:
        """Parse 32 little-endian bytes holding a canonical scalar."""
        data = bytes(data)
        if len(data) != 32:
            raise KeyFormatError(f"private key needs 32 bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        if value >= _L:
            raise KeyFormatError("non-canonical scalar")
        return cls(value)

    @classmethod
    def from_hex(cls, text: str) -> PrivateKey:
        try:
            data = bytes.fromhex(text)
        except ValueError as exc:
            raise KeyFormatError("invalid hexadecimal") from exc
        return cls.from_bytes(data)

    @classmethod
    def from_int(cls, value: int) -> PrivateKey:
        """Build a scalar from any integer, reduced modulo the curve order."""
        return cls(value % _L)

    def __add__(self, other):
        if isinstance(other, PrivateKey):
            return PrivateKey((self.scalar + other.scalar) % _L)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, PrivateKey):
            return PrivateKey(self.scalar * other.scalar % _L)
        if isinstance(other, PublicKey):
            return PublicKey._from_point(_mul(self.scalar, other._point))
        if isinstance(other, int) and not isinstance(other, bool):
            return PrivateKey(self.scalar * other % _L)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return PrivateKey(self.scalar * other % _L)
        return NotImplemented

    def __bytes__(self) -> bytes:
        return self.scalar.to_bytes(32, "little")

    def __str__(self) -> str:
        return bytes(self).hex()


@dataclass(frozen=True)
class PublicKey:
    """A compressed curve point; equality follows its 32 bytes."""

    data: bytes
    _point: _Point = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != 32:
            raise KeyFormatError(f"public key needs 32 bytes, got {len(data)}")
        point = _decompress(data)
        if point is None:
            raise KeyFormatError("bytes are not a point on the curve")
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "_point", point)

    @classmethod
    def _from_point(cls, point: _Point) -> PublicKey:
        return cls(_compress(point))

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        return cls(data)

    @classmethod
    def from_hex(cls, text: str) -> PublicKey:
        try:
            data = bytes.fromhex(text)
        except ValueError as exc:
            raise KeyFormatError("invalid hexadecimal") from exc
        return cls(data)

    @classmethod
    def from_private_key(cls, key: PrivateKey) -> PublicKey:
        """Return ``key * G``."""
        return cls._from_point(_mul(key.scalar, _BASE))

    def __add__(self, other):
        if isinstance(other, PublicKey):
            return PublicKey._from_point(_add(self._point, other._point))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, PublicKey):
            return PublicKey._from_point(_add(self._point, _neg(other._point)))
        return NotImplemented

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class KeyPair:
    """Private view and spend keys ``(v, s)``."""

    view: PrivateKey
    spend: PrivateKey


@dataclass(frozen=True)
class ViewPair:
    """Private view key and public spend key ``(v, S)``."""

    view: PrivateKey
    spend: PublicKey

    @classmethod
    def from_keypair(cls, keys: KeyPair) -> ViewPair:
        return cls(view=keys.view, spend=PublicKey.from_private_key(keys.spend))