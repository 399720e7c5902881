"""Fixed-width integer conversions in big and little endian order."""

from __future__ import annotations


def _check_length(data: bytes, size: int) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"expected {size} bytes, got {len(data)}")
    return data


def _to_unsigned(data: bytes, size: int, order: str) -> int:
    return int.from_bytes(_check_length(data, size), order)


def _to_signed(data: bytes, size: int) -> int:
    return int.from_bytes(_check_length(data, size), "little", signed=True)


def slice_to_u32_be(data: bytes) -> int:
    return _to_unsigned(data, 4, "big")


def slice_to_u64_be(data: bytes) -> int:
    return _to_unsigned(data, 8, "big")


def u32_to_array_be(value: int) -> bytes:
    return value.to_bytes(4, "big")


def u64_to_array_be(value: int) -> bytes:
    return value.to_bytes(8, "big")


def slice_to_u16_le(data: bytes) -> int:
    return _to_unsigned(data, 2, "little")


def slice_to_u32_le(data: bytes) -> int:
    return _to_unsigned(data, 4, "little")


def slice_to_u64_le(data: bytes) -> int:
    return _to_unsigned(data, 8, "little")


def u16_to_array_le(value: int) -> bytes:
    return value.to_bytes(2, "little")


def u32_to_array_le(value: int) -> bytes:
    return value.to_bytes(4, "little")


def u64_to_array_le(value: int) -> bytes:
    return value.to_bytes(8, "little")


def slice_to_i16_le(data: bytes) -> int:
    return _to_signed(data, 2)


def i16_to_array_le(value: int) -> bytes:
    return value.to_bytes(2, "little", signed=True)


def slice_to_i32_le(data: bytes) -> int:
    return _to_signed(data, 4)


def i32_to_array_le(value: int) -> bytes:
    return value.to_bytes(4, "little", signed=True)


def slice_to_i64_le(data: bytes) -> int:
    return _to_signed(data, 8)


def i64_to_array_le(value: int) -> bytes:
    return value.to_bytes(8, "little", signed=True)


def bytes_to_u64_slice_le(data: bytes) -> list[int]:
    """Split bytes into little-endian 64-bit integers."""
    data = bytes(data)
    if len(data) % 8:
        raise ValueError(f"length {len(data)} is not a multiple of 8")
    view = memoryview(data)
    return [slice_to_u64_le(view[start:start + 8]) for start in range(0, len(data), 8)]