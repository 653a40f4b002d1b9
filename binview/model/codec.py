# binview/model/codec.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Union
import struct


Number = Union[int, float]


class InvalidWidthError(ValueError):
    """Byte slice length does not match the element width."""


@dataclass(frozen=True)
class PrimitiveCodec:
    fmt_le: str  # little-endian struct format
    fmt_be: str  # big-endian struct format
    size: int
    kind: str    # unsigned | signed | float

    def fmt(self, byte_order: str) -> str:
        return self.fmt_le if byte_order == "little" else self.fmt_be


PRIMITIVES: Dict[str, PrimitiveCodec] = {
    "u8":  PrimitiveCodec(fmt_le="<B", fmt_be=">B", size=1, kind="unsigned"),
    "u16": PrimitiveCodec(fmt_le="<H", fmt_be=">H", size=2, kind="unsigned"),
    "u32": PrimitiveCodec(fmt_le="<I", fmt_be=">I", size=4, kind="unsigned"),
    "u64": PrimitiveCodec(fmt_le="<Q", fmt_be=">Q", size=8, kind="unsigned"),
    "i8":  PrimitiveCodec(fmt_le="<b", fmt_be=">b", size=1, kind="signed"),
    "i16": PrimitiveCodec(fmt_le="<h", fmt_be=">h", size=2, kind="signed"),
    "i32": PrimitiveCodec(fmt_le="<i", fmt_be=">i", size=4, kind="signed"),
    "i64": PrimitiveCodec(fmt_le="<q", fmt_be=">q", size=8, kind="signed"),
    "f32": PrimitiveCodec(fmt_le="<f", fmt_be=">f", size=4, kind="float"),
    "f64": PrimitiveCodec(fmt_le="<d", fmt_be=">d", size=8, kind="float"),
}


def _codec(encode: str) -> PrimitiveCodec:
    enc = encode.lower()
    if enc not in PRIMITIVES:
        raise NotImplementedError(f"Unknown element type '{encode}'")
    return PRIMITIVES[enc]


def _endian(byte_order: str) -> str:
    if byte_order not in {"little", "big"}:
        raise ValueError(f"Invalid byte order '{byte_order}'")
    return byte_order


def decode_primitive(encode: str, raw_bytes: bytes, *, byte_order: str = "little") -> Number:
    codec = _codec(encode)
    if len(raw_bytes) != codec.size:
        raise InvalidWidthError(
            f"Raw bytes length {len(raw_bytes)} != expected {codec.size} for '{encode}'"
        )
    return struct.unpack(codec.fmt(_endian(byte_order)), raw_bytes)[0]


def iter_primitives(encode: str, buffer: bytes, *, byte_order: str = "little") -> Iterator[Number]:
    """
    Decode a buffer holding a whole number of elements, first byte first.

    The struct format is resolved once for the buffer.
    """
    codec = _codec(encode)
    if len(buffer) % codec.size:
        raise InvalidWidthError(
            f"Buffer length {len(buffer)} is not a multiple of {codec.size} for '{encode}'"
        )
    for (value,) in struct.iter_unpack(codec.fmt(_endian(byte_order)), buffer):
        yield value


def primitive_size(encode: str) -> int:
    return _codec(encode).size
