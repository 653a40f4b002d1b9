# binview/model/types.py
from __future__ import annotations

import enum

from binview.core.errors import ArgumentError
from .codec import PRIMITIVES


class ElementType(enum.Enum):
    """Fixed-width numeric interpretation applied to every element of a run."""
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"

    @property
    def width(self) -> int:
        return PRIMITIVES[self.value].size

    @property
    def kind(self) -> str:
        return PRIMITIVES[self.value].kind

    @property
    def is_float(self) -> bool:
        return self.kind == "float"

    @classmethod
    def parse(cls, token: str) -> "ElementType":
        key = str(token).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ArgumentError(
            f"Unknown element type '{token}'",
            hint="Use one of: " + ", ".join(m.value for m in cls),
        )

    def __str__(self) -> str:
        return self.value


_BYTE_ORDER_ALIASES = {
    "le": "little-endian",
    "little": "little-endian",
    "be": "big-endian",
    "big": "big-endian",
}


class ByteOrder(enum.Enum):
    LITTLE = "little-endian"
    BIG = "big-endian"

    @property
    def endian(self) -> str:
        # codec-level name: "little" | "big"
        return self.value.split("-", 1)[0]

    @classmethod
    def parse(cls, token: str) -> "ByteOrder":
        key = str(token).strip().lower()
        key = _BYTE_ORDER_ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        raise ArgumentError(
            f"Unknown byte order '{token}'",
            hint="Use one of: " + ", ".join(m.value for m in cls),
        )

    def __str__(self) -> str:
        return self.value
