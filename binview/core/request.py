# binview/core/request.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from binview.core.errors import ArgumentError
from binview.model.types import ByteOrder, ElementType


@dataclass(frozen=True)
class DecodeRequest:
    """
    One decode run: which bytes, where to start, how to read them, how many.

    max_count=None means "until the data runs out".
    A negative offset is accepted and simply yields no elements.
    """
    source: bytes
    element_type: ElementType
    offset: int = 0
    byte_order: ByteOrder = ByteOrder.LITTLE
    max_count: Optional[int] = None

    def __post_init__(self) -> None:
        # accept tokens as well as enum members
        if not isinstance(self.element_type, ElementType):
            object.__setattr__(self, "element_type", ElementType.parse(self.element_type))
        if not isinstance(self.byte_order, ByteOrder):
            object.__setattr__(self, "byte_order", ByteOrder.parse(self.byte_order))

        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            raise ArgumentError(f"Offset must be an integer, got {self.offset!r}")
        if self.max_count is not None:
            if isinstance(self.max_count, bool) or not isinstance(self.max_count, int):
                raise ArgumentError(f"Count must be an integer, got {self.max_count!r}")
            if self.max_count < 0:
                raise ArgumentError(f"Count must be >= 0, got {self.max_count}")

    @property
    def width(self) -> int:
        return self.element_type.width

    def available_count(self) -> int:
        """min(max_count, whole elements between offset and end of source)."""
        size = len(self.source)
        if self.offset < 0 or self.offset >= size:
            return 0
        n = (size - self.offset) // self.width
        if self.max_count is not None:
            n = min(n, self.max_count)
        return n
