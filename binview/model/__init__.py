from .codec import InvalidWidthError, decode_primitive, iter_primitives, primitive_size
from .types import ByteOrder, ElementType

__all__ = ["ByteOrder",
           "ElementType",
           "InvalidWidthError",
           "decode_primitive",
           "iter_primitives",
           "primitive_size"]
