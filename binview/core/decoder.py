# binview/core/decoder.py
from __future__ import annotations

import logging
from typing import Iterator

from binview.core.request import DecodeRequest
from binview.model.codec import Number, iter_primitives


log = logging.getLogger(__name__)


class Decoder:
    """
    Walks request.source from request.offset in width-sized windows.

    Iterating twice yields the same values: every pass starts from the
    (immutable) request. A trailing partial element is never emitted.
    """

    def __init__(self, request: DecodeRequest):
        self.request = request

    def __len__(self) -> int:
        return self.request.available_count()

    def __iter__(self) -> Iterator[Number]:
        req = self.request
        count = req.available_count()
        log.debug(
            "DECODE_START type=%s order=%s offset=%d source_len=%d count=%d",
            req.element_type, req.byte_order, req.offset, len(req.source), count,
        )
        if count == 0:
            return

        start = req.offset
        end = start + count * req.width
        window = memoryview(req.source)[start:end]
        yield from iter_primitives(
            req.element_type.value, window, byte_order=req.byte_order.endian
        )

    def __repr__(self) -> str:
        r = self.request
        return (f"Decoder(type={r.element_type}, order={r.byte_order}, "
                f"offset={r.offset}, count={len(self)})")


def decode(request: DecodeRequest) -> Iterator[Number]:
    return iter(Decoder(request))
