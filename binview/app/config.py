# binview/app/config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from binview.core.errors import ArgumentError, InputFileError
from binview.core.request import DecodeRequest
from binview.model.types import ByteOrder, ElementType


PROFILE_KEYS = ("offset", "number", "byte_order", "row_size")


@dataclass(frozen=True)
class DumpConfig:
    path: Path
    element_type: ElementType
    offset: int = 0
    number: Optional[int] = None       # None = unbounded
    byte_order: ByteOrder = ByteOrder.LITTLE
    row_size: int = 1

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ArgumentError(f"Offset must be >= 0, got {self.offset}")
        if self.number is not None and self.number < 0:
            raise ArgumentError(f"Number must be >= 0, got {self.number}")
        if self.row_size < 1:
            raise ArgumentError(f"Row size must be >= 1, got {self.row_size}")

    def request_for(self, source: bytes) -> DecodeRequest:
        return DecodeRequest(
            source=source,
            element_type=self.element_type,
            offset=self.offset,
            byte_order=self.byte_order,
            max_count=self.number,
        )


# ---------------------------------------------------------------------------
# YAML profiles
# ---------------------------------------------------------------------------

def _as_int(name: str, v: Any, *, minimum: int) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ArgumentError(f"Profile '{name}' must be an integer, got {v!r}")
    if v < minimum:
        raise ArgumentError(f"Profile '{name}' must be >= {minimum}, got {v}")
    return v


def load_profile(path: str | Path) -> Dict[str, Any]:
    """
    Load a layout profile:

        offset: 128
        number: 1024
        byte_order: big-endian
        row_size: 2

    All keys optional. Returns only the keys present, already validated.
    """
    full_path = Path(path)
    try:
        with open(full_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise InputFileError(f"Profile not found: {full_path}") from e
    except OSError as e:
        raise InputFileError(f"Cannot read profile {full_path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ArgumentError(f"Profile {full_path} is not valid YAML", details={"error": str(e)}) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ArgumentError(f"Profile {full_path} must be a mapping")

    unknown = sorted(str(k) for k in data if k not in PROFILE_KEYS)
    if unknown:
        raise ArgumentError(
            f"Profile {full_path} has unknown keys: {', '.join(unknown)}",
            hint="Allowed keys: " + ", ".join(PROFILE_KEYS),
        )

    out: Dict[str, Any] = {}
    if "offset" in data:
        out["offset"] = _as_int("offset", data["offset"], minimum=0)
    if "number" in data:
        out["number"] = None if data["number"] is None else _as_int("number", data["number"], minimum=0)
    if "byte_order" in data:
        out["byte_order"] = ByteOrder.parse(str(data["byte_order"]))
    if "row_size" in data:
        out["row_size"] = _as_int("row_size", data["row_size"], minimum=1)
    return out


def build_config(
    *,
    path: str | Path,
    element_type: ElementType,
    offset: Optional[int] = None,
    number: Optional[int] = None,
    byte_order: Optional[ByteOrder] = None,
    row_size: Optional[int] = None,
    profile: Optional[str | Path] = None,
) -> DumpConfig:
    """
    Merge explicit values over profile values over defaults.
    None means "not given".
    """
    values: Dict[str, Any] = load_profile(profile) if profile is not None else {}

    explicit = {
        "offset": offset,
        "number": number,
        "byte_order": byte_order,
        "row_size": row_size,
    }
    values.update({k: v for k, v in explicit.items() if v is not None})

    return DumpConfig(path=Path(path), element_type=element_type, **values)
