# binview/app/runner.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from binview.app.config import DumpConfig
from binview.app.formatter import iter_lines, write_lines
from binview.core.decoder import Decoder
from binview.core.errors import InputFileError


log = logging.getLogger(__name__)


def read_source(path: str | Path) -> bytes:
    """Read the whole input file once. All failures become InputFileError."""
    p = Path(path)
    if p.is_dir():
        raise InputFileError(f"File is a directory: {p}")
    try:
        with open(p, "rb") as f:
            data = f.read()
    except FileNotFoundError as e:
        raise InputFileError(f"No such file: {p}", hint="Check the FILE path.") from e
    except IsADirectoryError as e:
        raise InputFileError(f"File is a directory: {p}") from e
    except PermissionError as e:
        raise InputFileError(f"Permission denied: {p}") from e
    except OSError as e:
        raise InputFileError(f"Cannot read {p}: {e.strerror or e}", details={"errno": e.errno}) from e

    log.info("READ path=%s bytes=%d", p, len(data))
    return data


def run_dump(config: DumpConfig, *, stream: IO[str]) -> int:
    """
    Read -> decode -> write. Returns the number of values written.

    Reading (and so every error) happens before the first line is written.
    """
    source = read_source(config.path)
    decoder = Decoder(config.request_for(source))
    expected = len(decoder)

    if expected == 0:
        log.info("EMPTY_RUN offset=%d source_len=%d width=%d",
                 config.offset, len(source), config.element_type.width)

    write_lines(iter_lines(decoder, config.element_type, row_size=config.row_size), stream)
    log.info("DUMP_DONE values=%d", expected)
    return expected
