# binview/cli/main.py
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from binview.app.config import build_config
from binview.app.runner import run_dump
from binview.cli.args import parse_args
from binview.common.logging_config import configure_logging
from binview.core.errors import BinViewError


log = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        configure_logging(args.verbose, args.log_file)
        config = build_config(
            path=args.file,
            element_type=args.type,
            offset=args.offset,
            number=args.number,
            byte_order=args.byte_order,
            row_size=args.row_size,
            profile=args.profile,
        )
        run_dump(config, stream=sys.stdout)
        return 0
    except BinViewError as e:
        log.debug("RUN_FAILED code=%s msg=%s", e.code, e.message)
        print(f"ERROR: {e.message}", file=sys.stderr)
        if e.hint:
            print(f"Hint: {e.hint}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # reader went away (e.g. `| head`); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
