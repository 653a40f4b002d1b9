from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # cli.main attaches stderr/file handlers to the root logger; keep tests isolated
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h in before:
            continue
        if h.get_name() == "binview.stderr" or isinstance(h, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
