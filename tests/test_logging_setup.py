# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskdesk.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_file_gets_debug_console_gets_only_warnings(
    tmp_path: Path, capsys, restore_root_logging
) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")

    log = logging.getLogger("taskdesk.tests")
    log.debug("debug detail")
    log.info("routine info")
    log.warning("save failed")
    logging.getLogger("somelib").warning("library chatter")

    err = capsys.readouterr().err
    assert "save failed" in err
    assert "routine info" not in err
    assert "library chatter" not in err

    text = log_file.read_text("utf-8")
    assert "debug detail" in text
    assert "library chatter" in text
