# tests/test_logging.py

import io
import re

from chili.logging import Logger


def test_lines_carry_elapsed_and_frame():
    out, err = io.StringIO(), io.StringIO()
    logger = Logger(out=out, err=err)
    logger.increment_frame()
    logger.increment_frame()
    logger.log("[INIT] hello")
    logger.error("[DROP][ERR] bad")

    assert re.fullmatch(r"\[\s*\d+\.\d{3}s F000002\] \[INIT\] hello\n", out.getvalue())
    assert err.getvalue().endswith("[DROP][ERR] bad\n")
    assert "bad" not in out.getvalue()
