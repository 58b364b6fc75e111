"""Tests for loguru configuration."""

from collections.abc import Iterator

import pytest
from loguru import logger

from canvas_format.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger.remove()


def test_quiet_only_shows_warnings(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(quiet=True)

    logger.info("hidden info")
    logger.warning("shown warning")

    err = capsys.readouterr().err
    assert "shown warning" in err
    assert "hidden info" not in err


def test_verbose_shows_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True)

    logger.debug("debug detail")

    assert "debug detail" in capsys.readouterr().err
