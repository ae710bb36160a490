"""Unit tests for the CLI logging setup."""

import io
import logging

import pytest

from dircmp.cli.logging_config import configure_logging, level_for_verbosity


@pytest.fixture
def package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger("dircmp")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.parametrize(
    "verbosity,level",
    [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_level_for_verbosity(verbosity, level):
    assert level_for_verbosity(verbosity) == level


def test_configure_logging_writes_to_stream(package_logger):
    stream = io.StringIO()
    configure_logging(1, stream=stream)

    logging.getLogger("dircmp.comparison.engine").info("Comparing %s vs %s", "a", "b")
    logging.getLogger("dircmp.comparison.engine").debug("hidden")

    assert stream.getvalue() == "INFO dircmp.comparison.engine: Comparing a vs b\n"


def test_default_level_hides_info(package_logger):
    stream = io.StringIO()
    configure_logging(stream=stream)
    logging.getLogger("dircmp.tree").info("not shown")
    logging.getLogger("dircmp.tree").warning("shown")
    assert stream.getvalue() == "WARNING dircmp.tree: shown\n"


def test_reconfigure_replaces_handler(package_logger):
    first, second = io.StringIO(), io.StringIO()
    configure_logging(0, stream=first)
    logger = configure_logging(2, stream=second)

    cli_handlers = [h for h in logger.handlers if getattr(h, "_dircmp_cli", False)]
    assert len(cli_handlers) == 1
    logger.debug("once")
    assert first.getvalue() == ""
    assert second.getvalue() == "DEBUG dircmp: once\n"


def test_foreign_handlers_kept(package_logger):
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    configure_logging(stream=io.StringIO())
    assert foreign in package_logger.handlers
