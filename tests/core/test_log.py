"""Tests for `shapekit.core.log`."""

import logging
from collections.abc import Iterator
from io import StringIO

import pytest

from shapekit.core.descriptors import NumberType
from shapekit.core.log import LOGGER_NAME, get_logger, setup_logging
from shapekit.core.validate import explain


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_get_logger_namespaces_names() -> None:
    assert get_logger().name == "shapekit"
    assert get_logger("shapekit").name == "shapekit"
    assert get_logger("shapekit.core.validate").name == "shapekit.core.validate"
    assert get_logger("my_app.widgets").name == "shapekit.my_app.widgets"


def test_library_modules_log_under_the_package() -> None:
    from shapekit.config import logger as config_logger
    from shapekit.core.validate import logger as engine_logger
    from shapekit.render.registry import logger as registry_logger
    from shapekit.tabular.validate import logger as tabular_logger

    for logger in (config_logger, engine_logger, registry_logger, tabular_logger):
        assert logger.name.startswith("shapekit.")


def test_setup_logging_writes_package_records_to_stream(package_logger: logging.Logger) -> None:
    stream = StringIO()
    setup_logging(level=logging.DEBUG, stream=stream)
    explain(NumberType(), "x")
    assert "shapekit.core.validate - DEBUG - explain number: ok=False issues=1" in stream.getvalue()


def test_setup_logging_replaces_its_handler(package_logger: logging.Logger) -> None:
    before = len(package_logger.handlers)
    first = setup_logging(level=logging.INFO, stream=StringIO())
    second = setup_logging(level=logging.WARNING, stream=StringIO())
    assert first is not second
    assert first not in package_logger.handlers
    assert len(package_logger.handlers) == before + 1
    assert package_logger.level == logging.WARNING
