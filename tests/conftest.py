"""Pytest configuration and fixtures."""

import logging

import pytest

from chartjs import Chart, XYRs
from chartjs.config import X_FORMAT_ENV, Y_FORMAT_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep format variables from the outer environment out of the tests."""
    monkeypatch.delenv(X_FORMAT_ENV, raising=False)
    monkeypatch.delenv(Y_FORMAT_ENV, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() calls made by CLI tests."""
    yield
    logger = logging.getLogger("chartjs")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def chart():
    """Provide an empty line chart."""
    return Chart()


@pytest.fixture
def xy():
    """Provide a small X/Y payload with a gap."""
    return XYRs(x=[1, 2], y=[3, float("nan")])


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML document into tmp_path and return its path."""

    def _write(text, name="chart.yml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
