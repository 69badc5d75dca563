"""pytest plugin providing the ``exception_assert`` fixture.

Enable it from a conftest.py::

    pytest_plugins = ["exception_assert.pytest_plugin"]

The fixture reads ``.exception_assert_config`` from the pytest rootdir.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from exception_assert.asserts import ExceptionAssert
from exception_assert.config import CONFIG_FILENAME, AssertConfig


@pytest.fixture
def exception_assert(request: pytest.FixtureRequest) -> ExceptionAssert:
    """An ``ExceptionAssert`` configured from the rootdir config file."""
    config = AssertConfig(Path(request.config.rootpath) / CONFIG_FILENAME)
    return ExceptionAssert.from_config(config)
