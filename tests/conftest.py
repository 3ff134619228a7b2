"""Global pytest configuration.

Resets the schedgraph logging state around every test so handler and level
changes made by one test (or by the CLI) do not leak into another.
"""

from __future__ import annotations

import pytest

from schedgraph.logging import reset_logging


@pytest.fixture(autouse=True)
def _isolate_logging():
    reset_logging()
    yield
    reset_logging()
