from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A Logger factory wired to in-memory console/diagnostic streams.
"""

import io
import os
import sys
from typing import Any, Callable, Generator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from plainlog.core.logger import Logger  # noqa: E402

# Fixed strftime pattern without directives: renders verbatim
FIXED_TIMESTAMP = "STAMP"


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def console() -> io.StringIO:
    """In-memory console stream."""
    return io.StringIO()


@pytest.fixture
def diagnostics() -> io.StringIO:
    """In-memory diagnostic (error) stream."""
    return io.StringIO()


@pytest.fixture
def make_logger(
        console: io.StringIO,
        diagnostics: io.StringIO,
) -> Generator[Callable[..., Logger], None, None]:
    """
    Provide a factory building Loggers bound to the in-memory streams.

    Every logger created through the factory is closed at teardown so no
    file handle outlives the test.

    Yields:
        Callable[..., Logger]: Factory accepting Logger constructor keywords.
    """
    created: List[Logger] = []

    def _factory(**kwargs: Any) -> Logger:
        kwargs.setdefault("date_format", FIXED_TIMESTAMP)
        kwargs.setdefault("colorize", False)
        kwargs.setdefault("stream", console)
        kwargs.setdefault("error_stream", diagnostics)
        lg = Logger(**kwargs)
        created.append(lg)
        return lg

    yield _factory

    for lg in created:
        lg.close()
