"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real channels and real threads everywhere (the pipeline is cheap to run)
- Channel capacities in unit tests leave room for the close sentinel so a
  single-threaded test never blocks
"""

import logging
import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add project root to path so tests can import cmdtimes package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cmdtimes.helpers.dto.config_dto import TimingsConfig  # noqa: E402

# Lines from the reference example: two measurements, one noise line, one more measurement
EXAMPLE_LINES = ["build -> 1.2s", "test -> 500ms", "not a measurement line", "lint -> 2s"]


@pytest.fixture
def example_lines() -> list[str]:
    """Reference input lines."""
    return list(EXAMPLE_LINES)


@pytest.fixture
def timings_config() -> TimingsConfig:
    """Pipeline config with a fixed worker count (independent of the host CPU count)."""
    return TimingsConfig(worker_count=4)


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Drop the stderr handler installed by configure_logging() and restore the root level."""
    root = logging.getLogger()
    level = root.level
    try:
        yield
    finally:
        # pytest's own capture handlers are subclasses and stay in place
        for handler in [h for h in root.handlers if type(h) is logging.StreamHandler]:
            root.removeHandler(handler)
        root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CMDTIMES_* variables inherited from the shell running the tests."""
    for key in list(os.environ):
        if key.startswith("CMDTIMES_"):
            monkeypatch.delenv(key, raising=False)
