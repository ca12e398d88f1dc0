"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from routing import http_router` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_src_on_sys_path() -> None:
    """Add src/ to sys.path if missing (Lambda-style imports)."""
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()

os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("LOG_LEVEL", "INFO")


class FakeContext:
    """Minimal stand-in for the Lambda context object."""

    function_name = "http-router-test"

    def get_remaining_time_in_millis(self) -> int:
        return 1000


@pytest.fixture
def context():
    return FakeContext()
