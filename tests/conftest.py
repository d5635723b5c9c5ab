"""Pytest configuration and shared fixtures for the html2jsx test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest

from html2jsx import HtmlToJsx, JsxOptions

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property-based tests will be skipped
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def converter() -> HtmlToJsx:
    """Provide a converter with default options."""
    return HtmlToJsx()


@pytest.fixture
def tab_converter() -> HtmlToJsx:
    """Provide a converter that indents with tabs."""
    return HtmlToJsx(JsxOptions(indent="\t"))


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run a test from an empty directory with no config environment variable.

    Yields
    ------
    Path
        The temporary working directory.

    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HTML2JSX_CONFIG", raising=False)
    yield tmp_path


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers after tests that configure logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
