"""Shared test fixtures for cmdbind.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from cmdbind import CommandRegistry, Dispatcher, RecordingMessenger
from sample_commands import SampleCommands


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "cmdbind"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def strategy() -> SampleCommands:
    return SampleCommands()


@pytest.fixture()
def registry(strategy: SampleCommands) -> CommandRegistry:
    return CommandRegistry.from_strategy(strategy)


@pytest.fixture()
def messenger() -> RecordingMessenger:
    return RecordingMessenger()


@pytest.fixture()
def dispatcher(registry: CommandRegistry, messenger: RecordingMessenger) -> Dispatcher:
    return Dispatcher(registry, messenger)
