"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages, plus
fixtures to register that command, obtain a CliRunner, run tests within an
isolated filesystem, and hand the contract commands an in-memory service.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from kaddem.entrypoints.cli.main import kaddem
from kaddem.service_layer import ContratService

from ...unit.service_layer.fakes import FakeUoW

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'kaddem.demo' and a few on 'some.thirdparty'."""
    logger = logging.getLogger("kaddem.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and from any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level `kaddem` group for one test."""
    kaddem.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(kaddem, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def uow() -> FakeUoW:
    """In-memory unit of work behind the contract commands."""
    return FakeUoW()


@pytest.fixture
def invoke(runner, uow):
    """Invoke `kaddem` with the flight recorder off and an in-memory service."""

    def _invoke(*args: str, **kwargs):
        return runner.invoke(
            kaddem,
            ["--no-flight-recorder", *args],
            obj={"contrat_service": ContratService(uow)},
            **kwargs,
        )

    return _invoke
