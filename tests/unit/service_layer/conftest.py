"""Pytest fixtures for contract service unit tests."""

import pytest

from kaddem.service_layer import ContratService

from .fakes import FakeUoW

# pylint: disable=redefined-outer-name


@pytest.fixture
def uow() -> FakeUoW:
    """A fresh fake unit of work over empty in-memory stores."""
    return FakeUoW()


@pytest.fixture
def service(uow: FakeUoW) -> ContratService:
    """Contract service wired to the fake unit of work."""
    return ContratService(uow)
