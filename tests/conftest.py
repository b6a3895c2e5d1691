"""Shared fixtures: every test runs against its own host."""

from collections.abc import Iterator

import pytest

from restshim.context import use_host
from restshim.host.host import Host


@pytest.fixture(autouse=True)
def host() -> Iterator[Host]:
    """A fresh default host, current for the duration of the test."""
    with use_host(Host()) as current:
        yield current
