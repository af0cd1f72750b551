"""pytest integration.

Enable from a conftest with::

    pytest_plugins = ['guarded.pytest_plugin']
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from guarded.reporting import CollectingSink, use_sink


@pytest.fixture
def failure_sink() -> Iterator[CollectingSink]:
    """Collect assertion failures for one test and fail it at teardown if any were recorded."""
    with use_sink(CollectingSink()) as sink:
        yield sink
    if len(sink):
        pytest.fail(sink.summary(), pytrace=False)
