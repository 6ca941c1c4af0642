"""Shared fixtures for integration tests."""

import pytest

from compound_xref.data_sources.unichem import UniChemClient


@pytest.fixture()
async def live_unichem_client():
    """UniChem client against the configured (live) base URL."""
    async with UniChemClient() as client:
        yield client
