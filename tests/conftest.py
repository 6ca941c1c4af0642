"""Pytest configuration and fixtures."""

import pytest

from compound_xref.data_sources.base_client import ClientConfig
from compound_xref.data_sources.unichem import UniChemClient

TEST_BASE_URL = "https://unichem.test/rest"


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests that call the live UniChem service",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as requiring network access"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is provided."""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="Need --run-integration option to run live service tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def unichem_client() -> UniChemClient:
    """UniChem client pointed at a fake base URL."""
    return UniChemClient(ClientConfig(base_url=TEST_BASE_URL))


@pytest.fixture
def sample_interaction() -> dict:
    """A DGIdb interaction record as written by the upstream download."""
    return {
        "id": "0f3b5c1e-3c59-4a2b-9c57-0f3c2e1a7d11",
        "gene_name": "EGFR",
        "entrez_id": 1956,
        "drug_name": "ERLOTINIB",
        "chembl_id": "CHEMBL553",
        "publications": [15118073, 16043828],
        "interaction_types": ["inhibitor"],
        "sources": ["TTD", "DrugBank"],
        "attributes": [
            {"name": "Mechanism of Interaction", "value": "Inhibitor", "sources": ["TTD"]}
        ],
        "interaction_claims": [
            {
                "source": "DrugBank",
                "drug": "DB00530",
                "gene": "EGFR",
                "interaction_types": ["inhibitor"],
                "attributes": [],
            }
        ],
    }
