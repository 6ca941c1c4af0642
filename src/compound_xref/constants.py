"""Project-wide constants."""

# -- UniChem ----------------------------------------------------------------
UNICHEM_BASE_URL: str = "https://www.ebi.ac.uk/unichem/rest"

# UniChem source id of the namespace we query from (ChEMBL).
CHEMBL_SOURCE_ID: str = "1"

# -- UniChem source id -> CompoundIDs field ----------------------------------
# Source ids are listed at https://www.ebi.ac.uk/unichem/ucquery/listSources
NAMESPACE_FIELD_MAP: dict[str, str] = {
    "2": "drugbank",
    "7": "chebi",
    "22": "pubchem",
}

# -- Pipeline ---------------------------------------------------------------
DEFAULT_CONCURRENCY: int = 1
STDOUT_MARKER: str = "-"
OUTPUT_DIR_MODE: int = 0o755
