"""Pydantic models for UniChem cross-reference data."""

from pydantic import BaseModel, ConfigDict


class UniChemMapping(BaseModel):
    """One entry of a UniChem ``src_compound_id`` response.

    ``src_id`` is the UniChem source (namespace) code, e.g. "22" for PubChem.
    """

    src_id: str = ""
    src_compound_id: str = ""


class CompoundIDs(BaseModel):
    """A compound's identifiers across the namespaces we track.

    ``chembl`` is always the identifier that was queried.  The other fields
    are None when UniChem has no mapping for that namespace.
    """

    model_config = ConfigDict(frozen=True)

    chembl: str = ""
    pubchem: str | None = None
    drugbank: str | None = None
    chebi: str | None = None

    def to_json(self) -> str:
        """Serialize with unset namespaces omitted."""
        return self.model_dump_json(exclude_none=True)


class Resolution(BaseModel):
    """Outcome of resolving one ChEMBL id.

    ``compound`` is always populated.  When the lookup failed it only carries
    ``chembl``, ``is_complete`` is False and ``errors`` says why.
    """

    compound: CompoundIDs
    is_complete: bool = True
    errors: list[str] = []
