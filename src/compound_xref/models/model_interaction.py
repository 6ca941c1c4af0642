"""Pydantic models for DGIdb interaction records.

One record per line of the interactions file.  Only ``chembl_id`` is used
downstream; the remaining fields are parsed so that a malformed record is
rejected, then dropped.

JSON nulls decode to the field's zero value, including nulls inside lists:
``"sources": [null]`` becomes ``[""]`` and ``"attributes": [null]`` becomes
``[Attribute()]``.
"""

from typing import Any

from pydantic import BaseModel, field_validator, model_validator


def _fill_null_items(items: Any, zero: Any) -> Any:
    if not isinstance(items, list):
        return items
    return [zero if item is None else item for item in items]


class _NullsAsDefaults(BaseModel):
    """Treat explicit JSON nulls as the field default."""

    @model_validator(mode="before")
    @classmethod
    def coerce_nones(cls, values: dict) -> dict:
        if not isinstance(values, dict):
            return values
        for field_name, field_info in cls.model_fields.items():
            if values.get(field_name) is None and field_info.default is not None:
                values[field_name] = field_info.default
        return values


class Attribute(_NullsAsDefaults):
    """A provenance-tagged name/value pair."""

    name: str = ""
    value: str = ""
    sources: list[str] = []

    @field_validator("sources", mode="before")
    @classmethod
    def null_strings(cls, v: Any) -> Any:
        return _fill_null_items(v, "")


class InteractionClaim(_NullsAsDefaults):
    """One source's claim about a drug-gene interaction."""

    source: str = ""
    drug: str = ""
    gene: str = ""
    interaction_types: list[str] = []
    attributes: list[Attribute] = []

    @field_validator("interaction_types", mode="before")
    @classmethod
    def null_strings(cls, v: Any) -> Any:
        return _fill_null_items(v, "")

    @field_validator("attributes", mode="before")
    @classmethod
    def null_objects(cls, v: Any) -> Any:
        return _fill_null_items(v, {})


class InteractionRecord(_NullsAsDefaults):
    """An aggregated drug-gene interaction.

    ``chembl_id`` is the key resolved against UniChem.  It may be missing or
    empty, in which case it resolves as the empty string.
    """

    id: str = ""
    gene_name: str = ""
    entrez_id: int | None = None
    drug_name: str = ""
    chembl_id: str = ""
    publications: list[int] = []
    interaction_types: list[str] = []
    sources: list[str] = []
    attributes: list[Attribute] = []
    interaction_claims: list[InteractionClaim] = []

    @field_validator("publications", mode="before")
    @classmethod
    def null_ints(cls, v: Any) -> Any:
        return _fill_null_items(v, 0)

    @field_validator("interaction_types", "sources", mode="before")
    @classmethod
    def null_strings(cls, v: Any) -> Any:
        return _fill_null_items(v, "")

    @field_validator("attributes", "interaction_claims", mode="before")
    @classmethod
    def null_objects(cls, v: Any) -> Any:
        return _fill_null_items(v, {})
