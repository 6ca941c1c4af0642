"""Unit tests for compound_xref models."""

import json

import pytest
from pydantic import ValidationError

from compound_xref.models import (
    Attribute,
    CompoundIDs,
    InteractionClaim,
    InteractionRecord,
    Resolution,
    UniChemMapping,
)


class TestCompoundIDs:
    """Tests for CompoundIDs model."""

    def test_only_chembl_set_by_default(self):
        compound = CompoundIDs(chembl="CHEMBL12")
        assert compound.chembl == "CHEMBL12"
        assert compound.pubchem is None
        assert compound.drugbank is None
        assert compound.chebi is None

    def test_to_json_omits_unset_namespaces(self):
        compound = CompoundIDs(chembl="CHEMBL12", pubchem="PC99")
        assert compound.to_json() == '{"chembl":"CHEMBL12","pubchem":"PC99"}'

    def test_to_json_field_order(self):
        compound = CompoundIDs(chebi="CB1", drugbank="DB1", pubchem="PC1", chembl="C1")
        assert list(json.loads(compound.to_json())) == [
            "chembl",
            "pubchem",
            "drugbank",
            "chebi",
        ]

    def test_to_json_keeps_empty_chembl(self):
        assert CompoundIDs(chembl="").to_json() == '{"chembl":""}'

    def test_is_frozen(self):
        compound = CompoundIDs(chembl="CHEMBL12")
        with pytest.raises(ValidationError):
            compound.pubchem = "PC99"


class TestInteractionRecord:
    """Tests for InteractionRecord and its nested models."""

    def test_parses_full_record(self, sample_interaction):
        record = InteractionRecord.model_validate_json(json.dumps(sample_interaction))

        assert record.chembl_id == "CHEMBL553"
        assert record.entrez_id == 1956
        assert record.publications == [15118073, 16043828]
        assert record.attributes[0].name == "Mechanism of Interaction"
        assert record.attributes[0].sources == ["TTD"]
        assert record.interaction_claims[0].drug == "DB00530"
        assert record.interaction_claims[0].attributes == []

    def test_missing_fields_default(self):
        record = InteractionRecord.model_validate_json("{}")
        assert record.chembl_id == ""
        assert record.entrez_id is None
        assert record.publications == []
        assert record.interaction_claims == []

    def test_nulls_coerced_to_defaults(self):
        record = InteractionRecord.model_validate_json(
            '{"chembl_id": null, "sources": null, "attributes": null}'
        )
        assert record.chembl_id == ""
        assert record.sources == []
        assert record.attributes == []

    def test_unknown_keys_ignored(self):
        record = InteractionRecord.model_validate_json(
            '{"chembl_id": "CHEMBL12", "score": 3.5}'
        )
        assert record.chembl_id == "CHEMBL12"

    def test_null_list_items_decode_as_zero_values(self):
        record = InteractionRecord.model_validate_json(
            '{"publications": [null, 7], "sources": [null], "attributes": [null],'
            ' "interaction_claims": [null, {"attributes": [null],'
            ' "interaction_types": [null]}]}'
        )

        assert record.publications == [0, 7]
        assert record.sources == [""]
        assert record.attributes == [Attribute()]
        assert record.interaction_claims[0] == InteractionClaim()
        assert record.interaction_claims[1].attributes == [Attribute()]
        assert record.interaction_claims[1].interaction_types == [""]

    @pytest.mark.parametrize(
        "line",
        [
            "not-json",
            "[]",
            '"CHEMBL12"',
            '{"publications": "x"}',
            '{"chembl_id": 12}',
            '{"attributes": [{"sources": "TTD"}]}',
        ],
    )
    def test_structurally_invalid_lines_rejected(self, line):
        with pytest.raises(ValidationError):
            InteractionRecord.model_validate_json(line)


class TestUniChemMapping:
    """Tests for UniChemMapping model."""

    def test_extra_keys_ignored(self):
        mapping = UniChemMapping.model_validate(
            {"src_id": "22", "src_compound_id": "2244", "assignment": "1"}
        )
        assert mapping.src_id == "22"
        assert mapping.src_compound_id == "2244"

    def test_non_string_values_rejected(self):
        with pytest.raises(ValidationError):
            UniChemMapping.model_validate({"src_id": 22, "src_compound_id": "2244"})


def test_resolution_defaults_to_complete():
    resolution = Resolution(compound=CompoundIDs(chembl="CHEMBL12"))
    assert resolution.is_complete is True
    assert resolution.errors == []
