"""
UniChem client.

Maps a ChEMBL compound id to its PubChem, DrugBank and ChEBI equivalents via
GET {base}/src_compound_id/{chembl_id}/1.
"""

import logging
from typing import Any

from pydantic import ValidationError

from compound_xref.config import get_settings
from compound_xref.constants import CHEMBL_SOURCE_ID, NAMESPACE_FIELD_MAP
from compound_xref.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    DataSourceError,
    RequestContext,
    ResponseParseError,
)
from compound_xref.models.model_unichem import CompoundIDs, Resolution, UniChemMapping

logger = logging.getLogger(__name__)


class UniChemClient(BaseClient):
    """Client for the EBI UniChem REST service."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        if config is None:
            settings = get_settings()
            config = ClientConfig(
                base_url=settings.unichem_base_url,
                timeout_seconds=settings.timeout_seconds,
            )
        super().__init__(config)

    @property
    def _source_name(self) -> str:
        return "unichem"

    # -- Public methods -------------------------------------------------------

    async def resolve(self, chembl_id: str) -> Resolution:
        """Resolve a ChEMBL id into a CompoundIDs set.

        Never raises for lookup failures: the returned Resolution always holds
        a CompoundIDs whose ``chembl`` equals ``chembl_id``, and on failure
        only that field is set.
        """
        try:
            mappings = await self.fetch_mappings(chembl_id)
        except DataSourceError as e:
            return self._degenerate(chembl_id, e)
        except Exception as e:
            return self._degenerate(
                chembl_id,
                DataSourceError(
                    self._source_name,
                    f"Unexpected error resolving '{chembl_id}': {e!r}",
                ),
            )
        return Resolution(compound=self.to_compound_ids(chembl_id, mappings))

    async def fetch_mappings(self, chembl_id: str) -> list[UniChemMapping]:
        """Fetch every UniChem cross-reference for a ChEMBL id.

        Raises DataSourceError on transport or HTTP failure and
        ResponseParseError when the body is not a list of objects.
        """
        url = self.build_url(chembl_id)
        context = RequestContext(
            source=self._source_name,
            method="fetch_mappings",
            params={"chembl_id": chembl_id},
        )
        raw = await self._rest_get(url, context=context)
        return self._parse_mappings(chembl_id, raw)

    def build_url(self, chembl_id: str) -> str:
        base = self.config.base_url.rstrip("/")
        return f"{base}/src_compound_id/{chembl_id}/{CHEMBL_SOURCE_ID}"

    @staticmethod
    def to_compound_ids(
        chembl_id: str, mappings: list[UniChemMapping]
    ) -> CompoundIDs:
        """Fold UniChem mappings into a CompoundIDs for the tracked namespaces.

        Unknown source ids and empty compound ids are ignored; a repeated
        source id keeps the last value seen.
        """
        fields: dict[str, str] = {}
        for mapping in mappings:
            field = NAMESPACE_FIELD_MAP.get(mapping.src_id)
            if field is not None and mapping.src_compound_id:
                fields[field] = mapping.src_compound_id
        return CompoundIDs(chembl=chembl_id, **fields)

    # -- Private helpers ------------------------------------------------------

    def _degenerate(self, chembl_id: str, error: DataSourceError) -> Resolution:
        logger.debug("Lookup failed for '%s': %s", chembl_id, error)
        return Resolution(
            compound=CompoundIDs(chembl=chembl_id),
            is_complete=False,
            errors=[str(error)],
        )

    def _parse_mappings(self, chembl_id: str, raw: Any) -> list[UniChemMapping]:
        if not isinstance(raw, list):
            raise ResponseParseError(
                self._source_name,
                f"Unexpected response shape for '{chembl_id}': "
                f"expected a list, got {type(raw).__name__}",
            )
        try:
            return [UniChemMapping.model_validate(entry) for entry in raw]
        except ValidationError as e:
            raise ResponseParseError(
                self._source_name,
                f"Malformed mapping entry for '{chembl_id}': {e}",
            ) from e
