"""
Streaming cross-reference pipeline.

Reads DGIdb interaction records (one JSON object per line), resolves each
record's ChEMBL id through UniChem and writes one CompoundIDs JSON line per
input record, in input order.

A structurally invalid input line aborts the run.  A failed lookup does not:
the chembl-only CompoundIDs is written, the failure is logged, and it is
counted in the returned RunSummary.
"""

import asyncio
import logging
from collections import deque
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from pydantic import BaseModel, ValidationError

from compound_xref.config import get_settings
from compound_xref.data_sources.unichem import UniChemClient
from compound_xref.models.model_interaction import InteractionRecord
from compound_xref.models.model_unichem import Resolution
from compound_xref.utils.output import open_output, write_line

logger = logging.getLogger(__name__)


class InteractionParseError(ValueError):
    """Raised when an input line is not a valid interaction record."""

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        super().__init__(f"line {line_number}: invalid interaction record: {message}")


class RunSummary(BaseModel):
    """Counters for one pipeline run."""

    records: int = 0
    resolved: int = 0
    failed: int = 0


def parse_record(line: str, line_number: int) -> InteractionRecord:
    try:
        return InteractionRecord.model_validate_json(line)
    except ValidationError as e:
        raise InteractionParseError(line_number, str(e)) from e


async def run_pipeline(
    lines: Iterable[str],
    sink: TextIO,
    client: UniChemClient,
    concurrency: int = 1,
) -> RunSummary:
    """Resolve every record in ``lines`` and write the results to ``sink``.

    Parameters
    ----------
    lines : iterable of str
        Newline-delimited JSON interaction records.  Every line must be a
        record; a blank line is invalid.
    sink : TextIO
        Destination for CompoundIDs JSON lines; flushed after every record.
    client : UniChemClient
        Resolver used for every lookup.
    concurrency : int
        Maximum lookups in flight.  1 resolves strictly one record at a time.
        Output order always matches input order.

    Raises
    ------
    InteractionParseError
        On the first invalid line, blank lines included.  Results for earlier
        lines have already been written; nothing is written for that line or
        any later one.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")

    summary = RunSummary()
    pending: deque[tuple[int, asyncio.Task[Resolution]]] = deque()

    async def emit_next() -> None:
        line_number, task = pending.popleft()
        resolution = await task
        write_line(sink, resolution.compound.to_json())
        summary.records += 1
        if resolution.is_complete:
            summary.resolved += 1
        else:
            summary.failed += 1
            logger.warning(
                "line %d: could not resolve '%s': %s",
                line_number,
                resolution.compound.chembl,
                "; ".join(resolution.errors),
            )

    try:
        for line_number, line in enumerate(lines, start=1):
            try:
                record = parse_record(line, line_number)
            except InteractionParseError:
                while pending:
                    await emit_next()
                raise

            task = asyncio.create_task(client.resolve(record.chembl_id))
            pending.append((line_number, task))
            if len(pending) >= concurrency:
                await emit_next()

        while pending:
            await emit_next()
    finally:
        # Only reached with work left when writing or parsing failed.
        tasks = [task for _, task in pending]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    return summary


async def run(
    interactions_path: str | Path,
    output: str | Path | None = None,
    *,
    client: UniChemClient | None = None,
    concurrency: int | None = None,
) -> RunSummary:
    """Resolve an interactions file into ``output`` (stdout when None)."""
    if concurrency is None:
        concurrency = get_settings().concurrency

    with open(interactions_path, encoding="utf-8") as lines, open_output(output) as sink:
        async with client or UniChemClient() as unichem:
            summary = await run_pipeline(lines, sink, unichem, concurrency)

    logger.info(
        "records=%d resolved=%d failed=%d",
        summary.records,
        summary.resolved,
        summary.failed,
    )
    return summary
