# src/annotated_csv/reader.py

from __future__ import annotations

import asyncio
import csv
import logging
from pathlib import Path
from time import monotonic

from annotated_csv.errors import AnnotatedCsvError, ErrorKind
from annotated_csv.markers import is_sentinel_row
from annotated_csv.observability import names
from annotated_csv.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


def read_rows(
    path: str | Path,
    delimiter: str = ",",
    relax_column_count: bool = False,
) -> list[list[str]]:
    """Read every row of a CSV file.

    Blank lines are skipped. Unless ``relax_column_count`` is set, all rows
    other than sentinel rows (``#ANNOTATE_CSV``, ``#METADATA``, ``#TABLE``)
    must have the same number of cells.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        AnnotatedCsvError: On rows of unequal width.
        csv.Error: On malformed CSV.
    """
    source = Path(path)
    rows: list[list[str]] = []
    expected_width: int | None = None

    with source.open("r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.reader(handle, delimiter=delimiter)
        for row in reader:
            if not row:
                continue
            if is_sentinel_row(row) or relax_column_count:
                rows.append(row)
                continue
            if expected_width is None:
                expected_width = len(row)
            elif len(row) != expected_width:
                raise AnnotatedCsvError(
                    ErrorKind.CSV_INCONSISTENT_RECORD_LENGTH,
                    f"Line {reader.line_num} has {len(row)} fields, "
                    f"expected {expected_width}",
                )
            rows.append(row)

    logger.debug("Read %d rows from %s", len(rows), source)
    return rows


async def fetch_rows(
    path: str | Path,
    delimiter: str = ",",
    relax_column_count: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[list[str]]:
    """Read all rows off the event loop. Resolves once or fails once."""
    start = monotonic()
    logger.info("Reading rows from %s (delimiter=%r)", path, delimiter)

    # File reads and tokenizing are blocking; keep them off the event loop
    rows = await asyncio.to_thread(read_rows, path, delimiter, relax_column_count)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.READ_ROWS_DURATION, elapsed_ms)
    metrics_hook.increment(names.ROWS_READ_TOTAL, len(rows))
    return rows
