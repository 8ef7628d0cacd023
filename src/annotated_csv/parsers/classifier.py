# parsers/classifier.py

import logging
from collections.abc import Iterable, Sequence

from annotated_csv.errors import AnnotatedCsvError, ErrorKind
from annotated_csv.markers import (
    ANNOTATE_CSV_SENTINEL,
    METADATA_SENTINEL,
    TABLE_SENTINEL,
)

from .base import cell
from .models import ClassifiedRows, RawRow, Section

logger = logging.getLogger(__name__)

_SECTION_SENTINELS = {
    METADATA_SENTINEL: Section.META,
    TABLE_SENTINEL: Section.TABLE,
}


class RowClassifier:
    """
    Splits raw rows into metadata and table groups.
    - Row 0 is the ``#ANNOTATE_CSV,<version>`` header
    - ``#METADATA`` / ``#TABLE`` rows switch section and are consumed
    - Rows before the first section marker are dropped
    """

    def __init__(self, supported_versions: Iterable[str]) -> None:
        self._supported_versions = frozenset(supported_versions)

    def classify(self, rows: Sequence[RawRow]) -> ClassifiedRows:
        version = self._check_header(rows)

        mode = Section.HEADER
        metadata_rows: list[RawRow] = []
        table_rows: list[RawRow] = []

        for row in rows[1:]:
            marker = cell(row, 0).strip()
            if marker in _SECTION_SENTINELS:
                mode = _SECTION_SENTINELS[marker]
                continue

            if mode is Section.META:
                metadata_rows.append(row)
            elif mode is Section.TABLE:
                table_rows.append(row)
            else:
                logger.debug("Dropping row before first section marker: %s", row)

        logger.debug(
            "Classified rows: version=%s, metadata=%d, table=%d",
            version,
            len(metadata_rows),
            len(table_rows),
        )
        return ClassifiedRows(
            version=version,
            metadata_rows=metadata_rows,
            table_rows=table_rows,
        )

    def _check_header(self, rows: Sequence[RawRow]) -> str:
        if not rows or cell(rows[0], 0).strip() != ANNOTATE_CSV_SENTINEL:
            found = cell(rows[0], 0) if rows else "<no rows>"
            raise AnnotatedCsvError(
                ErrorKind.MISSING_ANNOTATE_HEADER,
                f"First row must start with '{ANNOTATE_CSV_SENTINEL}', got '{found}'",
            )

        version = cell(rows[0], 1).strip()
        if version not in self._supported_versions:
            raise AnnotatedCsvError(
                ErrorKind.VERSION_NOT_SUPPORTED,
                f"Version '{version}' is not supported "
                f"(supported: {', '.join(sorted(self._supported_versions))})",
            )
        return version
