# parsers/table.py

import logging

from annotated_csv.errors import AnnotatedCsvError, ErrorKind

from .annotations import AnnotationResolver
from .base import SectionParser, cell
from .models import RawRow, TableCell, TableRecord

logger = logging.getLogger(__name__)

DEFAULT_CELL_ANNOTATION_MARKER = "#ANNOTATION:"


class TableParser(SectionParser):
    """
    Builds table records from the table section.
    - First row holds column names
    - Remaining rows are records keyed by column name
    - A cell may carry inline annotations: ``30 #ANNOTATION: estimated``
    """

    def __init__(self, annotation_marker: str = DEFAULT_CELL_ANNOTATION_MARKER) -> None:
        self._marker = annotation_marker

    def parse(
        self, rows: list[RawRow], resolver: AnnotationResolver
    ) -> list[TableRecord]:
        if not rows:
            logger.debug("Empty table section")
            return []

        columns = self._columns(rows[0])
        records: list[TableRecord] = []

        for index, row in enumerate(rows[1:], start=1):
            if len(row) > len(columns):
                logger.debug(
                    "Table row %d has %d cells for %d columns; extra cells ignored",
                    index,
                    len(row),
                    len(columns),
                )
            records.append(
                {
                    name: self._parse_cell(cell(row, position), resolver)
                    for position, name in enumerate(columns)
                }
            )

        logger.debug("Parsed %d table records", len(records))
        return records

    def _columns(self, header: RawRow) -> list[str]:
        columns = [name.strip() for name in header]
        seen: set[str] = set()
        for position, name in enumerate(columns):
            if not name:
                raise AnnotatedCsvError(
                    ErrorKind.TABLE_HEADER_INVALID,
                    f"Table column {position} has an empty name",
                )
            if name in seen:
                raise AnnotatedCsvError(
                    ErrorKind.TABLE_HEADER_INVALID,
                    f"Table column '{name}' appears more than once",
                )
            seen.add(name)
        return columns

    def _parse_cell(self, raw: str, resolver: AnnotationResolver) -> TableCell:
        if self._marker not in raw:
            return TableCell(value=raw)

        value, *notes = raw.split(self._marker)
        keys = [resolver.resolve(note.strip()) for note in notes if note.strip()]
        return TableCell(value=value.rstrip(), annotations=keys)
