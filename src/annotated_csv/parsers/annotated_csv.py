# parsers/annotated_csv.py

import logging
from collections.abc import Sequence
from pathlib import Path
from time import monotonic

from annotated_csv.config import ParserConfig
from annotated_csv.errors import ErrorRecord, normalize_error
from annotated_csv.observability import names
from annotated_csv.observability.base import MetricsHook, NoOpMetricsHook
from annotated_csv.reader import fetch_rows

from .annotations import AnnotationResolver
from .classifier import RowClassifier
from .metadata import MetadataParser
from .models import AnnotatedDocument, RawRow
from .table import TableParser

logger = logging.getLogger(__name__)


class AnnotatedCsvParser:
    """Turns annotated CSV rows into an AnnotatedDocument.

    Failures never escape: callers branch on ``has_error``. Every parse
    gets its own AnnotationResolver, so one parser instance can be reused
    for any number of documents.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook
        self._classifier = RowClassifier(self.config.supported_versions)
        self._metadata_parser = MetadataParser(
            allow_duplicate_fields=self.config.allow_duplicate_fields
        )
        self._table_parser = TableParser(
            annotation_marker=self.config.cell_annotation_marker
        )

    def parse_rows(self, rows: Sequence[RawRow]) -> AnnotatedDocument:
        start = monotonic()
        if self.config.debug:
            logger.debug("Raw rows (%d): %s", len(rows), rows)

        try:
            document = self._parse(rows)
        except Exception as e:
            document = self._failed(e)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.DOCUMENTS_PARSED_TOTAL)
        if not document.has_error:
            self.metrics_hook.record_gauge(
                names.DOCUMENT_ANNOTATIONS, len(document.annotations)
            )
            self.metrics_hook.record_gauge(
                names.DOCUMENT_TABLE_ROWS, len(document.rows)
            )
            logger.info(
                "Parsed document: fields=%d, rows=%d, annotations=%d, latency=%.0fms",
                len(document.metadata),
                len(document.rows),
                len(document.annotations),
                elapsed_ms,
            )
        return document

    async def parse_file(self, path: str | Path) -> AnnotatedDocument:
        try:
            rows = await fetch_rows(
                path,
                delimiter=self.config.delimiter,
                relax_column_count=self.config.relax_column_count,
                metrics_hook=self.metrics_hook,
            )
        except Exception as e:
            logger.error("Error reading %s", path)
            return self._failed(e)
        return self.parse_rows(rows)

    def _parse(self, rows: Sequence[RawRow]) -> AnnotatedDocument:
        classified = self._classifier.classify(rows)
        resolver = AnnotationResolver()

        metadata = self._metadata_parser.parse(classified.metadata_rows, resolver)
        records = self._table_parser.parse(classified.table_rows, resolver)

        return AnnotatedDocument(
            metadata=metadata,
            rows=records,
            annotations=resolver.export_all(),
        )

    def _failed(self, exc: Exception) -> AnnotatedDocument:
        error: ErrorRecord = normalize_error(exc)
        if self.config.debug:
            logger.exception("Annotated CSV parse failed: %s", error.kind.value)
        else:
            logger.error(
                "Annotated CSV parse failed: %s (%s)", error.kind.value, error.cause
            )
        self.metrics_hook.increment(
            names.PARSE_ERRORS_TOTAL, labels={"kind": error.kind.value}
        )
        return AnnotatedDocument.failed(error)


def annotate_rows(
    rows: Sequence[RawRow],
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> AnnotatedDocument:
    """Parse already-tokenized rows. See AnnotatedCsvParser.parse_rows."""
    return AnnotatedCsvParser(config, metrics_hook).parse_rows(rows)


async def annotate_csv(
    path: str | Path,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> AnnotatedDocument:
    """Read and parse an annotated CSV file.

    Example:
        >>> document = await annotate_csv("report.csv")
        >>> if not document.has_error:
        ...     print(document.metadata["title"].content)
    """
    return await AnnotatedCsvParser(config, metrics_hook).parse_file(path)
