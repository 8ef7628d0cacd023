# parsers/metadata.py

import logging

from annotated_csv.errors import AnnotatedCsvError, ErrorKind

from .annotations import AnnotationResolver
from .base import SectionParser, cell
from .models import MetadataField, RawRow

logger = logging.getLogger(__name__)

ANNOTATION_KEY = "annotation"
UNKNOWN_KEY = "unknown"

FIELD_MARKERS = {
    "#TITLE": "title",
    "#CITATION": "citation",
    "#ANNOTATION": ANNOTATION_KEY,
    "#CITATION_URL": "citationUrl",
    "#LICENSE": "license",
}


def canonical_key(marker: str) -> str:
    return FIELD_MARKERS.get(marker.strip(), UNKNOWN_KEY)


class MetadataParser(SectionParser):
    """
    Builds metadata fields from ``(marker, content)`` rows.

    ``#ANNOTATION`` rows attach to the most recent non-annotation field.
    """

    def __init__(self, allow_duplicate_fields: bool = False) -> None:
        self._allow_duplicate_fields = allow_duplicate_fields

    def parse(
        self, rows: list[RawRow], resolver: AnnotationResolver
    ) -> dict[str, MetadataField]:
        metadata: dict[str, MetadataField] = {}
        last_field: MetadataField | None = None

        for index, row in enumerate(rows):
            marker = cell(row, 0)
            key = canonical_key(marker)
            content = cell(row, 1).strip()

            if key == UNKNOWN_KEY:
                raise AnnotatedCsvError(
                    ErrorKind.META_FIELD_UNKNOWN,
                    f"Unknown metadata field '{marker.strip()}' "
                    f"in metadata row {index}",
                )

            if key == ANNOTATION_KEY:
                if last_field is None:
                    raise AnnotatedCsvError(
                        ErrorKind.ORPHAN_ANNOTATION,
                        f"Annotation '{content}' in metadata row {index} "
                        "has no preceding field",
                    )
                if not content:
                    logger.debug("Skipping blank annotation in metadata row %d", index)
                    continue
                last_field.annotate(resolver.resolve(content))
                continue

            if key in metadata:
                if not self._allow_duplicate_fields:
                    raise AnnotatedCsvError(
                        ErrorKind.DUPLICATE_META_FIELD,
                        f"Metadata field '{key}' is defined more than once "
                        f"(again in metadata row {index})",
                    )
                logger.warning(
                    "Metadata field '%s' redefined in row %d; "
                    "earlier value and annotations are discarded",
                    key,
                    index,
                )

            last_field = MetadataField(key=key, content=content)
            metadata[key] = last_field

        logger.debug("Parsed %d metadata fields", len(metadata))
        return metadata
