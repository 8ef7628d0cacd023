from .annotated_csv import AnnotatedCsvParser, annotate_csv, annotate_rows
from .annotations import AnnotationResolver
from .classifier import RowClassifier
from .metadata import MetadataParser
from .models import (
    AnnotatedDocument,
    ClassifiedRows,
    MetadataField,
    RawRow,
    Section,
    TableCell,
    TableRecord,
)
from .table import TableParser

__all__ = [
    # Entry points
    "AnnotatedCsvParser",
    "annotate_csv",
    "annotate_rows",
    # Stages
    "AnnotationResolver",
    "MetadataParser",
    "RowClassifier",
    "TableParser",
    # Types
    "AnnotatedDocument",
    "ClassifiedRows",
    "MetadataField",
    "RawRow",
    "Section",
    "TableCell",
    "TableRecord",
]
