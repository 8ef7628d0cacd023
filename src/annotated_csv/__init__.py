# Config
from .config import ParserConfig, load_config

# Errors
from .errors import AnnotatedCsvError, ErrorKind, ErrorRecord, normalize_error

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    AnnotatedCsvParser,
    AnnotatedDocument,
    AnnotationResolver,
    MetadataField,
    TableCell,
    annotate_csv,
    annotate_rows,
)

# Row acquisition
from .reader import fetch_rows, read_rows

__all__ = [
    # Config
    "ParserConfig",
    "load_config",
    # Errors
    "AnnotatedCsvError",
    "ErrorKind",
    "ErrorRecord",
    "normalize_error",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "AnnotatedCsvParser",
    "AnnotatedDocument",
    "AnnotationResolver",
    "MetadataField",
    "TableCell",
    "annotate_csv",
    "annotate_rows",
    # Row acquisition
    "fetch_rows",
    "read_rows",
]
