# src/annotated_csv/errors.py

"""Error taxonomy for annotated CSV parsing.

Internal stages raise ``AnnotatedCsvError``. The top-level parser never lets
an exception escape; every failure goes through ``normalize_error`` and ends
up as an ``ErrorRecord`` inside the returned document.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure reported in ``AnnotatedDocument.errors``."""

    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    CSV_INCONSISTENT_RECORD_LENGTH = "CSV_INCONSISTENT_RECORD_LENGTH"
    MISSING_ANNOTATE_HEADER = "MISSING_ANNOTATE_HEADER"
    VERSION_NOT_SUPPORTED = "VERSION_NOT_SUPPORTED"
    META_FIELD_UNKNOWN = "META_FIELD_UNKNOWN"
    ORPHAN_ANNOTATION = "ORPHAN_ANNOTATION"
    DUPLICATE_META_FIELD = "DUPLICATE_META_FIELD"
    TABLE_HEADER_INVALID = "TABLE_HEADER_INVALID"
    UNKNOWN = "UNKNOWN"


class AnnotatedCsvError(Exception):
    """Raised by parsing stages. Carries the kind reported to callers."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class ErrorRecord:
    """A normalized failure.

    ``cause`` is opaque text describing the original failure.
    """

    kind: ErrorKind
    cause: str

    def to_dict(self) -> dict[str, str]:
        return {"error": self.kind.value, "rawError": self.cause}


def normalize_error(exc: BaseException) -> ErrorRecord:
    """Map any failure raised while acquiring or parsing rows to an ErrorRecord."""
    if isinstance(exc, AnnotatedCsvError):
        return ErrorRecord(kind=exc.kind, cause=exc.message)

    if isinstance(exc, FileNotFoundError):
        return ErrorRecord(kind=ErrorKind.FILE_NOT_FOUND, cause=_describe(exc))

    return ErrorRecord(kind=ErrorKind.UNKNOWN, cause=_describe(exc))


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"
