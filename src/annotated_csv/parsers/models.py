# parsers/models.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from annotated_csv.errors import ErrorRecord

RawRow = list[str]


class Section(str, Enum):
    """Classification state while walking rows."""

    HEADER = "HEADER"
    META = "META"
    TABLE = "TABLE"


@dataclass
class MetadataField:
    """A metadata field and the annotations attached to it.

    ``content`` is set once. ``annotations`` grows as later
    ``#ANNOTATION`` rows refer back to this field.
    """

    key: str
    content: str
    annotations: list[int] = field(default_factory=list)

    def annotate(self, annotation_key: int) -> None:
        self.annotations.append(annotation_key)

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "annotations": list(self.annotations)}


@dataclass(frozen=True)
class TableCell:
    value: str
    annotations: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "annotations": list(self.annotations)}


TableRecord = dict[str, TableCell]


@dataclass(frozen=True)
class ClassifiedRows:
    version: str
    metadata_rows: list[RawRow]
    table_rows: list[RawRow]


@dataclass(frozen=True)
class AnnotatedDocument:
    """Final result of a parse. Always returned, never raised."""

    metadata: dict[str, MetadataField] = field(default_factory=dict)
    rows: list[TableRecord] = field(default_factory=list)
    annotations: list[str] = field(default_factory=list)
    errors: list[ErrorRecord] = field(default_factory=list)

    @property
    def has_error(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation using the wire field names."""
        return {
            "metadata": {key: f.to_dict() for key, f in self.metadata.items()},
            "rows": [
                {name: cell.to_dict() for name, cell in record.items()}
                for record in self.rows
            ],
            "annotations": list(self.annotations),
            "hasError": self.has_error,
            "errors": [e.to_dict() for e in self.errors],
        }

    @classmethod
    def failed(cls, error: ErrorRecord) -> "AnnotatedDocument":
        return cls(errors=[error])
