# parsers/base.py

from abc import ABC, abstractmethod
from typing import Any

from .annotations import AnnotationResolver
from .models import RawRow


class SectionParser(ABC):
    @abstractmethod
    def parse(self, rows: list[RawRow], resolver: AnnotationResolver) -> Any:
        """
        Parse the rows of one document section.

        Requirements:
        - Rows are consumed in order
        - Annotation keys come from the shared, document-global resolver
        - Failures raise AnnotatedCsvError; no partial result is returned
        """
        raise NotImplementedError


def cell(row: RawRow, index: int) -> str:
    """Cell at ``index``, or an empty string when the row is shorter."""
    return row[index] if index < len(row) else ""
