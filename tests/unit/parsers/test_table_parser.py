import pytest

from annotated_csv.errors import AnnotatedCsvError, ErrorKind
from annotated_csv.parsers.annotations import AnnotationResolver
from annotated_csv.parsers.models import TableCell
from annotated_csv.parsers.table import TableParser


@pytest.fixture
def resolver() -> AnnotationResolver:
    return AnnotationResolver()


class TestTableParser:
    def test_records_keyed_by_header(self, resolver: AnnotationResolver) -> None:
        records = TableParser().parse(
            [["Name", "Age"], ["Ann", "30"], ["Bob", "41"]], resolver
        )

        assert records == [
            {"Name": TableCell("Ann"), "Age": TableCell("30")},
            {"Name": TableCell("Bob"), "Age": TableCell("41")},
        ]

    def test_header_names_are_stripped(self, resolver: AnnotationResolver) -> None:
        records = TableParser().parse([[" Name ", "Age "], ["Ann", "30"]], resolver)

        assert list(records[0]) == ["Name", "Age"]

    def test_cell_annotations_are_resolved(self, resolver: AnnotationResolver) -> None:
        records = TableParser().parse(
            [
                ["Name", "Age"],
                ["Ann", "30 #ANNOTATION: estimated #ANNOTATION: rounded"],
                ["Bob", "41#ANNOTATION:estimated"],
            ],
            resolver,
        )

        assert records[0]["Age"] == TableCell("30", [0, 1])
        assert records[1]["Age"] == TableCell("41", [0])
        assert resolver.export_all() == ["estimated", "rounded"]

    def test_annotation_keys_continue_from_shared_resolver(
        self, resolver: AnnotationResolver
    ) -> None:
        resolver.resolve("clarifies title")

        records = TableParser().parse(
            [["Name"], ["Ann #ANNOTATION: nickname"]], resolver
        )

        assert records[0]["Name"] == TableCell("Ann", [1])

    def test_empty_annotations_are_ignored(self, resolver: AnnotationResolver) -> None:
        records = TableParser().parse([["Name"], ["Ann #ANNOTATION:  "]], resolver)

        assert records[0]["Name"] == TableCell("Ann", [])
        assert resolver.export_all() == []

    def test_custom_marker(self, resolver: AnnotationResolver) -> None:
        records = TableParser(annotation_marker="|note=").parse(
            [["Age"], ["30|note=estimated"]], resolver
        )

        assert records[0]["Age"] == TableCell("30", [0])

    def test_value_without_marker_is_kept_verbatim(
        self, resolver: AnnotationResolver
    ) -> None:
        records = TableParser().parse([["Name"], ["  Ann  "]], resolver)

        assert records[0]["Name"].value == "  Ann  "

    def test_short_rows_are_padded_and_long_rows_truncated(
        self, resolver: AnnotationResolver
    ) -> None:
        records = TableParser().parse(
            [["Name", "Age"], ["Ann"], ["Bob", "41", "extra"]], resolver
        )

        assert records[0] == {"Name": TableCell("Ann"), "Age": TableCell("")}
        assert records[1] == {"Name": TableCell("Bob"), "Age": TableCell("41")}

    def test_header_only_table_has_no_records(
        self, resolver: AnnotationResolver
    ) -> None:
        assert TableParser().parse([["Name", "Age"]], resolver) == []

    def test_empty_table_section(self, resolver: AnnotationResolver) -> None:
        assert TableParser().parse([], resolver) == []

    def test_duplicate_column_raises(self, resolver: AnnotationResolver) -> None:
        with pytest.raises(AnnotatedCsvError, match="more than once") as exc_info:
            TableParser().parse([["Name", "Name"], ["Ann", "Bob"]], resolver)

        assert exc_info.value.kind is ErrorKind.TABLE_HEADER_INVALID

    def test_empty_column_name_raises(self, resolver: AnnotationResolver) -> None:
        with pytest.raises(AnnotatedCsvError, match="empty name") as exc_info:
            TableParser().parse([["Name", " "], ["Ann", "30"]], resolver)

        assert exc_info.value.kind is ErrorKind.TABLE_HEADER_INVALID
