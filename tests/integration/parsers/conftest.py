import asyncio
from pathlib import Path

import pytest

from annotated_csv.parsers.annotated_csv import annotate_csv
from annotated_csv.parsers.models import AnnotatedDocument


def _create_dataset_csv(path: Path) -> None:
    """A complete document: every metadata field, cell annotations, quoting."""
    path.write_text(
        "\n".join(
            [
                "#ANNOTATE_CSV,0.1.0,",
                "#METADATA,,",
                "#TITLE,Household survey 2020,",
                "#ANNOTATION,Preliminary figures,",
                "#CITATION,\"Doe, J. (2020)\",",
                "#CITATION_URL,https://example.org/survey,",
                "#LICENSE,CC-BY-4.0,",
                "#ANNOTATION,See LICENSE for attribution,",
                "#ANNOTATION,Preliminary figures,",
                "#TABLE,,",
                "Region,Households,Median income",
                "North,1200,\"41,000 #ANNOTATION: Rounded to nearest thousand\"",
                "South,980 #ANNOTATION: Preliminary figures,38500",
                "",
            ]
        ),
        encoding="utf-8",
    )


def _create_tab_separated_csv(path: Path) -> None:
    path.write_text(
        "#ANNOTATE_CSV\t0.1.0\n#TABLE\t\nName\tAge\nAnn\t30\n",
        encoding="utf-8",
    )


def _create_unpadded_csv(path: Path) -> None:
    """Sentinel rows without padding cells."""
    path.write_text(
        "#ANNOTATE_CSV,0.1.0\n"
        "#METADATA\n"
        "#TITLE,Report\n"
        "#ANNOTATION,clarifies title\n"
        "#TABLE\n"
        "Name,Age\n"
        "Ann,30\n",
        encoding="utf-8",
    )


def _create_ragged_csv(path: Path) -> None:
    """A data row shorter than the header."""
    path.write_text(
        "#ANNOTATE_CSV,0.1.0\n#TABLE\nName,Age\nAnn\n",
        encoding="utf-8",
    )


def _create_unknown_field_csv(path: Path) -> None:
    path.write_text(
        "#ANNOTATE_CSV,0.1.0\n#METADATA,\n#TITLE,Report\n#AUTHOR,Jane\n",
        encoding="utf-8",
    )


@pytest.fixture(scope="module")
def csv_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test documents once per module."""
    dir_path: Path = tmp_path_factory.mktemp("documents")

    _create_dataset_csv(dir_path / "dataset.csv")
    _create_tab_separated_csv(dir_path / "dataset.tsv")
    _create_unpadded_csv(dir_path / "unpadded.csv")
    _create_ragged_csv(dir_path / "ragged.csv")
    _create_unknown_field_csv(dir_path / "unknown_field.csv")

    return dir_path


@pytest.fixture(scope="module")
def parsed_dataset(csv_dir: Path) -> AnnotatedDocument:
    """Parse the complete document once, reuse across tests."""
    return asyncio.run(annotate_csv(csv_dir / "dataset.csv"))
