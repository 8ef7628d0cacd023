# src/annotated_csv/markers.py

"""Sentinel values recognised in column 0 of an annotated CSV document."""

ANNOTATE_CSV_SENTINEL = "#ANNOTATE_CSV"
METADATA_SENTINEL = "#METADATA"
TABLE_SENTINEL = "#TABLE"

SENTINELS = frozenset({ANNOTATE_CSV_SENTINEL, METADATA_SENTINEL, TABLE_SENTINEL})


def is_sentinel_row(row: list[str]) -> bool:
    return bool(row) and row[0].strip() in SENTINELS
