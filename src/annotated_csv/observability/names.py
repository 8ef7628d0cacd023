# src/annotated_csv/observability/names.py

"""Standard metric names for annotated-csv observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Row Acquisition Metrics
# ============================================================================

# Duration
READ_ROWS_DURATION = "read_rows_duration"

# Counters
ROWS_READ_TOTAL = "rows_read_total"


# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
DOCUMENTS_PARSED_TOTAL = "documents_parsed_total"
PARSE_ERRORS_TOTAL = "parse_errors_total"

# Gauges (per document)
DOCUMENT_ANNOTATIONS = "document_annotations"
DOCUMENT_TABLE_ROWS = "document_table_rows"
