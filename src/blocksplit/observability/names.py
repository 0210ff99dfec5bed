# src/blocksplit/observability/names.py

"""Standard metric names for blocksplit observability.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Counters
PARSER_LINES_TOTAL = "parser_lines_total"
# Labelled with block="pre" | "central" | "post"
PARSER_BLOCKS_FLUSHED_TOTAL = "parser_blocks_flushed_total"


# ============================================================================
# File Processing Metrics
# ============================================================================

# Duration
FILE_PROCESSING_DURATION = "file_processing_duration"

# Counters (read failures and handler failures)
FILE_PROCESSING_ERRORS_TOTAL = "file_processing_errors_total"
