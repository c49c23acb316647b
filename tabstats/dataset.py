"""CSV text -> in-memory dataset rows."""

import csv
import io
import logging

log = logging.getLogger(__name__)


def parse_csv(text: str) -> list[dict[str, str]]:
    """Parse CSV text into one dict per data row, keyed by the header row.

    Cells are kept as text; short rows get empty strings for their missing
    trailing cells.
    """
    reader = csv.DictReader(io.StringIO(text), restval="")
    rows = []
    for raw in reader:
        # cells beyond the header land under the None key
        raw.pop(None, None)
        rows.append(raw)
    log.debug("Parsed %d CSV rows with columns %s", len(rows), reader.fieldnames)
    return rows


def is_csv_upload(filename: str | None, content_type: str | None, allowed_types: list[str]) -> bool:
    if content_type in allowed_types:
        return True
    return bool(filename) and filename.lower().endswith(".csv")
