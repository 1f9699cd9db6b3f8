from __future__ import annotations

import csv
import io
from typing import Any, Mapping, Sequence


def to_csv(rows: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> str:
    """
    Render rows as CSV text.

    Every field is quoted with embedded quotes doubled, rows are joined with
    ``\\n`` and there is no trailing newline. Missing or None fields are
    written as empty strings.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(list(headers))
    for row in rows:
        writer.writerow([_field(row.get(header)) for header in headers])
    return buffer.getvalue()[: -len("\n")]


def _field(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
