import csv
import io
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time


def cell_to_text(value: object) -> str:
    """Render a spreadsheet cell the way it would appear in a CSV export."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def rows_to_csv(rows: Iterable[Sequence[object]]) -> str:
    """Serialize rows as CSV text with ``\\n`` line endings and no trailing newline."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in rows:
        writer.writerow([cell_to_text(cell) for cell in row])
    return buf.getvalue().rstrip("\n")
