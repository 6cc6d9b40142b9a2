from datetime import date
from types import SimpleNamespace

from tracker.utils.export import EXPORT_COLUMNS, SHEET_TITLE, build_requirements_workbook, export_filename


def test_export_filename_uses_epoch_millis():
    assert export_filename(1734567890123) == "RD_Projects_1734567890123.xlsx"


def test_workbook_rows_and_dates():
    req = SimpleNamespace(
        id="r1", title="Oat drink", description="Barista edition", stage="First Batch",
        priority="high", assignee="Ann Lee", due_date=date(2025, 3, 1),
        created_at=None, updated_at=None,
    )
    ws = build_requirements_workbook([req])[SHEET_TITLE]
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == EXPORT_COLUMNS
    row = dict(zip(EXPORT_COLUMNS, rows[1]))
    assert row["due_date"] == "2025-03-01"
    assert row["priority"] == "high"
