# -*- coding: utf-8 -*-
"""
Spreadsheet export of the requirement list (openpyxl).
"""
from __future__ import annotations
from datetime import date, datetime
from io import BytesIO
from typing import Iterable, Optional
import time

from django.utils import timezone
from openpyxl import Workbook

SHEET_TITLE = "R&D Projects"
XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

EXPORT_COLUMNS = [
    "id", "title", "description", "stage", "priority",
    "assignee", "due_date", "created_at", "updated_at",
]


def _cell(value):
    if value is None:
        return ""
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        return value
    return str(value)


def export_filename(now_ms: Optional[int] = None) -> str:
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"RD_Projects_{now_ms}.xlsx"


def build_requirements_workbook(requirements: Iterable) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    ws.append(EXPORT_COLUMNS)
    for req in requirements:
        ws.append([_cell(getattr(req, col)) for col in EXPORT_COLUMNS])
    return wb


def requirements_to_xlsx_bytes(requirements: Iterable) -> bytes:
    buf = BytesIO()
    build_requirements_workbook(requirements).save(buf)
    return buf.getvalue()
