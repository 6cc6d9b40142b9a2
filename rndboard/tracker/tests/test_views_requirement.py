import pytest
from io import BytesIO
from openpyxl import load_workbook
from rest_framework.test import APIClient

from tracker.models import ProjectStageHistory, Requirement
from tracker.utils.export import EXPORT_COLUMNS, SHEET_TITLE

BASE = "/api/tracker/requirements/"

PAYLOAD = {
    "title": "Sustainable Packaging Solution",
    "description": "Biodegradable packaging for frozen food products",
    "stage": "Product Concept",
    "priority": "medium",
    "assignee": "Mike Johnson",
    "due_date": "2025-12-20",
}


@pytest.mark.django_db
def test_requires_authentication():
    resp = APIClient().get(BASE)
    assert resp.status_code == 403


@pytest.mark.django_db
def test_create_and_list(api):
    resp = api.post(BASE, PAYLOAD, format="json")
    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["stage"] == "Product Concept"
    assert body["due_date"] == "2025-12-20"

    resp = api.get(BASE)
    assert resp.status_code == 200
    assert [r["title"] for r in resp.json()] == [PAYLOAD["title"]]


@pytest.mark.django_db
def test_create_validation_errors(api):
    bad = dict(PAYLOAD, title="", description="x" * 501, stage="Design", priority="urgent")
    resp = api.post(BASE, bad, format="json")
    assert resp.status_code == 400
    errors = resp.json()
    assert {"title", "description", "stage", "priority"} <= set(errors)
    assert Requirement.objects.count() == 0


@pytest.mark.django_db
def test_priority_defaults_to_medium(api):
    payload = {k: v for k, v in PAYLOAD.items() if k != "priority"}
    resp = api.post(BASE, payload, format="json")
    assert resp.status_code == 201
    assert resp.json()["priority"] == "medium"


@pytest.mark.django_db
def test_list_stage_filter(api, make_requirement):
    make_requirement(title="concept", stage="Product Concept")
    make_requirement(title="screen", stage="Screen Test")

    resp = api.get(BASE, {"stage": "Screen Test"})
    assert [r["title"] for r in resp.json()] == ["screen"]

    resp = api.get(BASE, {"stage": "Nope"})
    assert resp.status_code == 400


@pytest.mark.django_db
def test_edit_records_transition(api, make_requirement):
    req = make_requirement()
    url = f"{BASE}{req.id}/"

    resp = api.put(url, {"description": "Moved on", "stage": "Screen Test"}, format="json")
    assert resp.status_code == 200, resp.content
    body = resp.json()
    assert body["stage_changed"] is True
    assert body["history_recorded"] is True
    assert body["requirement"]["stage"] == "Screen Test"
    assert [h["stage"] for h in body["history"]] == ["Screen Test"]

    resp = api.patch(url, {"description": "Reworded", "stage": "Screen Test"}, format="json")
    body = resp.json()
    assert body["stage_changed"] is False
    assert body["requirement"]["description"] == "Reworded"
    assert len(body["history"]) == 1
    assert ProjectStageHistory.objects.filter(requirement=req).count() == 1


@pytest.mark.django_db
def test_edit_requires_description_and_stage(api, make_requirement):
    req = make_requirement()
    resp = api.put(f"{BASE}{req.id}/", {"stage": "Screen Test"}, format="json")
    assert resp.status_code == 400
    assert "description" in resp.json()
    assert not ProjectStageHistory.objects.exists()


@pytest.mark.django_db
def test_detail_and_history_not_found(api):
    missing = "00000000-0000-0000-0000-000000000000"
    assert api.get(f"{BASE}{missing}/").status_code == 404
    assert api.get(f"{BASE}{missing}/history/").status_code == 404
    resp = api.put(f"{BASE}{missing}/", {"description": "d", "stage": "Screen Test"}, format="json")
    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"


@pytest.mark.django_db
def test_history_endpoint(api, make_requirement):
    req = make_requirement()
    assert api.get(f"{BASE}{req.id}/history/").json() == []

    api.put(f"{BASE}{req.id}/", {"description": "d", "stage": "First Batch"}, format="json")
    history = api.get(f"{BASE}{req.id}/history/").json()
    assert len(history) == 1
    assert history[0]["stage"] == "First Batch"
    assert history[0]["requirement_id"] == str(req.id)


@pytest.mark.django_db
def test_export_workbook(api, make_requirement):
    make_requirement(title="older")
    make_requirement(title="newer")

    resp = api.get(f"{BASE}export/")
    assert resp.status_code == 200
    assert resp["Content-Disposition"].startswith('attachment; filename="RD_Projects_')

    wb = load_workbook(BytesIO(resp.content))
    ws = wb[SHEET_TITLE]
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == EXPORT_COLUMNS
    title_col = EXPORT_COLUMNS.index("title")
    assert [r[title_col] for r in rows[1:]] == ["newer", "older"]


@pytest.mark.django_db
def test_list_order(api, make_requirement):
    first = make_requirement(title="first")
    make_requirement(title="second")
    api.put(f"{BASE}{first.id}/", {"description": "touched", "stage": "Screen Test"}, format="json")

    assert [r["title"] for r in api.get(BASE).json()] == ["first", "second"]
    assert [r["title"] for r in api.get(BASE, {"order": "created"}).json()] == ["second", "first"]

    resp = api.get(BASE, {"order": "bogus"})
    assert resp.status_code == 400
    assert "order" in resp.json()


@pytest.mark.django_db
def test_partial_edit_keeps_stored_fields(api, make_requirement):
    req = make_requirement(description="Keep me")
    url = f"{BASE}{req.id}/"

    resp = api.patch(url, {"stage": "Testing Validation"}, format="json")
    assert resp.status_code == 200, resp.content
    body = resp.json()
    assert body["stage_changed"] is True
    assert body["requirement"]["description"] == "Keep me"
    assert [h["stage"] for h in body["history"]] == ["Testing Validation"]

    resp = api.patch(url, {"description": "Only the text"}, format="json")
    body = resp.json()
    assert body["stage_changed"] is False
    assert body["requirement"]["stage"] == "Testing Validation"
    assert body["requirement"]["description"] == "Only the text"
    assert len(body["history"]) == 1

