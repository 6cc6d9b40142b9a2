import pytest

from tracker.models import Member

BASE = "/api/tracker/members/"


@pytest.mark.django_db
def test_member_crud(api):
    resp = api.post(BASE, {"name": "Dr. Sarah Chen", "email": "sarah@example.com", "department": "R&D"}, format="json")
    assert resp.status_code == 201, resp.content
    member_id = resp.json()["id"]
    assert resp.json()["role"] is None

    resp = api.put(f"{BASE}{member_id}/", {"name": "Sarah Chen", "email": "sarah@example.com", "role": "Lead"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Sarah Chen"
    assert resp.json()["role"] == "Lead"
    assert resp.json()["department"] is None

    resp = api.patch(f"{BASE}{member_id}/", {"department": "R&D"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["department"] == "R&D"
    assert resp.json()["role"] == "Lead"

    resp = api.patch(f"{BASE}{member_id}/", {"department": ""}, format="json")
    assert resp.json()["department"] is None

    assert api.get(f"{BASE}{member_id}/").status_code == 200
    assert api.delete(f"{BASE}{member_id}/").status_code == 204
    assert api.get(f"{BASE}{member_id}/").status_code == 404


@pytest.mark.django_db
def test_duplicate_email_is_conflict(api, members):
    resp = api.post(BASE, {"name": "Ann Again", "email": "ann@example.com"}, format="json")
    assert resp.status_code == 409
    assert resp.json() == {"detail": "A member with this email already exists", "code": "duplicate"}
    assert Member.objects.count() == 2


@pytest.mark.django_db
def test_invalid_email_is_field_error(api):
    resp = api.post(BASE, {"name": "X", "email": "not-an-email"}, format="json")
    assert resp.status_code == 400
    assert "email" in resp.json()


@pytest.mark.django_db
def test_list_ordered_by_name(api, members):
    resp = api.get(BASE)
    assert [m["name"] for m in resp.json()] == ["Ann Lee", "Ben Ng"]


@pytest.mark.django_db
def test_suggest(api, members):
    body = api.get(f"{BASE}suggest/", {"q": "AN"}).json()
    assert [m["name"] for m in body["matches"]] == ["Ann Lee"]
    assert body["is_valid_member"] is False

    body = api.get(f"{BASE}suggest/", {"q": "ann lee"}).json()
    assert body["is_valid_member"] is True

    body = api.get(f"{BASE}suggest/").json()
    assert [m["name"] for m in body["matches"]] == ["Ann Lee", "Ben Ng"]
    assert body["is_valid_member"] is False
