import pytest
from uuid import uuid4

from tracker.exceptions import DuplicateError, NotFoundError
from tracker.models import Member
from tracker.services.member_service import DUPLICATE_EMAIL_MESSAGE, MemberService


@pytest.mark.django_db
def test_create_member_blank_optionals_become_null(backend):
    member = MemberService(backend).create_member(
        {"name": "Dr. Lisa Wang", "email": "lisa@example.com", "department": "", "role": "  "}
    )
    member.refresh_from_db()
    assert member.department is None
    assert member.role is None


@pytest.mark.django_db
def test_duplicate_email_on_create(backend, members):
    service = MemberService(backend)
    with pytest.raises(DuplicateError) as exc:
        service.create_member({"name": "Other Ann", "email": "ann@example.com"})
    assert exc.value.code == "duplicate"
    assert exc.value.message == DUPLICATE_EMAIL_MESSAGE
    assert Member.objects.count() == 2


@pytest.mark.django_db
def test_duplicate_email_on_update(backend, members):
    service = MemberService(backend)
    with pytest.raises(DuplicateError):
        service.update_member(members["ben"].id, {"email": "ann@example.com"})
    members["ben"].refresh_from_db()
    assert members["ben"].email == "ben@example.com"


@pytest.mark.django_db
def test_update_and_delete(backend, members):
    service = MemberService(backend)
    updated = service.update_member(members["ben"].id, {"name": "Benjamin Ng", "department": "Quality"})
    assert updated.name == "Benjamin Ng"
    assert updated.department == "Quality"

    service.delete_member(members["ben"].id)
    assert [m.name for m in service.list_members()] == ["Ann Lee"]

    with pytest.raises(NotFoundError):
        service.delete_member(members["ben"].id)
    with pytest.raises(NotFoundError):
        service.update_member(uuid4(), {"name": "Nobody"})


@pytest.mark.django_db
def test_list_is_alphabetical(backend, members):
    MemberService(backend).create_member({"name": "Aaron Bell", "email": "aaron@example.com"})
    assert [m.name for m in MemberService(backend).list_members()] == ["Aaron Bell", "Ann Lee", "Ben Ng"]


@pytest.mark.django_db
def test_suggest(backend, members):
    service = MemberService(backend)

    suggestions = service.suggest("an")
    assert [m.name for m in suggestions.matches] == ["Ann Lee"]
    assert suggestions.is_valid_member is False

    assert service.suggest("ann lee").is_valid_member is True
    assert service.suggest("Ann Lee").is_valid_member is True
