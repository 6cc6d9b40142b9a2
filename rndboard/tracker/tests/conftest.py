import pytest
from datetime import date
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from tracker.models import Member, Requirement
from tracker.repositories import TrackerBackend

User = get_user_model()


@pytest.fixture
def user(db):
    return User.objects.create_user(username="tester", password="pass")


@pytest.fixture
def api(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def backend(db):
    return TrackerBackend.connect()


@pytest.fixture
def make_requirement(db):
    def _make(**overrides):
        data = {
            "title": "Plant-Based Protein Alternative",
            "description": "Improved texture and taste profile",
            "stage": "Product Concept",
            "priority": "medium",
            "assignee": "Ann Lee",
            "due_date": date(2025, 12, 15),
        }
        data.update(overrides)
        return Requirement.objects.create(**data)
    return _make


@pytest.fixture
def members(db):
    ann = Member.objects.create(name="Ann Lee", email="ann@example.com", department="R&D")
    ben = Member.objects.create(name="Ben Ng", email="ben@example.com", role="Project Lead")
    return {"ann": ann, "ben": ben}
