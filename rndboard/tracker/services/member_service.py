# -*- coding: utf-8 -*-
"""
Service layer for the member directory.

- CRUD against the `members` table; email uniqueness is left to the backend
  and comes back as DuplicateError.
- Autocomplete helpers used by the assignee / comment author inputs.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List
from uuid import UUID
import logging

from django.conf import settings
from django.core.exceptions import ValidationError

from tracker.exceptions import DuplicateError
from tracker.models import Member
from tracker.repositories import TrackerBackend

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "A member with this email already exists"
OPTIONAL_FIELDS = ("department", "role")


def match_members(query: str, members: Iterable[Member]) -> List[Member]:
    """Members whose name contains `query`, case-insensitive, directory order kept."""
    members = list(members)
    if not (query or "").strip():
        return members
    needle = query.lower()
    return [m for m in members if needle in m.name.lower()]


def is_known_member(text: str, members: Iterable[Member]) -> bool:
    """Case-insensitive exact match against a member name."""
    wanted = (text or "").lower()
    return any(m.name.lower() == wanted for m in members)


@dataclass
class MemberSuggestions:
    query: str
    matches: List[Member]
    is_valid_member: bool


def _normalize(data: Dict[str, Any]) -> Dict[str, Any]:
    # blank optional fields are stored as NULL
    out = dict(data)
    for key in OPTIONAL_FIELDS:
        if key in out and not (out[key] or "").strip():
            out[key] = None
    return out


class MemberService:

    def __init__(self, backend: TrackerBackend):
        self.backend = backend

    def list_members(self) -> List[Member]:
        return self.backend.members.list_ordered_by_name()

    def get_member(self, member_id: UUID) -> Member:
        return self.backend.members.get(member_id)

    def create_member(self, data: Dict[str, Any]) -> Member:
        try:
            member = self.backend.members.insert(_normalize(data))
        except DuplicateError as ex:
            logger.info("[member] duplicate email on create: %s", data.get("email"))
            raise DuplicateError(DUPLICATE_EMAIL_MESSAGE, table=ex.table, operation=ex.operation) from ex
        logger.info("[member] created id=%s name=%s", member.id, member.name)
        return member

    def update_member(self, member_id: UUID, data: Dict[str, Any]) -> Member:
        allowed = {"name", "email", "department", "role"}
        patch = {k: v for k, v in _normalize(data).items() if k in allowed}
        if not patch:
            return self.backend.members.get(member_id)
        try:
            member = self.backend.members.update_by_id(member_id, patch)
        except DuplicateError as ex:
            logger.info("[member] duplicate email on update id=%s: %s", member_id, data.get("email"))
            raise DuplicateError(DUPLICATE_EMAIL_MESSAGE, table=ex.table, operation=ex.operation) from ex
        logger.info("[member] updated id=%s fields=%s", member_id, sorted(patch))
        return member

    def delete_member(self, member_id: UUID) -> None:
        self.backend.members.delete_by_id(member_id)
        logger.info("[member] deleted id=%s", member_id)

    def suggest(self, query: str) -> MemberSuggestions:
        # one directory fetch per call, filtering happens in memory
        members = self.list_members()
        return MemberSuggestions(
            query=query or "",
            matches=match_members(query, members),
            is_valid_member=is_known_member(query, members),
        )

    def ensure_known_member(self, name: str, field: str) -> None:
        """Reject free-text names not in the directory when the gate is enabled."""
        if not getattr(settings, "TRACKER_REQUIRE_KNOWN_MEMBERS", False):
            return
        if not is_known_member(name, self.list_members()):
            raise ValidationError({field: f"'{name}' is not a registered member"})
