# -*- coding: utf-8 -*-
"""
Repository for the `members` table (pure DB access).
"""
from __future__ import annotations
from typing import Any, Dict, List
from uuid import UUID

from tracker.exceptions import NotFoundError
from tracker.models import Member

from .base import BaseRepository


class MemberRepository(BaseRepository):
    table = "members"

    # ============== Queries ==============
    def list_ordered_by_name(self) -> List[Member]:
        with self.call("select"):
            return list(Member.objects.using(self.using).order_by("name"))

    def get(self, member_id: UUID) -> Member:
        with self.call("get"):
            member = Member.objects.using(self.using).filter(id=member_id).first()
        if member is None:
            raise NotFoundError("Member not found", table=self.table, operation="get")
        return member

    # ============== Mutations ==============
    def insert(self, data: Dict[str, Any]) -> Member:
        with self.call("insert"):
            return Member.objects.using(self.using).create(**data)

    def update_by_id(self, member_id: UUID, patch: Dict[str, Any]) -> Member:
        with self.call("update"):
            updated = Member.objects.using(self.using).filter(id=member_id).update(**patch)
        if not updated:
            raise NotFoundError("Member not found", table=self.table, operation="update")
        return self.get(member_id)

    def delete_by_id(self, member_id: UUID) -> None:
        with self.call("delete"):
            deleted, _ = Member.objects.using(self.using).filter(id=member_id).delete()
        if not deleted:
            raise NotFoundError("Member not found", table=self.table, operation="delete")
