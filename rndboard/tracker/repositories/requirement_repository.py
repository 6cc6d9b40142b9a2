# -*- coding: utf-8 -*-
"""
Repository for the `requirements` table (pure DB access).
"""
from __future__ import annotations
from typing import Any, Dict, List
from uuid import UUID

from django.utils import timezone

from tracker.exceptions import NotFoundError
from tracker.models import Requirement

from .base import BaseRepository

ORDER_FIELDS = {
    "updated": "-updated_at",
    "created": "-created_at",
}


class RequirementRepository(BaseRepository):
    table = "requirements"

    # ============== Queries ==============
    def list_all(self, order: str = "updated") -> List[Requirement]:
        order_field = ORDER_FIELDS[order]
        with self.call("select"):
            return list(Requirement.objects.using(self.using).order_by(order_field))

    def get(self, requirement_id: UUID) -> Requirement:
        with self.call("get"):
            requirement = Requirement.objects.using(self.using).filter(id=requirement_id).first()
        if requirement is None:
            raise NotFoundError("Requirement not found", table=self.table, operation="get")
        return requirement

    # ============== Mutations ==============
    def insert(self, data: Dict[str, Any]) -> Requirement:
        with self.call("insert"):
            return Requirement.objects.using(self.using).create(**data)

    def update_by_id(self, requirement_id: UUID, patch: Dict[str, Any]) -> Requirement:
        # QuerySet.update() skips auto_now, so updated_at is stamped here
        fields = dict(patch, updated_at=timezone.now())
        with self.call("update"):
            updated = Requirement.objects.using(self.using).filter(id=requirement_id).update(**fields)
        if not updated:
            raise NotFoundError("Requirement not found", table=self.table, operation="update")
        return self.get(requirement_id)
