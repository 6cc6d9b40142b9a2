# -*- coding: utf-8 -*-
"""
Repository for the `requirement_comments` table (append-only).
"""
from __future__ import annotations
from typing import List
from uuid import UUID

from tracker.models import RequirementComment

from .base import BaseRepository


class CommentRepository(BaseRepository):
    table = "requirement_comments"

    def list_by_requirement(self, requirement_id: UUID) -> List[RequirementComment]:
        with self.call("select"):
            return list(
                RequirementComment.objects.using(self.using)
                .filter(requirement_id=requirement_id)
                .order_by("created_at")
            )

    def insert(self, *, requirement_id: UUID, author_name: str, content: str) -> RequirementComment:
        with self.call("insert"):
            return RequirementComment.objects.using(self.using).create(
                requirement_id=requirement_id,
                author_name=author_name,
                content=content,
            )
