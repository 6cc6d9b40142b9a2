# -*- coding: utf-8 -*-
"""
Repository for the `project_stage_history` table (append-only).
"""
from __future__ import annotations
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from django.utils import timezone

from tracker.models import ProjectStageHistory

from .base import BaseRepository


class StageHistoryRepository(BaseRepository):
    table = "project_stage_history"

    def list_by_requirement(self, requirement_id: UUID) -> List[ProjectStageHistory]:
        with self.call("select"):
            return list(
                ProjectStageHistory.objects.using(self.using)
                .filter(requirement_id=requirement_id)
                .order_by("changed_at")
            )

    def insert(
        self,
        *,
        requirement_id: UUID,
        stage: str,
        changed_at: Optional[datetime] = None,
    ) -> ProjectStageHistory:
        with self.call("insert"):
            return ProjectStageHistory.objects.using(self.using).create(
                requirement_id=requirement_id,
                stage=stage,
                changed_at=changed_at or timezone.now(),
            )
