# -*- coding: utf-8 -*-
"""
Dashboard statistics computed from an already-fetched requirement list.

Plain functions over anything exposing `.stage`, `.priority` and `.assignee`;
no queries are issued here.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from tracker.models import STAGE_ORDER, Priority


@dataclass(frozen=True)
class StageCount:
    stage: str
    count: int


@dataclass(frozen=True)
class RequirementStats:
    total: int
    unique_assignees: int
    high_priority: int
    by_stage: List[StageCount] = field(default_factory=list)

    def count_for(self, stage: str) -> int:
        for item in self.by_stage:
            if item.stage == stage:
                return item.count
        return 0


def count_by_stage(requirements: Sequence, stages: Iterable[str] = STAGE_ORDER) -> List[StageCount]:
    """Per-stage counts in workflow order, zero-count stages included."""
    return [
        StageCount(stage=stage, count=sum(1 for r in requirements if r.stage == stage))
        for stage in stages
    ]


def compute_stats(requirements: Iterable) -> RequirementStats:
    requirements = list(requirements)
    return RequirementStats(
        total=len(requirements),
        # exact, case-sensitive names
        unique_assignees=len({r.assignee for r in requirements}),
        high_priority=sum(1 for r in requirements if r.priority == Priority.HIGH),
        by_stage=count_by_stage(requirements),
    )


def stage_distribution(requirements: Iterable) -> List[StageCount]:
    """Pie-chart slices: like count_by_stage but empty stages are dropped."""
    return [item for item in count_by_stage(list(requirements)) if item.count > 0]
