# -*- coding: utf-8 -*-
"""
Selector for the dashboard read model: one fetch of the requirement list,
then stats, pie-chart slices and the stage-filtered list derived from it.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from tracker.models import Requirement
from tracker.repositories import TrackerBackend
from tracker.services.stage_filter import filter_by_stage, toggle_stage
from tracker.services.stats_service import RequirementStats, StageCount, compute_stats, stage_distribution


@dataclass
class Dashboard:
    stats: RequirementStats
    distribution: List[StageCount]
    selected_stage: Optional[str]
    requirements: List[Requirement]


def get_dashboard(
    backend: TrackerBackend,
    *,
    stage: Optional[str] = None,
    select: Optional[str] = None,
    order: str = "updated",
) -> Dashboard:
    selected = toggle_stage(stage, select) if select is not None else stage
    requirements = backend.requirements.list_all(order=order)
    return Dashboard(
        stats=compute_stats(requirements),
        distribution=stage_distribution(requirements),
        selected_stage=selected,
        requirements=filter_by_stage(requirements, selected),
    )
