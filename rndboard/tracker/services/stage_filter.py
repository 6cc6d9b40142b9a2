# -*- coding: utf-8 -*-
"""
Stage selection on the dashboard.

Clicking a stage selects it, clicking the selected stage again clears the
selection, clicking another stage replaces it.
"""
from __future__ import annotations
from typing import Iterable, List, Optional


def toggle_stage(current: Optional[str], selected: Optional[str]) -> Optional[str]:
    if selected is None or selected == current:
        return None
    return selected


def filter_by_stage(requirements: Iterable, stage: Optional[str]) -> List:
    """Keep requirements of `stage`; no stage means the whole list, same order."""
    requirements = list(requirements)
    if stage is None:
        return requirements
    return [r for r in requirements if r.stage == stage]
