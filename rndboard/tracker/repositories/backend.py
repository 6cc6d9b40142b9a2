# -*- coding: utf-8 -*-
"""
TrackerBackend: the one client object every service receives.

It bundles the per-table repositories bound to a single database alias.
The app config builds it at startup; tests build their own.
"""
from __future__ import annotations
from dataclasses import dataclass

from .comment_repository import CommentRepository
from .member_repository import MemberRepository
from .requirement_repository import RequirementRepository
from .stage_history_repository import StageHistoryRepository


@dataclass
class TrackerBackend:
    members: MemberRepository
    requirements: RequirementRepository
    comments: CommentRepository
    stage_history: StageHistoryRepository

    @classmethod
    def connect(cls, using: str = "default") -> "TrackerBackend":
        return cls(
            members=MemberRepository(using),
            requirements=RequirementRepository(using),
            comments=CommentRepository(using),
            stage_history=StageHistoryRepository(using),
        )
