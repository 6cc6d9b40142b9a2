from .backend import TrackerBackend
from .comment_repository import CommentRepository
from .member_repository import MemberRepository
from .requirement_repository import RequirementRepository
from .stage_history_repository import StageHistoryRepository

__all__ = [
    "TrackerBackend",
    "CommentRepository",
    "MemberRepository",
    "RequirementRepository",
    "StageHistoryRepository",
]
