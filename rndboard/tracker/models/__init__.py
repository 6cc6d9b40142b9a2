# ============================================
# tracker/models/__init__.py
# ============================================
from .choices import Stage, Priority, STAGE_ORDER
from .member import Member
from .requirement import Requirement
from .comment import RequirementComment
from .stage_history import ProjectStageHistory

__all__ = [
    'Stage',
    'Priority',
    'STAGE_ORDER',
    'Member',
    'Requirement',
    'RequirementComment',
    'ProjectStageHistory',
]
