# ============================================
# tracker/services/comment_service.py
# ============================================
from typing import List
from uuid import UUID
import logging

from django.core.exceptions import ValidationError

from tracker.models import RequirementComment
from tracker.repositories import TrackerBackend
from tracker.services.member_service import MemberService

logger = logging.getLogger(__name__)


class CommentService:

    def __init__(self, backend: TrackerBackend):
        self.backend = backend

    def list_comments(self, requirement_id: UUID) -> List[RequirementComment]:
        """Comments of a requirement, oldest first"""
        self.backend.requirements.get(requirement_id)
        return self.backend.comments.list_by_requirement(requirement_id)

    def add_comment(
        self,
        *,
        requirement_id: UUID,
        author_name: str,
        content: str
    ) -> RequirementComment:
        """Append a comment to a requirement"""

        if not (content or '').strip():
            raise ValidationError({'content': 'Comment cannot be empty'})

        self.backend.requirements.get(requirement_id)
        MemberService(self.backend).ensure_known_member(author_name, 'author_name')

        comment = self.backend.comments.insert(
            requirement_id=requirement_id,
            author_name=author_name,
            content=content
        )

        logger.info("[comment] added id=%s requirement=%s", comment.id, requirement_id)
        return comment
