# ============================================
# tracker/services/requirement_service.py
# ============================================
from dataclasses import dataclass
from datetime import date
from typing import List, Optional
from uuid import UUID
import logging

from django.core.exceptions import ValidationError

from tracker.exceptions import BackendError
from tracker.models import Priority, ProjectStageHistory, Requirement, Stage
from tracker.repositories import TrackerBackend
from tracker.repositories.requirement_repository import ORDER_FIELDS
from tracker.services.member_service import MemberService

logger = logging.getLogger(__name__)


@dataclass
class RequirementUpdate:
    """Result of an edit: the re-read requirement and what happened to history."""
    requirement: Requirement
    stage_changed: bool
    history_entry: Optional[ProjectStageHistory] = None

    @property
    def history_recorded(self) -> bool:
        return self.history_entry is not None


class RequirementService:

    def __init__(self, backend: TrackerBackend):
        self.backend = backend

    @staticmethod
    def _check_stage(stage: str) -> None:
        if stage not in Stage.values:
            raise ValidationError({'stage': f"Unknown stage '{stage}'"})

    @staticmethod
    def _check_priority(priority: str) -> None:
        if priority not in Priority.values:
            raise ValidationError({'priority': f"Unknown priority '{priority}'"})

    def list_requirements(self, order: str = 'updated') -> List[Requirement]:
        if order not in ORDER_FIELDS:
            raise ValidationError({'order': f"Unknown order '{order}'"})
        return self.backend.requirements.list_all(order=order)

    def get_requirement(self, requirement_id: UUID) -> Requirement:
        return self.backend.requirements.get(requirement_id)

    def create_requirement(
        self,
        *,
        title: str,
        description: str,
        stage: str,
        assignee: str,
        due_date: date,
        priority: str = Priority.MEDIUM
    ) -> Requirement:
        """Create a requirement. Its initial stage is not written to history."""

        if not (title or '').strip():
            raise ValidationError({'title': 'Title is required'})
        self._check_stage(stage)
        self._check_priority(priority)
        MemberService(self.backend).ensure_known_member(assignee, 'assignee')

        requirement = self.backend.requirements.insert({
            'title': title,
            'description': description,
            'stage': stage,
            'priority': priority,
            'assignee': assignee,
            'due_date': due_date,
        })

        logger.info("[requirement] created id=%s stage=%s", requirement.id, requirement.stage)
        return requirement

    def update_requirement(
        self,
        *,
        requirement_id: UUID,
        description: str,
        stage: str
    ) -> RequirementUpdate:
        """
        Apply an edit and record a stage transition.

        The submitted stage is compared with the stored one before the write.
        A changed stage appends one history row after the update; if that
        append fails the edit still stands and the failure is only logged.
        """

        self._check_stage(stage)

        current = self.backend.requirements.get(requirement_id)
        previous_stage = current.stage

        requirement = self.backend.requirements.update_by_id(
            requirement_id,
            {'description': description, 'stage': stage}
        )

        if stage == previous_stage:
            logger.info("[requirement] updated id=%s (stage unchanged)", requirement_id)
            return RequirementUpdate(requirement=requirement, stage_changed=False)

        logger.info(
            "[requirement] updated id=%s stage %s -> %s",
            requirement_id, previous_stage, stage
        )
        try:
            entry = self.backend.stage_history.insert(
                requirement_id=requirement.id,
                stage=stage
            )
        except BackendError as ex:
            logger.warning("[requirement] stage history append failed for id=%s: %s", requirement_id, ex)
            entry = None

        return RequirementUpdate(requirement=requirement, stage_changed=True, history_entry=entry)

    def stage_history(self, requirement_id: UUID) -> List[ProjectStageHistory]:
        self.backend.requirements.get(requirement_id)
        return self.backend.stage_history.list_by_requirement(requirement_id)
