# ============================================
# tracker/models/stage_history.py
# ============================================
import uuid

from django.db import models
from django.utils import timezone

from .choices import Stage


class ProjectStageHistory(models.Model):
    """One row per accepted stage transition. Append-only."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    requirement = models.ForeignKey(
        'Requirement',
        on_delete=models.CASCADE,
        related_name='stage_history'
    )
    stage = models.CharField(max_length=32, choices=Stage.choices)
    changed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'project_stage_history'
        ordering = ['changed_at']
        verbose_name_plural = 'project stage history'
        indexes = [
            models.Index(fields=['requirement', 'changed_at'], name='history_req_changed_idx'),
        ]

    def __str__(self):
        return f"{self.requirement_id} -> {self.stage}"
