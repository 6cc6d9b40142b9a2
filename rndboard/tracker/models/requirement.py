# ============================================
# tracker/models/requirement.py
# ============================================
import uuid

from django.db import models

from .choices import Priority, Stage


class Requirement(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=100)
    description = models.TextField()
    stage = models.CharField(max_length=32, choices=Stage.choices)
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    assignee = models.CharField(max_length=100)
    due_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'requirements'
        ordering = ['-updated_at']
        indexes = [
            models.Index(fields=['stage'], name='requirements_stage_idx'),
            models.Index(fields=['-created_at'], name='requirements_created_idx'),
        ]

    def __str__(self):
        return f"{self.title} [{self.stage}]"
