# ============================================
# tracker/models/comment.py
# ============================================
import uuid

from django.db import models


class RequirementComment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    requirement = models.ForeignKey(
        'Requirement',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    author_name = models.CharField(max_length=100)
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'requirement_comments'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['requirement', 'created_at'], name='comments_req_created_idx'),
        ]

    def __str__(self):
        return f"Comment by {self.author_name} on {self.requirement_id}"
