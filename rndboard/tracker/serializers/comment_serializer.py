# ============================================
# tracker/serializers/comment_serializer.py
# ============================================
from rest_framework import serializers
from tracker.models import RequirementComment


class CommentCreateSerializer(serializers.Serializer):
    author_name = serializers.CharField(max_length=100)
    content = serializers.CharField(max_length=1000)


class CommentOutputSerializer(serializers.ModelSerializer):
    requirement_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = RequirementComment
        fields = ['id', 'requirement_id', 'author_name', 'content', 'created_at']
        read_only_fields = fields
