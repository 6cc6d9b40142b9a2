# ============================================
# tracker/serializers/requirement_serializer.py
# ============================================
from rest_framework import serializers
from tracker.models import Priority, ProjectStageHistory, Requirement, Stage


class RequirementCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=500)
    stage = serializers.ChoiceField(choices=Stage.choices)
    priority = serializers.ChoiceField(
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    assignee = serializers.CharField(max_length=100)
    due_date = serializers.DateField()


class RequirementUpdateSerializer(serializers.Serializer):
    description = serializers.CharField(max_length=500)
    stage = serializers.ChoiceField(choices=Stage.choices)


class RequirementOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = Requirement
        fields = [
            'id', 'title', 'description', 'stage', 'priority',
            'assignee', 'due_date', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class StageHistoryOutputSerializer(serializers.ModelSerializer):
    requirement_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = ProjectStageHistory
        fields = ['id', 'requirement_id', 'stage', 'changed_at']
        read_only_fields = fields


class RequirementUpdateOutputSerializer(serializers.Serializer):
    """Canonical state after an edit"""
    requirement = RequirementOutputSerializer()
    stage_changed = serializers.BooleanField()
    history_recorded = serializers.BooleanField()
    history = StageHistoryOutputSerializer(many=True)
