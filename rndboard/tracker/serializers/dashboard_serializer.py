from rest_framework import serializers

from .requirement_serializer import RequirementOutputSerializer


class StageCountSerializer(serializers.Serializer):
    stage = serializers.CharField()
    count = serializers.IntegerField()


class RequirementStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    unique_assignees = serializers.IntegerField()
    high_priority = serializers.IntegerField()
    by_stage = StageCountSerializer(many=True)


class DashboardSerializer(serializers.Serializer):
    stats = RequirementStatsSerializer()
    distribution = StageCountSerializer(many=True)
    selected_stage = serializers.CharField(allow_null=True)
    requirements = RequirementOutputSerializer(many=True)
