from rest_framework import serializers
from tracker.models import Member


class MemberWriteSerializer(serializers.Serializer):
    # no ModelSerializer here: the unique check on email belongs to the backend
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=255)
    department = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    role = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)


# read only
class MemberReadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Member
        fields = ["id", "name", "email", "department", "role", "created_at"]
        read_only_fields = fields


class MemberSuggestionSerializer(serializers.Serializer):
    query = serializers.CharField()
    matches = MemberReadSerializer(many=True)
    is_valid_member = serializers.BooleanField()
