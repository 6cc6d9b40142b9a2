# ============================================
# tracker/views/comment_view.py
# ============================================
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from tracker.serializers.comment_serializer import (
    CommentCreateSerializer,
    CommentOutputSerializer
)
from tracker.services.comment_service import CommentService

from .utils import extend_schema, extend_schema_view, OpenApiResponse, get_backend, path_uuid, std_errors


@extend_schema_view(
    get=extend_schema(
        tags=["Comment"],
        summary="List comments of a requirement, oldest first",
        parameters=[path_uuid("requirement_id", "Requirement ID")],
        responses={200: OpenApiResponse(CommentOutputSerializer(many=True)), **std_errors()},
    ),
    post=extend_schema(
        tags=["Comment"],
        summary="Add a comment to a requirement",
        parameters=[path_uuid("requirement_id", "Requirement ID")],
        request=CommentCreateSerializer,
        responses={201: OpenApiResponse(CommentOutputSerializer), **std_errors()},
    ),
)
class CommentListCreateView(APIView):
    """
    GET: List comments for a requirement
    POST: Create a comment

    Path params:
    - requirement_id: UUID

    Request body (POST):
    - author_name: string (required, max 100)
    - content: string (required, max 1000)
    """

    def get(self, request, requirement_id):
        comments = CommentService(get_backend()).list_comments(requirement_id)
        return Response(CommentOutputSerializer(comments, many=True).data)

    def post(self, request, requirement_id):
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = CommentService(get_backend()).add_comment(
            requirement_id=requirement_id,
            **serializer.validated_data
        )

        return Response(CommentOutputSerializer(comment).data, status=status.HTTP_201_CREATED)
