# views/member_view.py
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.serializers.member_serializer import (
    MemberWriteSerializer,
    MemberReadSerializer,
    MemberSuggestionSerializer,
)
from tracker.services.member_service import MemberService

from .utils import extend_schema, extend_schema_view, OpenApiResponse, ErrorSerializer, get_backend, path_uuid, q_str, std_errors

DUPLICATE = {409: OpenApiResponse(ErrorSerializer, description="A member with this email already exists")}


# -----------------------------
# /api/tracker/members/  (list + create)
# -----------------------------
@extend_schema_view(
    get=extend_schema(
        tags=["Member"],
        summary="List all members, ordered by name",
        responses=OpenApiResponse(MemberReadSerializer(many=True)),
    ),
    post=extend_schema(
        tags=["Member"],
        summary="Add a member",
        request=MemberWriteSerializer,
        responses={201: OpenApiResponse(MemberReadSerializer), **std_errors(DUPLICATE)},
    ),
)
class MemberListCreateView(APIView):
    def get(self, request):
        members = MemberService(get_backend()).list_members()
        return Response(MemberReadSerializer(members, many=True).data)

    def post(self, request):
        """
        Create a member. A duplicate email is reported with 409 / code "duplicate".
        """
        ser = MemberWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        member = MemberService(get_backend()).create_member(ser.validated_data)
        return Response(MemberReadSerializer(member).data, status=status.HTTP_201_CREATED)


# -----------------------------
# /api/tracker/members/<id>/  (get + update + delete)
# -----------------------------
@extend_schema_view(
    get=extend_schema(
        tags=["Member"],
        summary="Get member details",
        parameters=[path_uuid("member_id", "Member ID")],
        responses={200: OpenApiResponse(MemberReadSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Member"],
        summary="Update member",
        parameters=[path_uuid("member_id", "Member ID")],
        request=MemberWriteSerializer,
        responses={200: OpenApiResponse(MemberReadSerializer), **std_errors(DUPLICATE)},
    ),
    patch=extend_schema(
        tags=["Member"],
        summary="Update member (partial)",
        parameters=[path_uuid("member_id", "Member ID")],
        request=MemberWriteSerializer,
        responses={200: OpenApiResponse(MemberReadSerializer), **std_errors(DUPLICATE)},
    ),
    delete=extend_schema(
        tags=["Member"],
        summary="Delete member",
        parameters=[path_uuid("member_id", "Member ID")],
        responses={204: OpenApiResponse(None, description="Deleted"), **std_errors()},
    ),
)
class MemberDetailView(APIView):
    def get(self, request, member_id):
        member = MemberService(get_backend()).get_member(member_id)
        return Response(MemberReadSerializer(member).data)

    def put(self, request, member_id):
        ser = MemberWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        # PUT replaces the record: omitted optional fields are cleared
        data = {"department": None, "role": None, **ser.validated_data}
        updated = MemberService(get_backend()).update_member(member_id, data)
        return Response(MemberReadSerializer(updated).data)

    def patch(self, request, member_id):
        ser = MemberWriteSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        updated = MemberService(get_backend()).update_member(member_id, ser.validated_data)
        return Response(MemberReadSerializer(updated).data)

    def delete(self, request, member_id):
        MemberService(get_backend()).delete_member(member_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


# -----------------------------
# /api/tracker/members/suggest/?q=
# -----------------------------
@extend_schema(
    tags=["Member"],
    summary="Autocomplete member names",
    parameters=[q_str("q", "Typed text; matched case-insensitively against member names")],
    responses={200: OpenApiResponse(MemberSuggestionSerializer)},
)
class MemberSuggestView(APIView):
    def get(self, request):
        query = request.query_params.get("q", "")
        suggestions = MemberService(get_backend()).suggest(query)
        return Response(MemberSuggestionSerializer(suggestions).data)
