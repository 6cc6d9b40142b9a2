# ============================================
# tracker/views/requirement_view.py
# ============================================
from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.models import Stage
from tracker.repositories.requirement_repository import ORDER_FIELDS
from tracker.serializers.requirement_serializer import (
    RequirementCreateSerializer,
    RequirementUpdateSerializer,
    RequirementOutputSerializer,
    RequirementUpdateOutputSerializer,
    StageHistoryOutputSerializer,
)
from tracker.services.requirement_service import RequirementService
from tracker.services.stage_filter import filter_by_stage
from tracker.utils.export import XLSX_CONTENT_TYPE, export_filename, requirements_to_xlsx_bytes

from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse,
    get_backend, order_param, path_uuid, q_str, stage_param, std_errors,
)

ORDER_CHOICES = list(ORDER_FIELDS)


# ==============================================================
# /api/tracker/requirements/  -> GET list + POST create
# ==============================================================
@extend_schema_view(
    get=extend_schema(
        tags=["Requirement"],
        summary="List requirements (newest first, optional stage filter)",
        parameters=[
            q_str("stage", "Only requirements in this stage", enum=Stage.values),
            q_str("order", "Sort by last update (default) or creation time", enum=ORDER_CHOICES),
        ],
        responses={200: OpenApiResponse(RequirementOutputSerializer(many=True)), **std_errors()},
    ),
    post=extend_schema(
        tags=["Requirement"],
        summary="Create a requirement (R&D project)",
        request=RequirementCreateSerializer,
        responses={201: OpenApiResponse(RequirementOutputSerializer), **std_errors()},
    ),
)
class RequirementListCreateView(APIView):

    def get(self, request):
        stage = stage_param(request)
        order = order_param(request, ORDER_CHOICES)
        requirements = RequirementService(get_backend()).list_requirements(order=order)
        data = RequirementOutputSerializer(filter_by_stage(requirements, stage), many=True).data
        return Response(data)

    def post(self, request):
        serializer = RequirementCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        requirement = RequirementService(get_backend()).create_requirement(**serializer.validated_data)

        return Response(RequirementOutputSerializer(requirement).data, status=status.HTTP_201_CREATED)


# ==============================================================
# /api/tracker/requirements/<id>/  -> GET + PUT/PATCH edit
# ==============================================================
@extend_schema_view(
    get=extend_schema(
        tags=["Requirement"],
        summary="Get requirement details",
        parameters=[path_uuid("requirement_id", "Requirement ID")],
        responses={200: OpenApiResponse(RequirementOutputSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Requirement"],
        summary="Edit description / stage (records stage transitions)",
        parameters=[path_uuid("requirement_id", "Requirement ID")],
        request=RequirementUpdateSerializer,
        responses={200: OpenApiResponse(RequirementUpdateOutputSerializer), **std_errors()},
    ),
    patch=extend_schema(
        tags=["Requirement"],
        summary="Partial edit: omitted fields keep their stored value",
        parameters=[path_uuid("requirement_id", "Requirement ID")],
        request=RequirementUpdateSerializer,
        responses={200: OpenApiResponse(RequirementUpdateOutputSerializer), **std_errors()},
    ),
)
class RequirementDetailView(APIView):

    def get(self, request, requirement_id):
        requirement = RequirementService(get_backend()).get_requirement(requirement_id)
        return Response(RequirementOutputSerializer(requirement).data)

    def put(self, request, requirement_id):
        """
        Both fields are required: the edit form always submits description
        and stage together.
        """
        return self._edit(request, requirement_id, partial=False)

    def patch(self, request, requirement_id):
        """Fields left out keep their stored value."""
        return self._edit(request, requirement_id, partial=True)

    def _edit(self, request, requirement_id, partial):
        serializer = RequirementUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        service = RequirementService(get_backend())
        changes = serializer.validated_data
        if partial:
            current = service.get_requirement(requirement_id)
            changes = {"description": current.description, "stage": current.stage, **changes}

        result = service.update_requirement(
            requirement_id=requirement_id,
            **changes
        )

        output = RequirementUpdateOutputSerializer({
            "requirement": result.requirement,
            "stage_changed": result.stage_changed,
            "history_recorded": result.history_recorded,
            "history": service.stage_history(requirement_id),
        })
        return Response(output.data)


# ==============================================================
# /api/tracker/requirements/<id>/history/  -> GET
# ==============================================================
@extend_schema(
    tags=["Requirement"],
    summary="Stage transitions of a requirement, oldest first",
    parameters=[path_uuid("requirement_id", "Requirement ID")],
    responses={200: OpenApiResponse(StageHistoryOutputSerializer(many=True)), **std_errors()},
)
class RequirementHistoryView(APIView):

    def get(self, request, requirement_id):
        history = RequirementService(get_backend()).stage_history(requirement_id)
        return Response(StageHistoryOutputSerializer(history, many=True).data)


# ==============================================================
# /api/tracker/requirements/export/  -> GET .xlsx
# ==============================================================
@extend_schema(
    tags=["Requirement"],
    summary="Download all requirements as an Excel workbook",
    responses={(200, XLSX_CONTENT_TYPE): OpenApiResponse(description="R&D Projects workbook"), **std_errors()},
)
class RequirementExportView(APIView):

    def get(self, request):
        requirements = RequirementService(get_backend()).list_requirements(order="created")
        response = HttpResponse(requirements_to_xlsx_bytes(requirements), content_type=XLSX_CONTENT_TYPE)
        response["Content-Disposition"] = f'attachment; filename="{export_filename()}"'
        return response
