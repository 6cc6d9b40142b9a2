# views/dashboard_view.py
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.models import Stage
from tracker.selectors.dashboard_selector import get_dashboard
from tracker.serializers.dashboard_serializer import DashboardSerializer

from .utils import extend_schema, OpenApiResponse, get_backend, q_str, stage_param, std_errors


@extend_schema(
    tags=["Dashboard"],
    summary="Stats, stage distribution and the (optionally stage-filtered) requirement list",
    parameters=[
        q_str("stage", "Currently selected stage", enum=Stage.values),
        q_str("select", "Stage clicked on the chart: selects it, or clears it when already selected", enum=Stage.values),
    ],
    responses={200: OpenApiResponse(DashboardSerializer), **std_errors()},
)
class DashboardView(APIView):
    def get(self, request):
        dashboard = get_dashboard(
            get_backend(),
            stage=stage_param(request, "stage"),
            select=stage_param(request, "select"),
        )
        return Response(DashboardSerializer(dashboard).data)
