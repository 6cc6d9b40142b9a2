# views/utils.py
"""
Shared tooling for the tracker API views.

- drf-spectacular helpers for APIView docs
- access to the process-wide TrackerBackend
"""
from django.apps import apps
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers

from tracker.repositories import TrackerBackend

# ---- Reusable error schema
ErrorSerializer = inline_serializer(
    name="Error",
    fields={
        "detail": serializers.CharField(),
        "code": serializers.CharField(required=False),
    }
)


def get_backend() -> TrackerBackend:
    return apps.get_app_config("tracker").backend

# ---- Param helpers

def path_uuid(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.UUID, OpenApiParameter.PATH, description=description)

def q_str(name: str, description: str, required: bool = False, enum=None):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description, enum=enum)


def query_or_none(request, name: str):
    """Query param value, with a blank value treated as absent."""
    value = request.query_params.get(name)
    if value is None or not value.strip():
        return None
    return value


def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
        401: OpenApiResponse(ErrorSerializer, description="Unauthorized"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
        503: OpenApiResponse(ErrorSerializer, description="Backend unavailable"),
    }
    if extra:
        errs.update(extra)
    return errs


def stage_param(request, name: str = "stage"):
    from rest_framework.exceptions import ValidationError
    from tracker.models import Stage

    value = query_or_none(request, name)
    if value is not None and value not in Stage.values:
        raise ValidationError({name: f"Unknown stage '{value}'"})
    return value


def order_param(request, choices, default: str = "updated"):
    from rest_framework.exceptions import ValidationError

    value = query_or_none(request, "order")
    if value is None:
        return default
    if value not in choices:
        raise ValidationError({"order": f"Unknown order '{value}', expected one of {', '.join(choices)}"})
    return value
