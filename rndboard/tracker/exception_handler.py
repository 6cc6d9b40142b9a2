import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from tracker.exceptions import BackendError, DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


def _validation_detail(exc: DjangoValidationError):
    if hasattr(exc, "error_dict"):
        return {field: [str(m) for m in msgs] for field, msgs in exc.message_dict.items()}
    return {"detail": exc.messages[0] if len(exc.messages) == 1 else exc.messages}


def tracker_exception_handler(exc, context):
    """
    Map tracker / Django errors to API responses, then fall back to DRF.
    """
    if isinstance(exc, DuplicateError):
        return Response(
            {"detail": exc.message, "code": exc.code},
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, BackendError):
        view = context.get("view")
        logger.error(
            "[api] backend failure in %s (%s.%s): %s",
            type(view).__name__ if view else "?", exc.table, exc.operation, exc.__cause__ or exc,
        )
        return Response(
            {"detail": BackendError.default_message, "code": exc.code},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if isinstance(exc, NotFoundError):
        return Response(
            {"detail": exc.message, "code": exc.code},
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, DjangoValidationError):
        return Response(_validation_detail(exc), status=status.HTTP_400_BAD_REQUEST)

    return exception_handler(exc, context)
