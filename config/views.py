import logging

from django.http import JsonResponse
from django.utils import timezone
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe."""
    return JsonResponse({
        'status': 'ok',
        'timestamp': timezone.now().isoformat(),
    })


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)


def api_exception_handler(exc, context):
    """
    Project-wide DRF exception handler.

    DRF's own handler covers APIException, Http404 and PermissionDenied.
    Anything else is an unclassified backend failure: log it and answer
    with a 500 carrying the raw message.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get('view')
    logger.exception(
        "Unhandled error in %s: %s",
        view.__class__.__name__ if view else 'unknown view',
        exc,
    )
    return Response(
        {'error': str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
