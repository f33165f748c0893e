"""
Custom exception handler for consistent API responses
"""
from rest_framework.views import exception_handler
from rest_framework import status
import logging

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: 'Validation error',
    status.HTTP_401_UNAUTHORIZED: 'Authentication required',
    status.HTTP_403_FORBIDDEN: 'Permission denied',
    status.HTTP_404_NOT_FOUND: 'Resource not found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'Method not allowed',
}


def custom_exception_handler(exc, context):
    """
    Wrap DRF errors in the {code, msg, errors} envelope used by every view
    """
    response = exception_handler(exc, context)
    if response is None:
        return response

    if response.status_code >= 500:
        logger.error("API exception in %s: %s", context.get('view'), exc, exc_info=True)
        msg = 'Internal server error'
        errors = response.data
        request = context.get('request')
        user = getattr(request, 'user', None)
        if not getattr(user, 'is_staff', False):
            errors = {'detail': 'Internal server error'}
    else:
        logger.warning("API error %s in %s: %s", response.status_code, context.get('view'), exc)
        msg = STATUS_MESSAGES.get(response.status_code, 'An error occurred')
        errors = response.data

    response.data = {
        'code': response.status_code,
        'msg': msg,
        'errors': errors,
    }
    return response
