"""
Admin tier configuration views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAdminUser

from apps.common.utils import success_response, error_response
from ..models import StatusTier
from ..serializers import (
    StatusTierSerializer, TierEditSerializer, TierValidationErrorSerializer
)
from ..services import TierAdminService


class TierValidateView(APIView):
    """Validate a tier edit without saving it"""
    permission_classes = [IsAdminUser]

    def post(self, request):
        serializer = TierEditSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        include_inactive = str(request.query_params.get('include_inactive', '')).lower() in ('1', 'true')
        errors = TierAdminService.validate_tier(serializer.to_candidate(), include_inactive=include_inactive)
        return success_response({
            'is_valid': not errors,
            'errors': TierValidationErrorSerializer(errors, many=True).data,
        })


class TierUpdateView(APIView):
    """Update a tier's configuration when it passes validation"""
    permission_classes = [IsAdminUser]

    def put(self, request, tier_key):
        try:
            tier = StatusTier.objects.get(tier_key=tier_key)
        except StatusTier.DoesNotExist:
            return error_response('Tier not found', status_code=404)

        # Fields left out keep their stored values
        serializer = TierEditSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        data = dict(serializer.validated_data)
        data.pop('tier_key', None)
        tier, errors = TierAdminService.update_tier(tier, data)
        if errors:
            return error_response(
                'Tier configuration is invalid',
                errors=[error.message for error in errors]
            )
        return success_response(StatusTierSerializer(tier).data, message='Tier updated')


class TierWarningsView(APIView):
    """Ladder-wide configuration warnings"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        warnings = TierAdminService.ladder_warnings()
        return success_response(TierValidationErrorSerializer(warnings, many=True).data)
