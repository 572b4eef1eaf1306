import logging

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ValidateRequestSerializer, ValidationErrorSerializer, ValidationResponseSerializer
from .validation import validate_channel

logger = logging.getLogger(__name__)


class ValidateCredentialsView(APIView):
    """
    POST /api/v1/order-sms/validate/  {"channelId": "<optional>"}
    Checks the saved Twilio credentials and texts the admin numbers a test SMS.
    """
    permission_classes = [permissions.IsAdminUser]

    @extend_schema(
        request=ValidateRequestSerializer,
        responses={
            200: ValidationResponseSerializer,
            400: ValidationErrorSerializer,
            401: ValidationErrorSerializer,
            500: ValidationErrorSerializer,
        },
    )
    def post(self, request):
        ser = ValidateRequestSerializer(data=request.data)
        if not ser.is_valid():
            field, errors = next(iter(ser.errors.items()))
            return Response({"valid": False, "message": f"{field}: {errors[0]}"},
                            status=status.HTTP_400_BAD_REQUEST)
        channel_id = ser.validated_data.get("channelId") or None
        logger.info("Twilio validation request received channel=%s", channel_id)

        try:
            result = validate_channel(channel_id)
        except Exception as e:
            logger.exception("Twilio validation failed channel=%s", channel_id)
            return Response({"valid": False, "message": f"Validation failed: {e}"},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if not result.valid:
            return Response({"valid": False, "message": result.message}, status=result.http_status)
        return Response(ValidationResponseSerializer(result).data)
