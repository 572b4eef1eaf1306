from rest_framework import serializers


class ValidateRequestSerializer(serializers.Serializer):
    channelId = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=64)


class TestSmsResultSerializer(serializers.Serializer):
    phoneNumber = serializers.CharField(source="recipient")
    result = serializers.SerializerMethodField()

    def get_result(self, obj) -> dict:
        return {
            "success": obj.success,
            "messageSid": obj.provider_message_id,
            "status": obj.provider_status,
            "error": obj.error_detail,
        }


class ValidationResponseSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    message = serializers.CharField()
    accountName = serializers.CharField(source="account_name", allow_null=True)
    accountStatus = serializers.CharField(source="account_status", allow_null=True)
    fromNumberVerified = serializers.BooleanField(source="from_number_verified", allow_null=True)
    testSmsSent = serializers.BooleanField(source="test_sms_sent")
    testSmsResults = TestSmsResultSerializer(source="test_results", many=True)


class ValidationErrorSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    message = serializers.CharField()
