from rest_framework import serializers

from accounts.serializers import AccountSummarySerializer

from .models import Message


class MessageSerializer(serializers.ModelSerializer):
    sender = AccountSummarySerializer(read_only=True)
    recipient = AccountSummarySerializer(read_only=True)
    package_name = serializers.CharField(source="package.company_name", read_only=True, default=None)

    class Meta:
        model = Message
        fields = [
            "id",
            "package",
            "package_name",
            "booking",
            "sender",
            "recipient",
            "content",
            "created_at",
        ]


class ContactSerializer(serializers.Serializer):
    key = serializers.IntegerField()
    booking_id = serializers.IntegerField()
    package_id = serializers.IntegerField(allow_null=True)
    package_name = serializers.CharField()
    counterparty_id = serializers.IntegerField()
    counterparty_name = serializers.CharField()
    counterparty_email = serializers.CharField()
    wedding_date = serializers.DateField(allow_null=True)


class ThreadSerializer(serializers.Serializer):
    contacts = ContactSerializer(many=True)
    selected = ContactSerializer(allow_null=True)
    messages = MessageSerializer(many=True)


# -------------------- Request payloads --------------------
# Content is allowed through blank here; the message gate rejects empty text
# as a business rule so service callers and HTTP callers get the same error.

class SendMessageSerializer(serializers.Serializer):
    package_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    booking_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    content = serializers.CharField(allow_blank=True)


class ReplyMessageSerializer(serializers.Serializer):
    message_id = serializers.IntegerField(min_value=1)
    content = serializers.CharField(allow_blank=True)


class DeleteMessageSerializer(serializers.Serializer):
    message_id = serializers.IntegerField(min_value=1)
