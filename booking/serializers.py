import json
import re

from rest_framework import serializers

from accounts.serializers import AccountSummarySerializer

from .models import Booking, FeatureItem, Package

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?[\d\s-]{7,15}$")


class FeatureItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = FeatureItem
        fields = ["id", "name", "description", "image"]


class PackageSerializer(serializers.ModelSerializer):
    owner = AccountSummarySerializer(read_only=True)
    features = FeatureItemSerializer(many=True, read_only=True)
    contact_details = serializers.SerializerMethodField()

    class Meta:
        model = Package
        fields = [
            "id",
            "owner",
            "company_name",
            "package_amount",
            "contact_details",
            "features",
            "created_at",
        ]

    def get_contact_details(self, obj):
        return {
            "email": obj.contact_email,
            "phone": obj.contact_phone,
            "address": obj.contact_address,
        }


class BookingSerializer(serializers.ModelSerializer):
    user = AccountSummarySerializer(read_only=True)
    provider = AccountSummarySerializer(read_only=True)
    package_name = serializers.CharField(source="package.company_name", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "user",
            "package",
            "package_name",
            "provider",
            "wedding_date",
            "venue",
            "guest_count",
            "status",
            "created_at",
        ]
        read_only_fields = fields


# -------------------- Request payloads --------------------

class JSONStringField(serializers.Field):
    """
    Accepts either a decoded JSON value (application/json bodies) or a JSON
    string (multipart forms, where the front-end sends JSON.stringify()).
    """
    default_error_messages = {"invalid": "Invalid {name} format"}

    def to_internal_value(self, data):
        if isinstance(data, str):
            try:
                return json.loads(data)
            except ValueError:
                self.fail("invalid", name=self.field_name.replace("_", " "))
        return data

    def to_representation(self, value):
        return value


class PackageCreateSerializer(serializers.Serializer):
    company_name = serializers.CharField(max_length=200, error_messages={"blank": "Company name is required"})
    package_amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        error_messages={"min_value": "Package amount must be a positive number"},
    )
    contact_details = JSONStringField()
    features = JSONStringField()

    def validate_contact_details(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Invalid contact details format")
        email = (value.get("email") or "").strip()
        phone = (value.get("phone") or "").strip()
        address = (value.get("address") or "").strip()
        if not EMAIL_RE.match(email):
            raise serializers.ValidationError("Valid email is required")
        if phone and not PHONE_RE.match(phone):
            raise serializers.ValidationError("Invalid phone number format")
        if len(address) > 200:
            raise serializers.ValidationError("Address must be 200 characters or less")
        return {"email": email, "phone": phone, "address": address}

    def validate_features(self, value):
        if not isinstance(value, list) or len(value) < 1:
            raise serializers.ValidationError("At least one feature is required")
        cleaned = []
        for i, feature in enumerate(value, start=1):
            if not isinstance(feature, dict):
                raise serializers.ValidationError(f"Feature {i}: Invalid format")
            name = (feature.get("name") or "").strip()
            description = (feature.get("description") or "").strip()
            if not name:
                raise serializers.ValidationError(f"Feature {i}: Name is required")
            if not description:
                raise serializers.ValidationError(f"Feature {i}: Description is required")
            if len(name) > 100:
                raise serializers.ValidationError(f"Feature {i}: Name must be 100 characters or less")
            if len(description) > 500:
                raise serializers.ValidationError(f"Feature {i}: Description must be 500 characters or less")
            cleaned.append({"name": name, "description": description})
        return cleaned


class BookPackageSerializer(serializers.Serializer):
    package_id = serializers.IntegerField(min_value=1)
    wedding_date = serializers.DateField(error_messages={"invalid": "Valid wedding date is required"})
    venue = serializers.CharField(max_length=255, error_messages={"blank": "Venue is required"})
    guest_count = serializers.IntegerField(
        min_value=1,
        error_messages={"min_value": "Guest count must be a positive integer"},
    )


class CancelBookingSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField(min_value=1)


class UpdateBookingStatusSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField(min_value=1)
    status = serializers.ChoiceField(
        choices=list(Booking.MANAGER_STATUSES),
        error_messages={"invalid_choice": "Invalid status"},
    )
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True)
