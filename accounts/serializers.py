from rest_framework import serializers

from .models import Account


class AccountSerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ["id", "name", "email", "role"]


class AccountSummarySerializer(serializers.ModelSerializer):
    """Name/email only, used when embedding the other party of a booking or message."""
    class Meta:
        model = Account
        fields = ["id", "name", "email"]


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150, error_messages={"blank": "Name is required"})
    email = serializers.EmailField(error_messages={"invalid": "Valid email is required"})
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        trim_whitespace=False,
        error_messages={"min_length": "Password must be at least 6 characters"},
    )
    role = serializers.ChoiceField(
        choices=[Account.ROLE_USER, Account.ROLE_ADMIN],
        error_messages={"invalid_choice": "Role must be user or admin"},
    )

    def validate_email(self, value):
        value = Account.objects.normalize_email(value)
        if Account.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User already exists")
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"invalid": "Valid email is required"})
    password = serializers.CharField(trim_whitespace=False, error_messages={"blank": "Password is required"})

    def validate_email(self, value):
        # Same normalization as AccountManager, so login matches the stored address.
        return Account.objects.normalize_email(value)


class ProfileSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150, error_messages={"blank": "Name is required"})
    email = serializers.EmailField(error_messages={"invalid": "Valid email is required"})

    def validate_email(self, value):
        value = Account.objects.normalize_email(value)
        account = self.context["account"]
        if Account.objects.filter(email__iexact=value).exclude(pk=account.pk).exists():
            raise serializers.ValidationError("Email already in use")
        return value
