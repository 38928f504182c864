# accounts/views.py
#
# Purpose:
# - JSON auth endpoints for the React client: register, login, logout.
# - Profile update for couples (role "user").
#
# Notes:
# - Sessions carry the identity; register/login skip DRF authentication so a
#   stale session cookie without a CSRF token cannot block signing in again.
#
import logging

from django.contrib.auth import authenticate, login, logout
from django.db import transaction
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Account
from .permissions import IsCoupleUser
from .serializers import AccountSerializer, LoginSerializer, ProfileSerializer, RegisterSerializer

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    """
    POST /api/register
    {
      "name": "Jane Doe",
      "email": "jane@example.com",
      "password": "secret1",
      "role": "user"
    }
    Creates the Account and logs it in (session).
    """
    authentication_classes = []

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        with transaction.atomic():
            account = Account.objects.create_user(
                email=data["email"],
                password=data["password"],
                name=data["name"],
                role=data["role"],
            )
        login(request, account, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("Account %s registered with role %s", account.pk, account.role)

        return Response(
            {
                "message": "Registration successful",
                "redirect": f"/auth?section=login&role={account.role}",
                "user": AccountSerializer(account).data,
            },
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """
    POST /api/login
    { "email": "jane@example.com", "password": "secret1" }
    """
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        account = authenticate(request, email=data["email"], password=data["password"])
        if account is None:
            logger.warning("Failed login for %s", data["email"])
            return Response(
                {"detail": "Invalid credentials", "param": "email"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        login(request, account)
        redirect = "/manager-dashboard" if account.is_manager else "/user-dashboard"
        return Response(
            {"message": "Login successful", "redirect": redirect, "user": AccountSerializer(account).data}
        )


class LogoutView(APIView):
    """
    POST /api/logout
    """
    def post(self, request):
        logout(request)
        return Response({"message": "Logout successful"})


class UpdateProfileView(APIView):
    """
    POST /api/update-profile
    { "name": "Jane Roe", "email": "jane.roe@example.com" }
    """
    permission_classes = [IsCoupleUser]

    def post(self, request):
        account = request.user
        serializer = ProfileSerializer(data=request.data, context={"account": account})
        serializer.is_valid(raise_exception=True)

        account.name = serializer.validated_data["name"]
        account.email = serializer.validated_data["email"]
        account.save(update_fields=["name", "email"])
        logger.info("Account %s updated profile", account.pk)

        return Response({"message": "Profile updated successfully", "user": AccountSerializer(account).data})
