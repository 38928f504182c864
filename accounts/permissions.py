from rest_framework.permissions import BasePermission

from .models import Account


class HasRole(BasePermission):
    """
    Logged-in accounts with a specific role only.
    Subclasses set `role`.
    """
    role = None

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if getattr(user, "role", None) != self.role:
            self.message = f"Access denied. {self.role} role required"
            return False
        return True


class IsCoupleUser(HasRole):
    role = Account.ROLE_USER


class IsEventManager(HasRole):
    role = Account.ROLE_ADMIN


class IsEventManagerOrReadOnly(BasePermission):
    """
    Read: anyone
    Write: event managers only
    """
    message = "Access denied. admin role required"

    def has_permission(self, request, view):
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return True
        user = request.user
        return bool(user and user.is_authenticated and user.role == Account.ROLE_ADMIN)
