# accounts/models.py
#
# Purpose:
# - Account: the single identity model for both sides of the marketplace.
#
# Design highlights:
# - Email is the login identifier and is unique; there is no username.
# - role is "user" (couples booking packages) or "admin" (event managers
#   publishing packages). Django's is_staff is unrelated and only gates /admin/.
# - Passwords go through Django's hashers (set_password / check_password).
#
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class AccountManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("An email address is required.")
        email = self.normalize_email(email)
        account = self.model(email=email, **extra_fields)
        account.set_password(password)
        account.save(using=self._db)
        return account

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", Account.ROLE_ADMIN)
        return self._create_user(email, password, **extra_fields)


class Account(AbstractUser):
    """
    A registered person: either a couple ("user") or an event manager ("admin").
    Accounts are never hard-deleted.
    """
    ROLE_USER = "user"
    ROLE_ADMIN = "admin"

    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Event manager"),
    ]

    username = None
    first_name = None
    last_name = None

    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects = AccountManager()

    def __str__(self):
        return f"{self.name} <{self.email}>"

    @property
    def is_manager(self):
        return self.role == self.ROLE_ADMIN
