# booking/models.py
#
# Purpose:
# - Catalog and booking models for the wedding marketplace.
#
# Design highlights:
# - Package: an event manager's offering (company, price, contact details)
#   with an ordered list of FeatureItems.
# - FeatureItem: name/description plus an optional image reference. The
#   reference is an opaque URL handed back by the upload store.
# - Booking:
#   • Records the requesting user, the package, wedding date, venue, guests
#   • provider is copied from package.owner when the booking is created and
#     is never re-synced, so messages keep routing to the manager who took
#     the booking even if the package changes hands later
#   • status: Pending -> Confirmed / Rejected (manager) or Cancelled (user)
#
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


# -------------------------
# Package (manager offering)
# -------------------------
class Package(models.Model):
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="packages",
    )
    company_name = models.CharField(max_length=200)
    package_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    contact_email = models.EmailField()
    contact_phone = models.CharField(max_length=20, blank=True)
    contact_address = models.CharField(max_length=200, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.company_name} (${self.package_amount})"


class FeatureItem(models.Model):
    """
    One line of a package ("Photography", "Catering", ...), kept in the order
    the manager entered them.
    """
    package = models.ForeignKey(Package, on_delete=models.CASCADE, related_name="features")
    position = models.PositiveIntegerField(default=0)
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500)
    image = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["package_id", "position"]

    def __str__(self):
        return self.name


# -------------------------
# Booking record
# -------------------------
class Booking(models.Model):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (CONFIRMED, "Confirmed"),
        (REJECTED, "Rejected"),
        (CANCELLED, "Cancelled"),
    ]

    # Statuses a manager may set; Cancelled belongs to the user.
    MANAGER_STATUSES = (PENDING, CONFIRMED, REJECTED)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    package = models.ForeignKey(Package, on_delete=models.CASCADE, related_name="bookings")
    provider = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="provided_bookings",
        help_text="Package owner at booking time. Never re-synced.",
    )
    wedding_date = models.DateField()
    venue = models.CharField(max_length=255)
    guest_count = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    status = models.CharField(
        max_length=10,
        choices=STATUS_CHOICES,
        default=PENDING,
        help_text="Booking lifecycle status",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.user} → {self.package.company_name} on {self.wedding_date}"

    @property
    def manager_id(self):
        """Who this booking's messages route to: the provider snapshot, else the package owner."""
        return self.provider_id or self.package.owner_id
