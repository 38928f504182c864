"""
recipient_resolver.py
---------------------
Works out who a couple's message goes to, and checks they may talk about it.

A message can point at a package, at one of the requester's bookings, or at
both. The result is one of three variants, and each variant knows its own
recipient:

- ViaPackage  -> the package owner
- ViaBooking  -> the booking's provider (owner at booking time), falling back
                 to the package owner when the provider is unset
- ViaBoth     -> same as ViaBooking; the booking wins because its provider is
                 the historical counterparty even if the package changed hands

Booking lookups are always scoped to the requester as the booking's user.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..models import Booking, Package
from .errors import BusinessRuleViolation, NotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViaPackage:
    package: Package

    @property
    def recipient_id(self):
        return self.package.owner_id

    @property
    def package_id(self):
        return self.package.pk

    @property
    def booking_id(self):
        return None


@dataclass(frozen=True)
class ViaBooking:
    booking: Booking

    @property
    def recipient_id(self):
        return self.booking.manager_id

    @property
    def package_id(self):
        return self.booking.package_id

    @property
    def booking_id(self):
        return self.booking.pk


@dataclass(frozen=True)
class ViaBoth:
    package: Package
    booking: Booking

    @property
    def recipient_id(self):
        return self.booking.manager_id

    @property
    def package_id(self):
        return self.package.pk

    @property
    def booking_id(self):
        return self.booking.pk


Resolution = Union[ViaPackage, ViaBooking, ViaBoth]


def _load_package(package_id) -> Package:
    package = Package.objects.filter(pk=package_id).first()
    if package is None:
        raise NotFound("Package not found", param="package_id")
    return package


def _load_own_booking(requester, booking_id) -> Booking:
    booking = (
        Booking.objects.select_related("package")
        .filter(pk=booking_id, user_id=requester.account_id)
        .first()
    )
    if booking is None:
        raise NotFound("Booking not found or unauthorized", param="booking_id")
    return booking


def resolve_recipient(requester, package_id: Optional[int] = None, booking_id: Optional[int] = None) -> Resolution:
    """
    Resolve the package/booking a message is about and who receives it.

    Raises:
        NotFound: package missing, or booking missing / not the requester's.
        BusinessRuleViolation: booking belongs to another package, or nothing
            to resolve a recipient from.
    """
    package = _load_package(package_id) if package_id is not None else None
    booking = _load_own_booking(requester, booking_id) if booking_id is not None else None

    if package is not None and booking is not None:
        if booking.package_id != package.pk:
            raise BusinessRuleViolation("Booking does not belong to the selected package", param="booking_id")
        resolution = ViaBoth(package=package, booking=booking)
    elif booking is not None:
        resolution = ViaBooking(booking=booking)
    elif package is not None:
        resolution = ViaPackage(package=package)
    else:
        resolution = None

    if resolution is None or resolution.recipient_id is None:
        logger.warning("No recipient for account %s (package=%s, booking=%s)",
                       requester.account_id, package_id, booking_id)
        raise BusinessRuleViolation("Could not resolve an event manager recipient")
    return resolution
