"""
booking_manager.py
------------------
Coordinates the booking lifecycle.

- create:  a couple books a package; status starts at Pending and the
           package owner is snapshotted as the provider.
- cancel:  the couple may cancel, but only while Pending.
- update:  the event manager may set Pending / Confirmed / Rejected from any
           current status, optionally attaching a note that is delivered to
           the couple as a message.
"""
import logging

from django.db import transaction
from django.db.models import Q

from messaging.services.message_gate import send_status_message

from ..models import Booking, Package
from .errors import BusinessRuleViolation, InvalidInput, NotFound, Unauthorized

logger = logging.getLogger(__name__)


class BookingManager:

    @transaction.atomic
    def create_booking(self, requester, package_id, wedding_date, venue, guest_count):
        """
        Book a package for the requesting couple.

        Args:
            requester: Requester of the couple making the booking
            package_id: Package PK
            wedding_date: date
            venue: non-empty string
            guest_count: positive int

        Raises:
            InvalidInput: guest_count below 1.
            NotFound: if the package does not exist.
        """
        if guest_count is None or guest_count < 1:
            raise InvalidInput("Guest count must be a positive integer", param="guest_count")

        package = Package.objects.filter(pk=package_id).first()
        if package is None:
            raise NotFound("Package not found", param="package_id")

        booking = Booking.objects.create(
            user_id=requester.account_id,
            package=package,
            provider_id=package.owner_id,
            wedding_date=wedding_date,
            venue=venue.strip(),
            guest_count=guest_count,
            status=Booking.PENDING,
        )
        logger.info("Booking %s created by account %s for package %s",
                    booking.pk, requester.account_id, package.pk)
        return booking

    @transaction.atomic
    def cancel_booking(self, requester, booking_id):
        """
        Cancel one of the requester's bookings. Only Pending bookings can be
        cancelled; anything else is a business-rule failure, not a no-op.
        """
        booking = Booking.objects.filter(pk=booking_id).first()
        if booking is None:
            raise NotFound("Booking not found", param="booking_id")

        if booking.user_id != requester.account_id:
            logger.warning("Account %s tried to cancel booking %s", requester.account_id, booking.pk)
            raise Unauthorized("Unauthorized to cancel this booking")

        if booking.status != Booking.PENDING:
            raise BusinessRuleViolation("Only pending bookings can be cancelled")

        booking.status = Booking.CANCELLED
        booking.save(update_fields=["status"])
        logger.info("Booking %s cancelled by account %s", booking.pk, requester.account_id)
        return booking

    @transaction.atomic
    def update_status(self, manager, booking_id, status, message=None):
        """
        Set a booking's status on behalf of an event manager.

        The booking must be one the manager provides or whose package they
        own. The new status is applied regardless of the current one. When
        `message` has text, it is sent to the couple as a status-change
        message.

        Returns:
            (booking, status_message or None)
        """
        if status not in Booking.MANAGER_STATUSES:
            raise InvalidInput("Invalid status", param="status")
        if not manager.is_manager:
            raise Unauthorized("Access denied. admin role required")

        booking = (
            Booking.objects.select_related("package")
            .filter(pk=booking_id)
            .filter(Q(provider_id=manager.account_id) | Q(package__owner_id=manager.account_id))
            .first()
        )
        if booking is None:
            raise NotFound("Booking not found", param="booking_id")

        booking.status = status
        booking.save(update_fields=["status"])
        logger.info("Booking %s status set to %s by account %s", booking.pk, status, manager.account_id)

        status_message = None
        text = (message or "").strip()
        if text:
            status_message = send_status_message(manager, booking, text)
        return booking, status_message
