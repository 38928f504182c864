# messaging/models.py
#
# Purpose:
# - Messages between a couple and an event manager.
#
# Design:
# - Optional links to the package and/or booking the message is about.
#   Conversations ("threads") are not stored; they are recomputed from
#   bookings and messages on every read (messaging/services/thread_resolver.py).
# - Exactly one sender and one recipient.
# - Deleting is a hard delete and only the sender may do it.
#
from django.conf import settings
from django.db import models
from django.utils import timezone

from booking.models import Booking, Package


class Message(models.Model):
    package = models.ForeignKey(
        Package,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="messages",
    )
    booking = models.ForeignKey(
        Booking,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="messages",
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="received_messages",
    )
    content = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return f"Message #{self.pk} from {self.sender_id} to {self.recipient_id} at {self.created_at:%Y-%m-%d %H:%M}"

    def other_party_id(self, account_id):
        """The participant that is not `account_id` (the reply target)."""
        return self.recipient_id if self.sender_id == account_id else self.sender_id
