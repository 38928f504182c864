"""
message_gate.py
---------------
Who may send, reply to, or delete a message.

- send:    a couple starts a message about a package and/or one of their
           bookings; the recipient comes from booking.services.recipient_resolver.
- reply:   either participant of the original message may reply; the reply
           goes to the other participant and keeps the original's package
           and booking links.
- delete:  only the sender, and it is permanent.
- status:  the note a manager attaches to a booking status update; goes
           straight from the manager to the booking's couple.
"""
import logging

from django.db import transaction

from booking.services.errors import BusinessRuleViolation, NotFound, Unauthorized
from booking.services.recipient_resolver import resolve_recipient

from ..models import Message

logger = logging.getLogger(__name__)


def _clean_content(content):
    text = (content or "").strip()
    if not text:
        raise BusinessRuleViolation("Message content is required", param="content")
    return text


@transaction.atomic
def send_message(requester, content, package_id=None, booking_id=None):
    text = _clean_content(content)
    resolution = resolve_recipient(requester, package_id=package_id, booking_id=booking_id)

    message = Message.objects.create(
        package_id=resolution.package_id,
        booking_id=resolution.booking_id,
        sender_id=requester.account_id,
        recipient_id=resolution.recipient_id,
        content=text,
    )
    logger.info("Message %s sent by account %s to account %s (%s)",
                message.pk, requester.account_id, message.recipient_id, type(resolution).__name__)
    return message


@transaction.atomic
def reply_message(requester, message_id, content):
    text = _clean_content(content)

    original = Message.objects.filter(pk=message_id).first()
    if original is None:
        raise NotFound("Original message not found", param="message_id")

    if requester.account_id not in (original.sender_id, original.recipient_id):
        logger.warning("Unauthorized reply attempt by account %s on message %s", requester.account_id, original.pk)
        raise Unauthorized("Unauthorized to reply to this message")

    reply = Message.objects.create(
        package_id=original.package_id,
        booking_id=original.booking_id,
        sender_id=requester.account_id,
        recipient_id=original.other_party_id(requester.account_id),
        content=text,
    )
    logger.info("Reply %s to message %s sent by account %s", reply.pk, original.pk, requester.account_id)
    return reply


@transaction.atomic
def delete_message(requester, message_id):
    message = Message.objects.filter(pk=message_id).first()
    if message is None:
        raise NotFound("Message not found", param="message_id")

    if message.sender_id != requester.account_id:
        logger.warning("Unauthorized delete attempt by account %s on message %s", requester.account_id, message.pk)
        raise Unauthorized("Unauthorized to delete this message")

    message.delete()
    logger.info("Message %s deleted by account %s", message_id, requester.account_id)


def send_status_message(manager, booking, content):
    """Manager -> couple note attached to a booking status update."""
    message = Message.objects.create(
        package_id=booking.package_id,
        booking_id=booking.pk,
        sender_id=manager.account_id,
        recipient_id=booking.user_id,
        content=_clean_content(content),
    )
    logger.info("Status update message %s sent for booking %s", message.pk, booking.pk)
    return message
