"""
thread_resolver.py
------------------
Conversations are a read-time projection: nothing here is stored or cached.

Contacts come from the viewer's bookings. A contact is one (counterparty,
package name) pair, keyed by the first booking that produced it, so a couple
with two bookings of the same package from the same manager sees a single
contact whose thread is anchored on the first booking.

The thread for a contact is every message (sorted oldest first, ties kept in
load order) that matches the contact's booking OR its package OR has the
counterparty as sender/recipient.
"""
from dataclasses import dataclass, field
from datetime import date
from operator import attrgetter
from typing import List, Optional

from django.db.models import Q

from booking.models import Booking

from ..models import Message

DEFAULT_PACKAGE_NAME = "Wedding Package"


@dataclass(frozen=True)
class Contact:
    key: int
    booking_id: int
    package_id: Optional[int]
    package_name: str
    counterparty_id: int
    counterparty_name: str
    counterparty_email: str
    wedding_date: Optional[date] = None

    @property
    def dedup_key(self) -> str:
        return f"{self.counterparty_id}|{self.package_name}"


@dataclass
class Thread:
    contacts: List[Contact] = field(default_factory=list)
    selected: Optional[Contact] = None
    messages: List[Message] = field(default_factory=list)


def _counterparty(viewer, booking):
    if viewer.is_manager:
        return booking.user
    return booking.provider or booking.package.owner


def build_contacts(viewer, bookings) -> List[Contact]:
    seen = set()
    contacts = []
    for booking in bookings:
        counterparty = _counterparty(viewer, booking)
        if counterparty is None:
            continue
        contact = Contact(
            key=booking.pk,
            booking_id=booking.pk,
            package_id=booking.package_id,
            package_name=booking.package.company_name or DEFAULT_PACKAGE_NAME,
            counterparty_id=counterparty.pk,
            counterparty_name=counterparty.name,
            counterparty_email=counterparty.email,
            wedding_date=booking.wedding_date,
        )
        if contact.dedup_key in seen:
            continue
        seen.add(contact.dedup_key)
        contacts.append(contact)
    return contacts


def sort_messages(messages) -> List[Message]:
    # sorted() is stable, equal timestamps keep their incoming order
    return sorted(messages, key=attrgetter("created_at"))


def filter_thread(messages, contact: Optional[Contact]) -> List[Message]:
    if contact is None:
        return list(messages)
    return [
        m for m in messages
        if m.booking_id == contact.booking_id
        or (contact.package_id is not None and m.package_id == contact.package_id)
        or contact.counterparty_id in (m.sender_id, m.recipient_id)
    ]


def select_contact(contacts, key=None) -> Optional[Contact]:
    """The contact with `key`; unknown or missing keys fall back to the first contact."""
    if not contacts:
        return None
    if key is not None:
        for contact in contacts:
            if str(contact.key) == str(key):
                return contact
    return contacts[0]


def visible_bookings(requester):
    """
    Couples see their own bookings. Managers see bookings they provide plus
    bookings of packages they own.
    """
    qs = Booking.objects.select_related("package", "package__owner", "user", "provider")
    if requester.is_manager:
        qs = qs.filter(Q(provider_id=requester.account_id) | Q(package__owner_id=requester.account_id))
    else:
        qs = qs.filter(user_id=requester.account_id)
    return qs.order_by("id")


def visible_messages(requester):
    return (
        Message.objects.select_related("sender", "recipient", "package", "booking")
        .filter(Q(sender_id=requester.account_id) | Q(recipient_id=requester.account_id))
        .order_by("id")
    )


def list_thread(requester, contact_key=None) -> Thread:
    contacts = build_contacts(requester, visible_bookings(requester))
    selected = select_contact(contacts, contact_key)
    messages = filter_thread(sort_messages(visible_messages(requester)), selected)
    return Thread(contacts=contacts, selected=selected, messages=messages)
