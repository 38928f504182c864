# messaging/tests/test_thread_resolver.py
#
# The projection helpers work on any objects with the right attributes, so most
# of these use SimpleNamespace stand-ins instead of database rows.

from datetime import date, datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from accounts.context import Requester
from accounts.models import Account
from booking.models import Booking, Package
from messaging.models import Message
from messaging.services.thread_resolver import (
    build_contacts,
    filter_thread,
    list_thread,
    select_contact,
    sort_messages,
)

T0 = datetime(2027, 1, 1, 12, 0)


def person(pk, name):
    return SimpleNamespace(pk=pk, name=name, email=f"{name.lower()}@example.com")


def booking(pk, user, owner, provider=None, package_id=1, package_name="P1"):
    package = SimpleNamespace(pk=package_id, company_name=package_name, owner=owner)
    return SimpleNamespace(
        pk=pk, user=user, provider=provider, package=package, package_id=package_id,
        wedding_date=date(2027, 6, 12),
    )


def message(pk, sender_id, recipient_id, booking_id=None, package_id=None, at=T0):
    return SimpleNamespace(
        pk=pk, sender_id=sender_id, recipient_id=recipient_id,
        booking_id=booking_id, package_id=package_id, created_at=at,
    )


COUPLE = SimpleNamespace(is_manager=False)
MANAGER = SimpleNamespace(is_manager=True)


class ContactTests(SimpleTestCase):
    def setUp(self):
        self.m1 = person(1, "M1")
        self.m2 = person(2, "M2")
        self.u1 = person(10, "U1")

    def test_repeat_bookings_collapse_into_first_contact(self):
        contacts = build_contacts(COUPLE, [
            booking(100, self.u1, self.m1, provider=self.m1),
            booking(101, self.u1, self.m1, provider=self.m1),
        ])
        self.assertEqual(len(contacts), 1)
        self.assertEqual(contacts[0].key, 100)
        self.assertEqual(contacts[0].dedup_key, "1|P1")

    def test_different_packages_stay_separate(self):
        contacts = build_contacts(COUPLE, [
            booking(100, self.u1, self.m1, provider=self.m1, package_id=1, package_name="P1"),
            booking(101, self.u1, self.m1, provider=self.m1, package_id=2, package_name="P2"),
        ])
        self.assertEqual([c.key for c in contacts], [100, 101])

    def test_couple_sees_provider_even_after_ownership_change(self):
        contacts = build_contacts(COUPLE, [booking(100, self.u1, owner=self.m2, provider=self.m1)])
        self.assertEqual(contacts[0].counterparty_id, self.m1.pk)

    def test_couple_falls_back_to_owner_without_provider(self):
        contacts = build_contacts(COUPLE, [booking(100, self.u1, owner=self.m2)])
        self.assertEqual(contacts[0].counterparty_id, self.m2.pk)

    def test_manager_sees_the_couple(self):
        contacts = build_contacts(MANAGER, [booking(100, self.u1, self.m1, provider=self.m1)])
        self.assertEqual(contacts[0].counterparty_id, self.u1.pk)
        self.assertEqual(contacts[0].counterparty_name, "U1")

    def test_blank_package_name_uses_default(self):
        contacts = build_contacts(COUPLE, [booking(100, self.u1, self.m1, package_name="")])
        self.assertEqual(contacts[0].package_name, "Wedding Package")

    def test_select_contact(self):
        contacts = build_contacts(COUPLE, [
            booking(100, self.u1, self.m1, package_id=1, package_name="P1"),
            booking(200, self.u1, self.m1, package_id=2, package_name="P2"),
        ])
        self.assertEqual(select_contact(contacts, "200").key, 200)
        self.assertEqual(select_contact(contacts, 999).key, 100)
        self.assertEqual(select_contact(contacts).key, 100)
        self.assertIsNone(select_contact([], "100"))


class ThreadFilterTests(SimpleTestCase):
    def setUp(self):
        self.m1 = person(1, "M1")
        self.u1 = person(10, "U1")
        self.contact = build_contacts(COUPLE, [booking(100, self.u1, self.m1, provider=self.m1, package_id=1)])[0]

    def test_union_of_booking_package_and_counterparty(self):
        msgs = [
            message(1, 10, 1, booking_id=100, package_id=1),   # booking match
            message(2, 10, 3, package_id=1),                   # package only, other manager
            message(3, 1, 10),                                 # counterparty only
            message(4, 10, 3, package_id=9),                   # unrelated
        ]
        self.assertEqual([m.pk for m in filter_thread(msgs, self.contact)], [1, 2, 3])

    def test_no_contact_keeps_everything(self):
        msgs = [message(1, 10, 1), message(2, 10, 3)]
        self.assertEqual(len(filter_thread(msgs, None)), 2)

    def test_sort_is_stable_for_equal_timestamps(self):
        msgs = [
            message(3, 1, 10, at=T0 + timedelta(minutes=5)),
            message(1, 1, 10, at=T0),
            message(2, 1, 10, at=T0),
        ]
        self.assertEqual([m.pk for m in sort_messages(msgs)], [1, 2, 3])


class ListThreadTests(TestCase):
    def setUp(self):
        self.m1 = Account.objects.create_user(email="m1@example.com", password="x" * 8, name="M1", role="admin")
        self.u1 = Account.objects.create_user(email="u1@example.com", password="x" * 8, name="U1")
        self.u2 = Account.objects.create_user(email="u2@example.com", password="x" * 8, name="U2")
        self.p1 = Package.objects.create(
            owner=self.m1, company_name="P1", package_amount=Decimal("100.00"), contact_email="p1@example.com"
        )
        self.b1 = Booking.objects.create(
            user=self.u1, package=self.p1, provider=self.m1,
            wedding_date=date(2027, 6, 12), venue="Hall", guest_count=50,
        )
        self.b2 = Booking.objects.create(
            user=self.u1, package=self.p1, provider=self.m1,
            wedding_date=date(2027, 7, 3), venue="Barn", guest_count=60,
        )
        now = timezone.now()
        self.first = Message.objects.create(
            package=self.p1, booking=self.b1, sender=self.u1, recipient=self.m1, content="a", created_at=now
        )
        self.second = Message.objects.create(
            package=self.p1, booking=self.b2, sender=self.m1, recipient=self.u1, content="b",
            created_at=now + timedelta(seconds=1),
        )
        # A message between other people never shows up.
        Message.objects.create(sender=self.u2, recipient=self.m1, content="c", created_at=now)

    def test_couple_thread(self):
        thread = list_thread(Requester.for_account(self.u1))
        self.assertEqual([c.key for c in thread.contacts], [self.b1.pk])
        self.assertEqual(thread.selected.key, self.b1.pk)
        self.assertEqual([m.pk for m in thread.messages], [self.first.pk, self.second.pk])

    def test_manager_thread_per_couple(self):
        thread = list_thread(Requester.for_account(self.m1), contact_key=str(self.b1.pk))
        self.assertEqual(thread.selected.counterparty_id, self.u1.pk)
        self.assertEqual([m.pk for m in thread.messages], [self.first.pk, self.second.pk])
