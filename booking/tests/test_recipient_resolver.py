# booking/tests/test_recipient_resolver.py

from datetime import date
from decimal import Decimal

from django.test import TestCase

from accounts.context import Requester
from accounts.models import Account
from booking.models import Booking, Package
from booking.services.errors import BusinessRuleViolation, NotFound
from booking.services.recipient_resolver import ViaBooking, ViaBoth, ViaPackage, resolve_recipient


def make_package(owner, name="P1"):
    return Package.objects.create(
        owner=owner,
        company_name=name,
        package_amount=Decimal("1000.00"),
        contact_email="contact@example.com",
    )


class ResolveRecipientTests(TestCase):
    def setUp(self):
        self.m1 = Account.objects.create_user(email="m1@example.com", password="x" * 8, name="M1", role="admin")
        self.m2 = Account.objects.create_user(email="m2@example.com", password="x" * 8, name="M2", role="admin")
        self.u1 = Account.objects.create_user(email="u1@example.com", password="x" * 8, name="U1")
        self.u2 = Account.objects.create_user(email="u2@example.com", password="x" * 8, name="U2")

        self.p1 = make_package(self.m1, "P1")
        self.p2 = make_package(self.m2, "P2")
        self.b1 = Booking.objects.create(
            user=self.u1, package=self.p1, provider=self.m1,
            wedding_date=date(2027, 6, 12), venue="Rose Hall", guest_count=100,
        )
        self.requester = Requester.for_account(self.u1)

    def test_package_only_routes_to_owner(self):
        resolution = resolve_recipient(self.requester, package_id=self.p1.pk)
        self.assertIsInstance(resolution, ViaPackage)
        self.assertEqual(resolution.recipient_id, self.m1.pk)
        self.assertEqual(resolution.package_id, self.p1.pk)
        self.assertIsNone(resolution.booking_id)

    def test_booking_only_routes_to_provider(self):
        resolution = resolve_recipient(self.requester, booking_id=self.b1.pk)
        self.assertIsInstance(resolution, ViaBooking)
        self.assertEqual(resolution.recipient_id, self.m1.pk)
        self.assertEqual(resolution.package_id, self.p1.pk)
        self.assertEqual(resolution.booking_id, self.b1.pk)

    def test_booking_without_provider_falls_back_to_package_owner(self):
        self.b1.provider = None
        self.b1.save(update_fields=["provider"])

        resolution = resolve_recipient(self.requester, booking_id=self.b1.pk)
        self.assertEqual(resolution.recipient_id, self.m1.pk)

    def test_booking_provider_wins_over_current_package_owner(self):
        # The package changes hands after the booking was made.
        self.p1.owner = self.m2
        self.p1.save(update_fields=["owner"])

        resolution = resolve_recipient(self.requester, package_id=self.p1.pk, booking_id=self.b1.pk)
        self.assertIsInstance(resolution, ViaBoth)
        self.assertEqual(resolution.recipient_id, self.m1.pk)
        self.assertEqual(resolution.package_id, self.p1.pk)
        self.assertEqual(resolution.booking_id, self.b1.pk)

    def test_booking_for_another_package_is_a_mismatch(self):
        with self.assertRaises(BusinessRuleViolation) as ctx:
            resolve_recipient(self.requester, package_id=self.p2.pk, booking_id=self.b1.pk)
        self.assertIn("does not belong", str(ctx.exception))

    def test_someone_elses_booking_is_not_found(self):
        with self.assertRaises(NotFound) as ctx:
            resolve_recipient(Requester.for_account(self.u2), booking_id=self.b1.pk)
        self.assertEqual(ctx.exception.message, "Booking not found or unauthorized")

    def test_missing_package_is_not_found(self):
        with self.assertRaises(NotFound):
            resolve_recipient(self.requester, package_id=self.p2.pk + 100)

    def test_nothing_to_resolve_from(self):
        with self.assertRaises(BusinessRuleViolation) as ctx:
            resolve_recipient(self.requester)
        self.assertIn("Could not resolve", str(ctx.exception))
