"""
seed_marketplace.py
-------------------
Seeds a demo event manager, a demo couple and a few wedding packages so the
React client has something to show. Safe to run repeatedly: accounts are
matched by email and packages by (owner, company name).

Usage:
    python manage.py seed_marketplace
    python manage.py seed_marketplace --password secret99
"""

from decimal import Decimal
from django.core.management.base import BaseCommand
from django.db import transaction

from accounts.models import Account
from booking.models import FeatureItem, Package


MANAGER = {"email": "manager@example.com", "name": "Evelyn Events", "role": Account.ROLE_ADMIN}
COUPLE = {"email": "couple@example.com", "name": "Sam & Alex", "role": Account.ROLE_USER}

CATALOG = [
    {
        "company_name": "Golden Hour Weddings",
        "package_amount": Decimal("4800.00"),
        "contact": {"email": "hello@goldenhour.example", "phone": "+1 555 0100", "address": "12 Orchard Lane"},
        "features": [
            ("Photography", "Eight hours of coverage with two photographers."),
            ("Album", "Forty-page lay-flat album."),
        ],
    },
    {
        "company_name": "Rose Hall Catering",
        "package_amount": Decimal("7250.00"),
        "contact": {"email": "events@rosehall.example", "phone": "", "address": ""},
        "features": [
            ("Three-course dinner", "Plated dinner for up to 150 guests."),
            ("Cake", "Three-tier cake, flavour of your choice."),
            ("Bar service", "Five-hour open bar with two bartenders."),
        ],
    },
]


class Command(BaseCommand):
    help = "Seed demo accounts and wedding packages."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            default="password123",
            help="Password for newly created demo accounts.",
        )

    def _account(self, profile, password):
        account = Account.objects.filter(email=profile["email"]).first()
        if account:
            return account, False
        return Account.objects.create_user(password=password, **profile), True

    @transaction.atomic
    def handle(self, *args, **options):
        manager, manager_created = self._account(MANAGER, options["password"])
        _couple, couple_created = self._account(COUPLE, options["password"])

        created = 0
        for item in CATALOG:
            package, is_created = Package.objects.get_or_create(
                owner=manager,
                company_name=item["company_name"],
                defaults={
                    "package_amount": item["package_amount"],
                    "contact_email": item["contact"]["email"],
                    "contact_phone": item["contact"]["phone"],
                    "contact_address": item["contact"]["address"],
                },
            )
            if is_created:
                created += 1
                FeatureItem.objects.bulk_create([
                    FeatureItem(package=package, position=i, name=name, description=description)
                    for i, (name, description) in enumerate(item["features"])
                ])

        accounts = int(manager_created) + int(couple_created)
        self.stdout.write(self.style.SUCCESS(f"Seed complete. Accounts created={accounts}, Packages created={created}"))
