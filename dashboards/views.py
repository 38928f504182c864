# dashboards/views.py

from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.context import Requester
from accounts.permissions import IsCoupleUser, IsEventManager
from accounts.serializers import AccountSerializer
from booking.models import Booking, Package
from booking.serializers import BookingSerializer, PackageSerializer
from messaging.serializers import ContactSerializer, MessageSerializer
from messaging.services.thread_resolver import (
    build_contacts,
    filter_thread,
    select_contact,
    sort_messages,
    visible_bookings,
    visible_messages,
)


def _conversation(requester, bookings, contact_key):
    """Contacts, the selected contact and its thread, computed fresh on every call."""
    messages = sort_messages(visible_messages(requester))
    contacts = build_contacts(requester, bookings)
    selected = select_contact(contacts, contact_key)
    return {
        "messages": MessageSerializer(messages, many=True).data,
        "contacts": ContactSerializer(contacts, many=True).data,
        "selectedContact": ContactSerializer(selected).data if selected else None,
        "thread": MessageSerializer(filter_thread(messages, selected), many=True).data,
    }


class UserDashboardView(APIView):
    """
    GET /api/user-dashboard?contact=<booking id>

    Returns JSON with:
    - user: the couple's account
    - packages: every published package (with owner name/email)
    - bookings: the couple's bookings
    - messages: all messages sent or received, oldest first
    - contacts / selectedContact / thread: the messenger panel

    Only accessible by couples (role "user").
    """
    permission_classes = [IsCoupleUser]

    def get(self, request):
        requester = Requester.from_request(request)
        packages = Package.objects.select_related("owner").prefetch_related("features").order_by("id")
        bookings = list(visible_bookings(requester))

        data = {
            "user": AccountSerializer(request.user).data,
            "packages": PackageSerializer(packages, many=True).data,
            "bookings": BookingSerializer(bookings, many=True).data,
        }
        data.update(_conversation(requester, bookings, request.query_params.get("contact")))
        return Response(data)


class ManagerDashboardView(APIView):
    """
    GET /api/manager-dashboard?contact=<booking id>

    Returns JSON with:
    - admin: the manager's account
    - packages: packages the manager published
    - bookings: bookings the manager provides or that are for their packages
    - stats: {"pending": N, "confirmed": N}
    - messages / contacts / selectedContact / thread: the messenger panel

    Only accessible by event managers (role "admin").
    """
    permission_classes = [IsEventManager]

    def get(self, request):
        requester = Requester.from_request(request)
        packages = (
            Package.objects.filter(owner_id=requester.account_id)
            .select_related("owner")
            .prefetch_related("features")
            .order_by("id")
        )
        bookings = list(visible_bookings(requester))

        data = {
            "admin": AccountSerializer(request.user).data,
            "packages": PackageSerializer(packages, many=True).data,
            "bookings": BookingSerializer(bookings, many=True).data,
            "stats": {
                "pending": sum(1 for b in bookings if b.status == Booking.PENDING),
                "confirmed": sum(1 for b in bookings if b.status == Booking.CONFIRMED),
            },
        }
        data.update(_conversation(requester, bookings, request.query_params.get("contact")))
        return Response(data)
