# booking/views.py
#
# Purpose:
# - Package catalog API (public read, managers publish).
# - Booking API: couples book and cancel, managers update status.
#
# Notes:
# - Each view validates the payload shape with a serializer first, then hands
#   an explicit Requester to the service layer (services/), which owns every
#   lookup and rule. Domain errors become HTTP responses in
#   booking/exceptions.py.
# - add-wedding-package accepts multipart (images + JSON-string fields) or a
#   plain JSON body without images.
#
import logging

from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.context import Requester
from accounts.permissions import IsCoupleUser, IsEventManager, IsEventManagerOrReadOnly

from .models import Package
from .serializers import (
    BookingSerializer,
    BookPackageSerializer,
    CancelBookingSerializer,
    PackageCreateSerializer,
    PackageSerializer,
    UpdateBookingStatusSerializer,
)
from .services.booking_manager import BookingManager
from .services.package_catalog import publish_package

logger = logging.getLogger(__name__)


class PackageViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Endpoints:
    - GET  /api/packages/          list every package with features and owner
    - GET  /api/packages/{id}/     one package
    - POST /api/packages/          publish (event managers)
    - POST /api/add-wedding-package  same as above
    """
    queryset = Package.objects.select_related("owner").prefetch_related("features").order_by("id")
    serializer_class = PackageSerializer
    permission_classes = [IsEventManagerOrReadOnly]

    def create(self, request, *args, **kwargs):
        serializer = PackageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        package = publish_package(
            Requester.from_request(request),
            company_name=data["company_name"],
            package_amount=data["package_amount"],
            contact_details=data["contact_details"],
            features=data["features"],
            images=request.FILES.getlist("images"),
        )
        package = self.get_queryset().get(pk=package.pk)
        return Response(
            {"message": "Wedding package added successfully", "package": PackageSerializer(package).data},
            status=status.HTTP_201_CREATED,
        )


class BookPackageView(APIView):
    """
    POST /api/book-package
    { "package_id": 3, "wedding_date": "2027-06-12", "venue": "Rose Hall", "guest_count": 120 }
    """
    permission_classes = [IsCoupleUser]
    manager = BookingManager()

    def post(self, request):
        serializer = BookPackageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        booking = self.manager.create_booking(
            Requester.from_request(request),
            package_id=data["package_id"],
            wedding_date=data["wedding_date"],
            venue=data["venue"],
            guest_count=data["guest_count"],
        )
        return Response(
            {"message": "Package booked successfully", "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )


class CancelBookingView(APIView):
    """
    POST /api/cancel-booking
    { "booking_id": 7 }
    Only the couple who made the booking, and only while it is Pending.
    """
    permission_classes = [IsCoupleUser]
    manager = BookingManager()

    def post(self, request):
        serializer = CancelBookingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = self.manager.cancel_booking(Requester.from_request(request), serializer.validated_data["booking_id"])
        return Response({"message": "Booking cancelled successfully", "booking": BookingSerializer(booking).data})


class UpdateBookingStatusView(APIView):
    """
    POST /api/update-booking-status
    { "booking_id": 7, "status": "Confirmed", "message": "See you there" }
    The optional message is delivered to the couple.
    Only bookings the manager provides, or whose package they own, can be
    updated; any other booking id answers 404 "Booking not found".
    """
    permission_classes = [IsEventManager]
    manager = BookingManager()

    def post(self, request):
        serializer = UpdateBookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        booking, status_message = self.manager.update_status(
            Requester.from_request(request),
            booking_id=data["booking_id"],
            status=data["status"],
            message=data.get("message"),
        )
        return Response(
            {
                "message": "Booking status updated successfully",
                "booking": BookingSerializer(booking).data,
                "statusMessage": (
                    {"id": status_message.pk, "content": status_message.content} if status_message else None
                ),
            }
        )
