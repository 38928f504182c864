# booking/urls.py
#
# Purpose:
# - Package catalog via DRF router (/api/packages/).
# - Flat booking endpoints the React client posts to (/api/book-package, ...).
#
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import BookPackageView, CancelBookingView, PackageViewSet, UpdateBookingStatusView

router = DefaultRouter()
router.register(r"packages", PackageViewSet, basename="package")

urlpatterns = [
    path("", include(router.urls)),
    path("add-wedding-package", PackageViewSet.as_view({"post": "create"}), name="add-wedding-package"),
    path("book-package", BookPackageView.as_view(), name="book-package"),
    path("cancel-booking", CancelBookingView.as_view(), name="cancel-booking"),
    path("update-booking-status", UpdateBookingStatusView.as_view(), name="update-booking-status"),
]
