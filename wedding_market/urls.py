# wedding_market/urls.py
#
# Purpose:
# - Project URL router.
# - Every JSON endpoint lives under /api/ (the React client's base URL).
#
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Django admin
    path("admin/", admin.site.urls),

    # =====
    # API's
    # =====
    path("api/", include("accounts.urls")),
    path("api/", include("booking.urls")),
    path("api/", include("messaging.urls")),
    path("api/", include("dashboards.urls")),
]

# Uploaded package images in DEBUG (dev only). In production, serve via web server / CDN.
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
