# dashboards/urls.py

from django.urls import path
from .views import ManagerDashboardView, UserDashboardView

urlpatterns = [
    path("user-dashboard", UserDashboardView.as_view(), name="user-dashboard"),
    path("manager-dashboard", ManagerDashboardView.as_view(), name="manager-dashboard"),
]
