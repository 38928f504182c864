from django.contrib import admin
from .models import Booking, FeatureItem, Package


class FeatureItemInline(admin.TabularInline):
    model = FeatureItem
    extra = 0


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = ("id", "company_name", "package_amount", "owner", "created_at")
    search_fields = ("company_name", "owner__email")
    inlines = [FeatureItemInline]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "package", "provider", "wedding_date", "status")
    list_filter = ("status", "package")
    search_fields = ("user__name", "user__email", "package__company_name")
    # provider is a snapshot taken at booking time, keep it out of the edit form
    readonly_fields = ("provider", "created_at")
