from django.contrib import admin

from messaging.models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "sender", "recipient", "package", "booking", "created_at")
    list_filter = ("created_at",)
    search_fields = ("sender__email", "recipient__email", "content")
