from django.urls import path

from .views import DeleteMessageView, ReplyMessageView, SendMessageView, ThreadView

urlpatterns = [
    path("send-message", SendMessageView.as_view(), name="send-message"),
    path("reply-message", ReplyMessageView.as_view(), name="reply-message"),
    path("delete-message", DeleteMessageView.as_view(), name="delete-message"),
    path("messages/thread", ThreadView.as_view(), name="message-thread"),
]
