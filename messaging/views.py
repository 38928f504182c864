# messaging/views.py
#
# Purpose:
# - Message endpoints: send (couples), reply and delete (either side),
#   and the read-side thread view.
#
# Notes:
# - Views only parse input and build the Requester; all access rules live in
#   messaging/services/message_gate.py. Domain errors are turned into HTTP
#   responses by booking.exceptions.marketplace_exception_handler.
#
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.context import Requester
from accounts.permissions import IsCoupleUser

from .serializers import (
    DeleteMessageSerializer,
    MessageSerializer,
    ReplyMessageSerializer,
    SendMessageSerializer,
    ThreadSerializer,
)
from .services import message_gate
from .services.thread_resolver import list_thread


class SendMessageView(APIView):
    """
    POST /api/send-message
    { "package_id": 3, "booking_id": 7, "content": "Hi!" }
    At least one of package_id / booking_id is needed to find the recipient.
    """
    permission_classes = [IsCoupleUser]

    def post(self, request):
        serializer = SendMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        message = message_gate.send_message(
            Requester.from_request(request),
            content=data["content"],
            package_id=data.get("package_id"),
            booking_id=data.get("booking_id"),
        )
        return Response(
            {"message": "Message sent successfully", "newMessage": MessageSerializer(message).data},
            status=status.HTTP_201_CREATED,
        )


class ReplyMessageView(APIView):
    """
    POST /api/reply-message
    { "message_id": 12, "content": "Thanks!" }
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ReplyMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        reply = message_gate.reply_message(
            Requester.from_request(request),
            message_id=serializer.validated_data["message_id"],
            content=serializer.validated_data["content"],
        )
        return Response(
            {"message": "Reply sent successfully", "newMessage": MessageSerializer(reply).data},
            status=status.HTTP_201_CREATED,
        )


class DeleteMessageView(APIView):
    """
    POST /api/delete-message
    { "message_id": 12 }
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = DeleteMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        message_gate.delete_message(Requester.from_request(request), serializer.validated_data["message_id"])
        return Response({"message": "Message deleted successfully"})


class ThreadView(APIView):
    """
    GET /api/messages/thread?contact=<booking id>
    Contacts for the caller plus the messages of the selected contact.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        thread = list_thread(Requester.from_request(request), request.query_params.get("contact"))
        return Response(ThreadSerializer(thread).data)
