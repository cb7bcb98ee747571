import logging

from django.contrib.auth.models import User
from django.shortcuts import get_object_or_404
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .serializers import (
    ChatRequestSerializer,
    MessageSerializer,
    PaymentIntentSerializer,
    PaymentNotificationSerializer,
    ProgressEntrySerializer,
    SendMessageSerializer,
    SponsorCommunicationSerializer,
    SubscriptionSerializer,
)
from .services.ai import SponsorChatResponder, analyze_progress
from .services.ai.context import progress_entry_line
from .services.messaging import MessagingService
from .services.notifications import TEMPLATE_PAYMENT_SUCCESS, TEMPLATE_SPONSOR_MESSAGE, send_notification
from .services.payments import (
    construct_webhook_event,
    create_customer,
    create_payment_intent,
    create_subscription,
    subscription_client_secret,
)
from .storage import storage
from .tasks import refresh_progress_insights_task

logger = logging.getLogger(__name__)


@api_view(["GET"])
def health(_):
    return Response({"status": "ok"})


@api_view(["POST"])
def chat(request):
    serializer = ChatRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user_id = serializer.validated_data["userId"]
    content = serializer.validated_data["content"]

    reply = SponsorChatResponder().generate_reply(content)
    return Response(
        {
            "userMessage": {"userId": user_id, "content": content, "isUser": True},
            "sponsorMessage": {"userId": user_id, "content": reply.message, "isUser": False},
            "supportType": reply.support_type,
            "suggestedResources": reply.suggested_resources,
        }
    )


@api_view(["POST"])
def send_message(request):
    serializer = SendMessageSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    message = MessagingService().send_message(
        data["relationshipId"],
        data["senderId"],
        data["content"],
        use_ai=data["useAI"],
    )
    return Response(MessageSerializer(message).data, status=201)


@api_view(["GET"])
def relationship_messages(_request, pk):
    return Response(MessageSerializer(storage.get_messages(pk), many=True).data)


@api_view(["GET", "POST"])
def progress(request, user_id):
    user = get_object_or_404(User, id=user_id)
    if request.method == "GET":
        return Response(ProgressEntrySerializer(storage.get_progress_entries(user.id), many=True).data)

    serializer = ProgressEntrySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    entry = storage.create_progress_entry(user_id=user.id, **serializer.validated_data)
    refresh_progress_insights_task.delay(entry.id)
    entry.refresh_from_db()
    return Response(ProgressEntrySerializer(entry).data, status=201)


@api_view(["GET"])
def progress_insights(_request, user_id):
    user = get_object_or_404(User, id=user_id)
    entries = storage.get_progress_entries(user.id)
    return Response({"userId": user.id, "insights": analyze_progress([progress_entry_line(e) for e in entries])})


@api_view(["POST"])
def create_payment_intent_view(request):
    serializer = PaymentIntentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    intent = create_payment_intent(serializer.validated_data["productType"])
    return Response({"clientSecret": intent.client_secret, "status": intent.status})


@api_view(["POST"])
def create_subscription_view(request):
    serializer = SubscriptionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    customer = create_customer(serializer.validated_data["email"])
    subscription = create_subscription(customer.id)
    return Response({"subscriptionId": subscription.id, "clientSecret": subscription_client_secret(subscription)})


@api_view(["POST"])
def sponsor_communication_webhook(request):
    serializer = SponsorCommunicationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    sent = send_notification(
        data["recipientEmail"],
        "New Message from Your Sponsor",
        TEMPLATE_SPONSOR_MESSAGE,
        {"message": data["messageContent"], "userId": data["userId"]},
    )
    if not sent:
        return Response({"error": "Failed to send email notification"}, status=500)
    return Response({"success": True, "message": "Notification sent successfully"})


@api_view(["POST"])
def payment_notification_webhook(request):
    serializer = PaymentNotificationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    sent = send_notification(
        data["customerEmail"],
        "Payment Confirmation - Sponsor Pocket",
        TEMPLATE_PAYMENT_SUCCESS,
        {"amount": f"{data['amount'] / 100:.2f}", "status": data["paymentStatus"], "userId": data["userId"]},
    )
    if not sent:
        return Response({"error": "Failed to send payment notification"}, status=500)
    return Response({"success": True, "message": "Payment notification sent successfully"})


@api_view(["POST"])
def stripe_webhook(request):
    event = construct_webhook_event(request.body, request.META.get("HTTP_STRIPE_SIGNATURE"))
    event_type = event.type
    object_id = getattr(event.data.object, "id", None)
    if event_type in {"payment_intent.succeeded", "customer.subscription.created", "customer.subscription.deleted"}:
        logger.info("[stripe] %s id=%s", event_type, object_id)
    else:
        logger.info("[stripe] unhandled event type=%s", event_type)
    return Response({"received": True})
