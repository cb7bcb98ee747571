from django.urls import path
from . import views

urlpatterns = [
    path('health', views.health),
    path('chat', views.chat),
    path('messages', views.send_message),
    path('relationships/<int:pk>/messages', views.relationship_messages),
    path('users/<int:user_id>/progress', views.progress),
    path('users/<int:user_id>/progress/insights', views.progress_insights),
    path('payments/create-intent', views.create_payment_intent_view),
    path('payments/create-subscription', views.create_subscription_view),
    path('webhooks/n8n/sponsor-communication', views.sponsor_communication_webhook),
    path('webhooks/n8n/payment-notification', views.payment_notification_webhook),
    path('webhooks/stripe', views.stripe_webhook),
]
