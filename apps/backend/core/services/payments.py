from __future__ import annotations

import logging
from typing import Any

import stripe
from django.conf import settings

from core.exceptions import PaymentError

logger = logging.getLogger(__name__)

PRODUCTS: dict[str, dict[str, Any]] = {
    "SINGLE_SESSION": {"price": 599, "currency": "usd", "name": "Single Sponsor Session"},
    "MONTHLY_SUBSCRIPTION": {"price": 3900, "currency": "usd", "name": "Monthly Premium Subscription"},
}


def _client() -> stripe.StripeClient:
    key = settings.STRIPE_SECRET_KEY
    if not key:
        raise PaymentError("Payments are not configured", error_code="payments_not_configured", status_code=503)
    if settings.STRIPE_REQUIRE_TEST_KEY and not key.startswith("sk_test_"):
        raise PaymentError(
            "Development environment requires a test mode secret key",
            error_code="payments_not_configured",
            status_code=503,
        )
    return stripe.StripeClient(key, stripe_version=settings.STRIPE_API_VERSION)


def get_product(product_type: str) -> dict[str, Any]:
    product = PRODUCTS.get(product_type)
    if not product:
        raise PaymentError("Invalid product type", error_code="invalid_product_type", status_code=400)
    return product


def create_payment_intent(product_type: str):
    product = get_product(product_type)
    try:
        intent = _client().payment_intents.create(
            params={
                "amount": product["price"],
                "currency": product["currency"],
                "metadata": {"product": product["name"], "environment": settings.ENVIRONMENT},
                "automatic_payment_methods": {"enabled": True},
            }
        )
    except stripe.StripeError as exc:
        logger.exception("[payments] payment intent failed product=%s", product_type)
        raise PaymentError() from exc
    logger.info("[payments] payment intent created id=%s", intent.id)
    return intent


def create_customer(email: str):
    try:
        customer = _client().customers.create(params={"email": email, "metadata": {"source": "sponsor_pocket"}})
    except stripe.StripeError as exc:
        logger.exception("[payments] customer creation failed")
        raise PaymentError("Unable to create subscription") from exc
    logger.info("[payments] customer created id=%s", customer.id)
    return customer


def create_subscription(customer_id: str):
    product = PRODUCTS["MONTHLY_SUBSCRIPTION"]
    client = _client()
    try:
        price = client.prices.create(
            params={
                "unit_amount": product["price"],
                "currency": product["currency"],
                "recurring": {"interval": "month"},
                "product_data": {"name": product["name"]},
            }
        )
        subscription = client.subscriptions.create(
            params={
                "customer": customer_id,
                "items": [{"price": price.id}],
                "payment_behavior": "default_incomplete",
                "payment_settings": {"save_default_payment_method": "on_subscription"},
                "expand": ["latest_invoice.payment_intent"],
            }
        )
    except stripe.StripeError as exc:
        logger.exception("[payments] subscription failed customer=%s", customer_id)
        raise PaymentError("Unable to create subscription") from exc
    logger.info("[payments] subscription created id=%s", subscription.id)
    return subscription


def subscription_client_secret(subscription) -> str:
    invoice = subscription.latest_invoice
    payment_intent = getattr(invoice, "payment_intent", None) if invoice else None
    if not payment_intent:
        raise PaymentError("Unable to create subscription", error_code="missing_payment_intent")
    return payment_intent if isinstance(payment_intent, str) else payment_intent.client_secret


def construct_webhook_event(payload: bytes, signature: str | None):
    secret = settings.STRIPE_WEBHOOK_SECRET
    if not signature or not secret:
        raise PaymentError("Invalid webhook request", error_code="invalid_webhook", status_code=400)
    try:
        return stripe.Webhook.construct_event(payload, signature, secret)
    except (ValueError, stripe.SignatureVerificationError) as exc:
        logger.warning("[payments] webhook rejected error=%s", exc)
        raise PaymentError("Invalid webhook request", error_code="invalid_webhook", status_code=400) from exc
