from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)

TEMPLATE_SPONSOR_MESSAGE = "sponsor_message"
TEMPLATE_PAYMENT_SUCCESS = "payment_success"


def send_notification(
    recipient: str,
    subject: str,
    template: str,
    data: dict[str, Any],
    *,
    from_email: str | None = None,
) -> bool:
    """Render ``core/email/<template>.txt`` and send it. Returns False instead of raising."""
    try:
        body = render_to_string(f"core/email/{template}.txt", data)
        sent = send_mail(subject, body, from_email or settings.DEFAULT_FROM_EMAIL, [recipient], fail_silently=False)
    except Exception:
        logger.exception("[notify] email failed template=%s", template)
        return False
    if not sent:
        logger.warning("[notify] email not accepted template=%s", template)
        return False
    logger.info("[notify] email sent template=%s", template)
    return True
