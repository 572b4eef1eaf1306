from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from .client import TwilioClient, get_client
from .conf import NotificationConfig, parse_recipients
from .exceptions import RecipientSendError, TransportError
from .formatting import OrderSummary, format_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    recipient: str
    success: bool
    provider_message_id: Optional[str] = None
    error_detail: Optional[str] = None
    provider_status: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def send_single(
    client: TwilioClient, sid: str, auth_token: str, from_number: str, recipient: str, body: str
) -> DispatchResult:
    """Send one SMS and classify the outcome. Never raises for provider or network errors."""
    try:
        data = client.send_message(sid, auth_token, to=recipient, from_=from_number, body=body)
    except RecipientSendError as e:
        return DispatchResult(recipient=recipient, success=False, error_detail=str(e))
    except TransportError as e:
        return DispatchResult(recipient=recipient, success=False, error_detail=f"Transport error: {e}")
    return DispatchResult(
        recipient=recipient,
        success=True,
        provider_message_id=data.get("sid"),
        provider_status=data.get("status"),
    )


def dispatch(
    config: NotificationConfig, order: OrderSummary, client: Optional[TwilioClient] = None
) -> List[DispatchResult]:
    """
    Send the order notification to every configured admin number.

    Recipients are contacted one by one in configured order. A failure for one
    number is recorded in its DispatchResult and the loop moves on; nothing is
    retried and nothing is raised for per-recipient failures.
    """
    if not config.enabled:
        logger.info("SMS order notification disabled channel=%s", config.channel_id)
        return []

    if not config.is_complete:
        logger.error(
            "SMS order notification: invalid Twilio configuration channel=%s has_sid=%s has_token=%s has_from=%s",
            config.channel_id, bool(config.provider_sid), bool(config.auth_token), bool(config.from_number),
        )
        return []

    recipients = parse_recipients(config.recipients)
    if not recipients:
        logger.warning("SMS order notification: no admin phone numbers configured channel=%s", config.channel_id)
        return []

    message = format_message(config.message_template, order)
    client = client or get_client()

    results = []
    for phone in recipients:
        result = send_single(client, config.provider_sid, config.auth_token, config.from_number, phone, message)
        if result.success:
            logger.info(
                "SMS order notification sent phone=%s order=%s channel=%s sid=%s",
                phone, order.order_number, config.channel_id, result.provider_message_id,
            )
        else:
            logger.error(
                "SMS order notification failed phone=%s order=%s channel=%s error=%s",
                phone, order.order_number, config.channel_id, result.error_detail,
            )
        results.append(result)
    return results
