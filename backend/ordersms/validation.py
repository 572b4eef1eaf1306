"""
Credential check behind the admin "validate" button.

Linear sequence: local config checks, account lookup, lenient from-number
lookup, then optional test messages to the admin numbers. The test path
ignores the ENABLED flag so credentials can be checked before going live.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .client import TwilioClient, get_client
from .conf import ConfigReader, NotificationConfig, parse_recipients
from .exceptions import AuthenticationError, ConfigurationError, TransportError
from .services import DispatchResult, send_single

logger = logging.getLogger(__name__)

TEST_MESSAGE = (
    "TEST SMS: This is a test message from the Admin SMS Order Notification plugin. "
    "Your Twilio configuration is working correctly!"
)

CONFIGURATION = "configuration"
AUTHENTICATION = "authentication"
TRANSPORT = "transport"

STATUS_BY_FAILURE = {CONFIGURATION: 400, AUTHENTICATION: 401, TRANSPORT: 500}


@dataclass
class ValidationResult:
    valid: bool
    message: str
    account_name: Optional[str] = None
    account_status: Optional[str] = None
    test_results: List[DispatchResult] = field(default_factory=list)
    failure: Optional[str] = None
    from_number_verified: Optional[bool] = None

    @property
    def test_sms_sent(self) -> bool:
        return len(self.test_results) > 0

    @property
    def http_status(self) -> int:
        if self.valid:
            return 200
        return STATUS_BY_FAILURE.get(self.failure, 500)


def _invalid(failure: str, message: str) -> ValidationResult:
    return ValidationResult(valid=False, message=message, failure=failure)


def _check_from_number(client: TwilioClient, sid: str, auth_token: str, from_number: str) -> Optional[bool]:
    # Inconclusive lookups never block validation.
    try:
        matches = client.find_incoming_numbers(sid, auth_token, from_number)
    except Exception as e:
        logger.warning("Phone number validation skipped phone=%s error=%s", from_number, e)
        return None
    if not matches:
        logger.info("From number not listed under account incoming numbers phone=%s", from_number)
    return bool(matches)


def require_settings(sid: Optional[str], auth_token: Optional[str], from_number: Optional[str]) -> None:
    """Raise ConfigurationError when a field needed to reach the provider is empty."""
    if not sid or not auth_token:
        logger.warning("Missing Twilio credentials sid=%s authToken=%s",
                       "present" if sid else "missing", "present" if auth_token else "missing")
        raise ConfigurationError("Twilio credentials not configured. Please save your SID and Auth Token first.")
    if not from_number:
        raise ConfigurationError("Twilio from-number not configured. Please save your settings first.")


def validate(
    sid: Optional[str],
    auth_token: Optional[str],
    from_number: Optional[str],
    recipients: Optional[str | Iterable[str]] = None,
    client: Optional[TwilioClient] = None,
) -> ValidationResult:
    try:
        require_settings(sid, auth_token, from_number)
    except ConfigurationError as e:
        return _invalid(CONFIGURATION, str(e))

    client = client or get_client()
    try:
        account = client.fetch_account(sid, auth_token)
    except AuthenticationError as e:
        logger.warning("Twilio credentials rejected accountSid=%s status=%s", sid, e.status_code)
        return _invalid(AUTHENTICATION, "Invalid Twilio credentials")
    except TransportError as e:
        logger.error("Twilio validation failed - transport error accountSid=%s error=%s", sid, e)
        return _invalid(TRANSPORT, f"Failed to connect to Twilio API: {e}")

    verified = _check_from_number(client, sid, auth_token, from_number)
    logger.info("Twilio credentials validated accountSid=%s accountName=%s",
                sid, account.get("friendly_name") or "Unknown")

    test_results = []
    for phone in parse_recipients(recipients):
        result = send_single(client, sid, auth_token, from_number, phone, TEST_MESSAGE)
        if result.success:
            logger.info("Test SMS sent to=%s messageSid=%s", phone, result.provider_message_id)
        else:
            logger.error("Failed to send test SMS to=%s error=%s", phone, result.error_detail)
        test_results.append(result)

    message = "Twilio credentials are valid."
    if test_results:
        ok = sum(1 for r in test_results if r.success)
        message += f" Test SMS sent to {ok}/{len(test_results)} numbers"

    return ValidationResult(
        valid=True,
        message=message,
        account_name=account.get("friendly_name"),
        account_status=account.get("status"),
        test_results=test_results,
        from_number_verified=verified,
    )


def validate_channel(
    channel_id: Optional[str] = None,
    reader: Optional[ConfigReader] = None,
    client: Optional[TwilioClient] = None,
    send_test_sms: bool = True,
) -> ValidationResult:
    """Validate the stored credentials for a channel (global config when channel_id is None)."""
    config = NotificationConfig.load(reader, channel_id)
    logger.info(
        "Twilio validation requested channel=%s hasSid=%s hasAuthToken=%s hasFromNumber=%s recipients=%d",
        channel_id, bool(config.provider_sid), bool(config.auth_token), bool(config.from_number),
        len(config.recipients),
    )
    return validate(
        config.provider_sid,
        config.auth_token,
        config.from_number,
        config.recipients if send_test_sms else None,
        client=client,
    )
