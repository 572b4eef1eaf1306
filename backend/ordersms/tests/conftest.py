import pytest

from ordersms.exceptions import RecipientSendError, TransportError
from ordersms.formatting import OrderSummary


class FakeTwilioClient:
    """Stands in for TwilioClient; records every call, answers from canned outcomes."""

    def __init__(self, rejected=None, broken=None, account=None, account_error=None,
                 numbers=None, numbers_error=None):
        self.rejected = rejected or {}
        self.broken = broken or set()
        self.account = account if account is not None else {"friendly_name": "Shop Admin", "status": "active"}
        self.account_error = account_error
        self.numbers = numbers if numbers is not None else [{"phone_number": "+15551230000"}]
        self.numbers_error = numbers_error
        self.calls = []
        self.sent = []

    def fetch_account(self, sid, auth_token):
        self.calls.append(("fetch_account", sid))
        if self.account_error:
            raise self.account_error
        return self.account

    def find_incoming_numbers(self, sid, auth_token, phone_number):
        self.calls.append(("find_incoming_numbers", phone_number))
        if self.numbers_error:
            raise self.numbers_error
        return self.numbers

    def send_message(self, sid, auth_token, *, to, from_, body):
        self.calls.append(("send_message", to))
        self.sent.append({"To": to, "From": from_, "Body": body, "auth": (sid, auth_token)})
        if to in self.broken:
            raise TransportError("Read timed out")
        if to in self.rejected:
            raise RecipientSendError(self.rejected[to], status_code=400, recipient=to)
        return {"sid": f"SM{len(self.sent):04d}", "status": "queued"}


@pytest.fixture
def fake_client():
    return FakeTwilioClient()


@pytest.fixture
def order():
    return OrderSummary(order_number="1001", amount_total="49.99", customer_name="Jane Doe", currency="$")


@pytest.fixture
def sms_settings(settings):
    settings.ORDER_SMS = {
        "ENABLED": True,
        "TWILIO_SID": "ACxxx",
        "TWILIO_AUTH_TOKEN": "tok",
        "TWILIO_FROM_NUMBER": "+15551230000",
        "ADMIN_PHONE_NUMBERS": "+15550000001, +15550000002",
        "SMS_TEMPLATE": "",
        "CHANNELS": {},
        "API_BASE_URL": "https://api.twilio.test",
        "TIMEOUT_SECONDS": 2,
        "ASYNC": False,
    }
    return settings.ORDER_SMS
