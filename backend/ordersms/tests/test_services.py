import pytest

from ordersms.conf import NotificationConfig
from ordersms.services import DispatchResult, dispatch, send_single
from ordersms.tests.conftest import FakeTwilioClient


def make_config(**overrides):
    base = dict(
        enabled=True,
        provider_sid="ACxxx",
        auth_token="tok",
        from_number="+15551230000",
        recipients=["+15550000001", "+15550000002"],
        message_template="",
        channel_id=None,
    )
    base.update(overrides)
    return NotificationConfig(**base)


def test_dispatch_sends_one_message_per_recipient(order, fake_client):
    results = dispatch(make_config(), order, client=fake_client)

    assert [s["To"] for s in fake_client.sent] == ["+15550000001", "+15550000002"]
    assert {s["Body"] for s in fake_client.sent} == {"New order #1001 placed with total amount 49.99 $ by Jane Doe."}
    assert all(s["From"] == "+15551230000" and s["auth"] == ("ACxxx", "tok") for s in fake_client.sent)
    assert [r.success for r in results] == [True, True]
    assert results[0].provider_message_id == "SM0001"


def test_dispatch_parses_comma_separated_recipients(order, fake_client):
    dispatch(make_config(recipients="+15550000001, ,+15550000002 "), order, client=fake_client)
    assert [s["To"] for s in fake_client.sent] == ["+15550000001", "+15550000002"]


def test_dispatch_disabled_is_noop(order, fake_client):
    assert dispatch(make_config(enabled=False), order, client=fake_client) == []
    assert dispatch(make_config(enabled=False, provider_sid=""), order, client=fake_client) == []
    assert fake_client.calls == []


@pytest.mark.parametrize("missing", ["provider_sid", "auth_token", "from_number"])
def test_dispatch_missing_credentials_makes_no_calls(order, fake_client, missing):
    assert dispatch(make_config(**{missing: ""}), order, client=fake_client) == []
    assert fake_client.calls == []


def test_dispatch_without_recipients(order, fake_client):
    assert dispatch(make_config(recipients=[]), order, client=fake_client) == []
    assert fake_client.calls == []


def test_partial_failure_keeps_order_and_continues(order):
    client = FakeTwilioClient(rejected={"+15550000002": "The 'To' number is not a valid phone number."})
    config = make_config(recipients=["+15550000001", "+15550000002", "+15550000003"])

    results = dispatch(config, order, client=client)

    assert [r.recipient for r in results] == ["+15550000001", "+15550000002", "+15550000003"]
    assert [r.success for r in results] == [True, False, True]
    assert [r.provider_message_id for r in results] == ["SM0001", None, "SM0003"]
    assert "not a valid phone number" in results[1].error_detail


def test_custom_template_is_applied(order, fake_client):
    dispatch(make_config(message_template="Order {orderNumber}: {amountTotal}{currency}"), order, client=fake_client)
    assert fake_client.sent[0]["Body"] == "Order 1001: 49.99$"


def test_send_single_reports_transport_errors():
    client = FakeTwilioClient(broken={"+1"})
    result = send_single(client, "AC", "tok", "+2", "+1", "hi")
    assert result == DispatchResult(recipient="+1", success=False, error_detail="Transport error: Read timed out")
