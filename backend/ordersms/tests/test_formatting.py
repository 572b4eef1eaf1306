from decimal import Decimal
from types import SimpleNamespace

from ordersms.formatting import DEFAULT_TEMPLATE, OrderSummary, format_message


def test_default_template_is_used_for_empty_template(order):
    assert format_message("", order) == format_message(DEFAULT_TEMPLATE, order)
    assert format_message(None, order) == "New order #1001 placed with total amount 49.99 $ by Jane Doe."


def test_template_without_placeholders_is_unchanged(order):
    tpl = "Hello {name}, {ordernumber} stays literal."
    assert format_message(tpl, order) == tpl


def test_missing_fields_fall_back():
    msg = format_message("{orderNumber}|{amountTotal}|{customerName}|{currency}", OrderSummary())
    assert msg == "N/A|N/A|N/A|"


def test_substituted_values_are_not_expanded_again():
    summary = OrderSummary(order_number="7", customer_name="{currency}", currency="EUR")
    assert format_message("{customerName} {currency}", summary) == "{currency} EUR"


def test_from_order_reads_host_order_object():
    host_order = SimpleNamespace(
        order_number=10042,
        amount_total=Decimal("1234.5"),
        order_customer=SimpleNamespace(first_name="Jane", last_name="Doe"),
        currency=SimpleNamespace(symbol="€"),
    )
    summary = OrderSummary.from_order(host_order)
    assert summary == OrderSummary(order_number="10042", amount_total="1,234.50", customer_name="Jane Doe", currency="€")


def test_from_order_without_customer_or_currency():
    summary = OrderSummary.from_order({"order_number": "5", "amount_total": 3})
    assert summary.customer_name == "Unknown Customer"
    assert summary.currency == ""
    assert summary.amount_total == "3.00"


def test_non_string_summary_values_are_rendered():
    summary = OrderSummary(order_number=1001, amount_total=Decimal("49.99"), customer_name="Jane Doe", currency="$")
    assert format_message("", summary) == "New order #1001 placed with total amount 49.99 $ by Jane Doe."


def test_zero_amount_is_not_treated_as_missing():
    assert format_message("{amountTotal}", OrderSummary(amount_total=0)) == "0"
