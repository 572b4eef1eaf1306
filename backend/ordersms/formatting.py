from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional

DEFAULT_TEMPLATE = "New order #{orderNumber} placed with total amount {amountTotal} {currency} by {customerName}."
UNKNOWN_CUSTOMER = "Unknown Customer"

_PLACEHOLDER = re.compile(r"\{(orderNumber|amountTotal|customerName|currency)\}")


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _format_amount(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    try:
        return f"{Decimal(str(value)):,.2f}"
    except (InvalidOperation, ValueError):
        return str(value)


def _customer_name(order: Any) -> str:
    name = _field(order, "customer_name")
    if name:
        return str(name).strip()
    customer = _field(order, "order_customer") or _field(order, "customer")
    if not customer:
        return UNKNOWN_CUSTOMER
    first = _field(customer, "first_name") or ""
    last = _field(customer, "last_name") or ""
    return f"{first} {last}".strip()


def _currency_symbol(order: Any) -> str:
    currency = _field(order, "currency")
    if currency is None:
        return ""
    if isinstance(currency, str):
        return currency
    return str(_field(currency, "symbol") or "")


@dataclass(frozen=True)
class OrderSummary:
    order_number: Optional[str] = None
    amount_total: Optional[str] = None
    customer_name: Optional[str] = None
    currency: Optional[str] = None

    @classmethod
    def from_order(cls, order: Any) -> "OrderSummary":
        """Snapshot an order object (or a plain mapping) at event time."""
        number = _field(order, "order_number")
        return cls(
            order_number=str(number) if number is not None else None,
            amount_total=_format_amount(_field(order, "amount_total")),
            customer_name=_customer_name(order),
            currency=_currency_symbol(order),
        )

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


def _text(value: Any, fallback: str) -> str:
    if value is None or value == "":
        return fallback
    return str(value)


def format_message(template: Optional[str], order: OrderSummary) -> str:
    values = {
        "orderNumber": _text(order.order_number, "N/A"),
        "amountTotal": _text(order.amount_total, "N/A"),
        "customerName": _text(order.customer_name, "N/A"),
        "currency": _text(order.currency, ""),
    }
    # single pass so substituted values are never re-expanded
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], template or DEFAULT_TEMPLATE)
