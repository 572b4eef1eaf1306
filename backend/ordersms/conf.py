from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol

from django.conf import settings
from django.utils.module_loading import import_string

# Keys understood by every ConfigReader (global or per channel).
ENABLED = "ENABLED"
TWILIO_SID = "TWILIO_SID"
TWILIO_AUTH_TOKEN = "TWILIO_AUTH_TOKEN"
TWILIO_FROM_NUMBER = "TWILIO_FROM_NUMBER"
ADMIN_PHONE_NUMBERS = "ADMIN_PHONE_NUMBERS"
SMS_TEMPLATE = "SMS_TEMPLATE"

DEFAULTS: Dict[str, Any] = {
    ENABLED: False,
    TWILIO_SID: "",
    TWILIO_AUTH_TOKEN: "",
    TWILIO_FROM_NUMBER: "",
    ADMIN_PHONE_NUMBERS: "",
    SMS_TEMPLATE: "",
    "CHANNELS": {},
    "CONFIG_READER": "ordersms.conf.SettingsConfigReader",
    "API_BASE_URL": "https://api.twilio.com",
    "TIMEOUT_SECONDS": 10,
    "ASYNC": False,
    "ORDER_MODEL": "",
    "ORDER_CHANNEL_ATTR": "sales_channel_id",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def order_sms_settings() -> Dict[str, Any]:
    """settings.ORDER_SMS merged over DEFAULTS."""
    merged = dict(DEFAULTS)
    merged.update(getattr(settings, "ORDER_SMS", None) or {})
    return merged


def as_bool(value: Any, name: str = "value") -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    normalized = str(value).strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")


def parse_recipients(raw: Optional[str | Iterable[str]]) -> List[str]:
    """'+1555, +1666,,' -> ['+1555', '+1666']"""
    if not raw:
        return []
    items = raw.split(",") if isinstance(raw, str) else raw
    return [str(item).strip() for item in items if item and str(item).strip()]


class ConfigReader(Protocol):
    def get(self, key: str, channel_id: Optional[str] = None) -> Any: ...


class SettingsConfigReader:
    """
    Reads ORDER_SMS from Django settings.
    A value under ORDER_SMS["CHANNELS"][channel_id] wins over the global one
    whenever it is present and not None.
    """

    def get(self, key: str, channel_id: Optional[str] = None) -> Any:
        conf = order_sms_settings()
        if channel_id:
            scoped = (conf.get("CHANNELS") or {}).get(str(channel_id)) or {}
            if scoped.get(key) is not None:
                return scoped[key]
        return conf.get(key)


def get_config_reader() -> ConfigReader:
    return import_string(order_sms_settings()["CONFIG_READER"])()


@dataclass(frozen=True)
class NotificationConfig:
    enabled: bool
    provider_sid: str
    auth_token: str = field(repr=False)
    from_number: str
    recipients: List[str] = field(default_factory=list)
    message_template: str = ""
    channel_id: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.provider_sid and self.auth_token and self.from_number)

    @classmethod
    def load(cls, reader: Optional[ConfigReader] = None, channel_id: Optional[str] = None) -> "NotificationConfig":
        reader = reader or get_config_reader()

        def text(key):
            value = reader.get(key, channel_id)
            return str(value).strip() if value is not None else ""

        return cls(
            enabled=as_bool(reader.get(ENABLED, channel_id), ENABLED),
            provider_sid=text(TWILIO_SID),
            auth_token=text(TWILIO_AUTH_TOKEN),
            from_number=text(TWILIO_FROM_NUMBER),
            recipients=parse_recipients(reader.get(ADMIN_PHONE_NUMBERS, channel_id)),
            message_template=str(reader.get(SMS_TEMPLATE, channel_id) or ""),
            channel_id=channel_id,
        )
