"""
Errors raised by the Twilio client and the notification services.
The dispatcher and validator turn them into result objects; nothing here
should ever reach the order-placement flow.
"""


class OrderSmsError(Exception):
    """Base class for every order SMS failure."""


class ConfigurationError(OrderSmsError):
    """Required settings (sid, token, from-number) are missing."""


class AuthenticationError(OrderSmsError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(OrderSmsError):
    """Network, DNS or timeout failure talking to the provider."""


class RecipientSendError(OrderSmsError):
    def __init__(self, message: str, status_code: int | None = None, recipient: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.recipient = recipient
