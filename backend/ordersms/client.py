from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .conf import order_sms_settings
from .exceptions import AuthenticationError, RecipientSendError, TransportError

logger = logging.getLogger(__name__)

API_VERSION = "2010-04-01"


def _json(response) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


class TwilioClient:
    """
    Thin wrapper over Twilio's REST API.
    One instance (and one requests.Session) is shared; credentials are passed
    per call so a single client serves every channel.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        conf = order_sms_settings()
        self.base_url = (base_url or conf["API_BASE_URL"]).rstrip("/")
        self.timeout = float(timeout if timeout is not None else conf["TIMEOUT_SECONDS"])
        self.session = session or requests.Session()

    def _url(self, sid: str, path: str = "") -> str:
        return f"{self.base_url}/{API_VERSION}/Accounts/{sid}{path}.json"

    def _request(self, method: str, url: str, sid: str, auth_token: str, **kwargs):
        try:
            return self.session.request(method, url, auth=(sid, auth_token), timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

    def fetch_account(self, sid: str, auth_token: str) -> Dict[str, Any]:
        r = self._request("GET", self._url(sid), sid, auth_token)
        if r.status_code != 200:
            raise AuthenticationError(f"Twilio rejected credentials (HTTP {r.status_code})", status_code=r.status_code)
        return _json(r)

    def find_incoming_numbers(self, sid: str, auth_token: str, phone_number: str) -> List[Dict[str, Any]]:
        r = self._request(
            "GET", self._url(sid, "/IncomingPhoneNumbers"), sid, auth_token,
            params={"PhoneNumber": phone_number},
        )
        r.raise_for_status()
        return _json(r).get("incoming_phone_numbers") or []

    def send_message(self, sid: str, auth_token: str, *, to: str, from_: str, body: str) -> Dict[str, Any]:
        r = self._request(
            "POST", self._url(sid, "/Messages"), sid, auth_token,
            data={"To": to, "From": from_, "Body": body},
        )
        data = _json(r)
        if not 200 <= r.status_code < 300:
            raise RecipientSendError(data.get("message") or "Unknown error", status_code=r.status_code, recipient=to)
        return data


_client: Optional[TwilioClient] = None


def get_client() -> TwilioClient:
    global _client
    if _client is None:
        _client = TwilioClient()
    return _client


def reset_client() -> None:
    global _client
    _client = None
