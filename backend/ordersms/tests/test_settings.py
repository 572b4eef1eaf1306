import importlib
import sys

import pytest
from django.core.exceptions import ImproperlyConfigured

PROD = "ordersms_backend.settings.prod"


def load_prod(monkeypatch, **env):
    for key in ("DJANGO_SECRET_KEY", "CSRF_TRUSTED_ORIGINS", "ALLOWED_HOSTS", "ORDER_SMS_ASYNC"):
        monkeypatch.delenv(key, raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delitem(sys.modules, PROD, raising=False)
    return importlib.import_module(PROD)


def test_prod_requires_secret_key(monkeypatch):
    with pytest.raises(ImproperlyConfigured):
        load_prod(monkeypatch)


def test_prod_defaults_trust_nothing_and_queue_notifications(monkeypatch):
    prod = load_prod(monkeypatch, DJANGO_SECRET_KEY="s3cret")
    assert prod.DEBUG is False
    assert prod.ALLOWED_HOSTS == []
    assert prod.CSRF_TRUSTED_ORIGINS == []
    assert prod.SIMPLE_JWT["SIGNING_KEY"] == "s3cret"
    assert prod.ORDER_SMS["ASYNC"] == "true"


def test_prod_hosts_come_from_env(monkeypatch):
    prod = load_prod(
        monkeypatch,
        DJANGO_SECRET_KEY="s3cret",
        ALLOWED_HOSTS="admin.shop.example, api.shop.example",
        CSRF_TRUSTED_ORIGINS="https://admin.shop.example",
    )
    assert prod.ALLOWED_HOSTS == ["admin.shop.example", "api.shop.example"]
    assert prod.CSRF_TRUSTED_ORIGINS == ["https://admin.shop.example"]
