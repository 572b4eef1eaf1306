# backend/ordersms_backend/settings/prod.py
from .base import *
import os

from django.core.exceptions import ImproperlyConfigured

DEBUG = False

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "")
if not SECRET_KEY:
    raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set in production")
SIMPLE_JWT = {**SIMPLE_JWT, "SIGNING_KEY": SECRET_KEY}

# The validate endpoint is only called by the storefront admin; list its hosts explicitly.
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h.strip()]
CSRF_TRUSTED_ORIGINS = [s.strip() for s in os.getenv("CSRF_TRUSTED_ORIGINS", "").split(",") if s.strip()]
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = [s.strip() for s in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if s.strip()]

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# Order notifications go through the worker so checkout never waits on Twilio.
ORDER_SMS = {**ORDER_SMS, "ASYNC": os.getenv("ORDER_SMS_ASYNC", "true")}
