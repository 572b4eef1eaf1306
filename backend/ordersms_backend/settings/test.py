from .base import *

DEBUG = False
SECRET_KEY = "test-secret"
SIMPLE_JWT["SIGNING_KEY"] = SECRET_KEY

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []

CELERY_TASK_ALWAYS_EAGER = True
CELERY_BROKER_URL = "memory://"

ORDER_SMS = {
    "ENABLED": False,
    "TWILIO_SID": "",
    "TWILIO_AUTH_TOKEN": "",
    "TWILIO_FROM_NUMBER": "",
    "ADMIN_PHONE_NUMBERS": "",
    "SMS_TEMPLATE": "",
    "CHANNELS": {},
    "API_BASE_URL": "https://api.twilio.test",
    "TIMEOUT_SECONDS": 2,
    "ASYNC": False,
    "ORDER_MODEL": "",
}
