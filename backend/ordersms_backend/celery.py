import os

from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ordersms_backend.settings.dev")

app = Celery("ordersms_backend")

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object("django.conf:settings", namespace="CELERY")

# Load task modules from every Django app config. INSTALLED_APPS holds
# AppConfig paths ("ordersms.apps.OrdersmsConfig"), so the package names
# come from the app registry instead.
app.autodiscover_tasks()
