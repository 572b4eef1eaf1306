from django.apps import AppConfig, apps
from django.db.models.signals import post_save


class OrdersmsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ordersms"
    verbose_name = "Admin SMS order notifications"

    def ready(self):
        from . import signals
        from .conf import order_sms_settings

        label = order_sms_settings().get("ORDER_MODEL")
        if label:
            post_save.connect(signals.order_saved, sender=apps.get_model(label), dispatch_uid="ordersms.order_saved")
