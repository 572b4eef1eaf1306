from celery import shared_task

from .conf import NotificationConfig
from .formatting import OrderSummary
from .services import dispatch


@shared_task
def send_order_notification(summary: dict, channel_id=None):
    """Worker-side dispatch for ORDER_SMS['ASYNC']; same rules as the inline path."""
    config = NotificationConfig.load(channel_id=channel_id)
    results = dispatch(config, OrderSummary(**summary))
    return [r.as_dict() for r in results]
