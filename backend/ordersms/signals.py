import logging

from django.db import transaction
from django.dispatch import Signal, receiver

from .conf import ENABLED, NotificationConfig, as_bool, get_config_reader, order_sms_settings
from .formatting import OrderSummary
from .services import dispatch

logger = logging.getLogger(__name__)

# Sent by the host storefront once an order is placed:
#   order_placed.send(sender=Order, order=order, channel_id=order.sales_channel_id)
order_placed = Signal()


def on_order_placed(order, channel_id=None, reader=None, client=None):
    """
    Notify admins about a new order. Never raises: SMS is best effort and must
    not break or roll back checkout.
    """
    logger.info("SMS order notification: order placed event channel=%s", channel_id)
    try:
        reader = reader or get_config_reader()
        if not as_bool(reader.get(ENABLED, channel_id), ENABLED):
            logger.info("SMS order notification: plugin disabled, skipping channel=%s", channel_id)
            return []

        summary = OrderSummary.from_order(order)
        logger.info("SMS order notification: processing order=%s channel=%s", summary.order_number, channel_id)

        if as_bool(order_sms_settings().get("ASYNC"), "ASYNC"):
            from .tasks import send_order_notification
            send_order_notification.delay(summary.as_dict(), channel_id)
            return []

        config = NotificationConfig.load(reader, channel_id)
        return dispatch(config, summary, client=client)
    except Exception:
        logger.exception("SMS order notification: error processing order placed event channel=%s", channel_id)
        return []


@receiver(order_placed)
def handle_order_placed(sender, order=None, channel_id=None, **kwargs):
    on_order_placed(order, channel_id=channel_id)


def order_saved(sender, instance, created, **kwargs):
    """post_save hook for the host order model (see ORDER_SMS['ORDER_MODEL'])."""
    if not created:
        return
    channel_id = getattr(instance, order_sms_settings()["ORDER_CHANNEL_ATTR"], None)
    channel_id = str(channel_id) if channel_id else None
    transaction.on_commit(lambda: on_order_placed(instance, channel_id=channel_id))
