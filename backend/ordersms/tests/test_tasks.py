from ordersms_backend import celery_app


def test_worker_discovers_notification_task():
    celery_app.autodiscover_tasks(force=True)
    assert "ordersms.tasks" in celery_app.loader.task_modules
    assert "ordersms.tasks.send_order_notification" in celery_app.tasks
