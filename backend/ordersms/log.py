import contextvars
import logging

request_id_var = contextvars.ContextVar("request_id", default="-")


class RequestIDFilter(logging.Filter):
    """Stamps every record with the current request id (see RequestIDMiddleware)."""

    def filter(self, record):
        record.request_id = request_id_var.get()
        return True
