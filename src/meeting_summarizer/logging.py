import logging
import sys

from pythonjsonlogger import jsonlogger

HANDLER_NAME = "meeting_summarizer"


def setup_logging():
    """
    Routes root and Uvicorn log records to one JSON stdout handler.

    Records carry asctime, levelname, name, message and the ddtrace
    trace_id/span_id, plus whatever a caller passes in `extra`. Calling it
    again swaps out the handler installed by the previous call (matched by
    HANDLER_NAME) instead of stacking duplicates. Uvicorn loggers point at
    the same handler so access logs come out as JSON too.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    stream_handler.set_name(HANDLER_NAME)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers = [
        h for h in root_logger.handlers if h.get_name() != HANDLER_NAME
    ]
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(logging.INFO)
        u_logger.handlers = [stream_handler]
        u_logger.propagate = False

    return root_logger
