# ui/logging_utils.py
from __future__ import annotations
import logging
import queue

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class QueueLogHandler(logging.Handler):
    """Push logging records to a queue for the UI thread to pull."""
    def __init__(self, q: queue.Queue):
        super().__init__()
        self.q = q

    def emit(self, record: logging.LogRecord):
        try:
            self.q.put_nowait(self.format(record))
        except Exception:
            self.handleError(record)


def route_logging_to_queue(q: queue.Queue, level: int = logging.INFO) -> QueueLogHandler:
    """Replace the root handlers with a QueueLogHandler feeding q."""
    handler = QueueLogHandler(q)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root_logger = logging.getLogger()
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler


def drain(q: queue.Queue, limit: int = 200) -> list[str]:
    """Pop up to limit pending messages without blocking."""
    out: list[str] = []
    while len(out) < limit:
        try:
            out.append(q.get_nowait())
        except queue.Empty:
            break
    return out
