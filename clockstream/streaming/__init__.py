from .events import STREAM_HEADERS, SSEEvent, clock_event, local_now
from .ticker import ClockTicker

__all__ = [
    "STREAM_HEADERS",
    "SSEEvent",
    "clock_event",
    "local_now",
    "ClockTicker",
]
