"""SSE event framing for the clock stream."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Sent once per connection, before the first event
STREAM_HEADERS: dict[str, str] = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
}


@dataclass
class SSEEvent:
    """A single Server-Sent Event ready for wire serialization."""

    data: str

    def to_sse_string(self) -> str:
        """Serialize to SSE wire format.

        Format:
            data: <line>
            data: <line>

            (one data field per payload line, terminated by a blank line)
        """
        lines = self.data.splitlines() or [""]
        return "".join(f"data: {line}\n" for line in lines) + "\n"


def local_now() -> datetime:
    return datetime.now().astimezone()


def clock_event(now: Optional[datetime] = None) -> SSEEvent:
    """Build the event carrying the current local time, offset included."""
    if now is None:
        now = local_now()
    return SSEEvent(data=str(now))
