"""
Server-sent event helpers for workout execution streaming.
"""

import json
from typing import Any, Dict


def format_sse_event(event_type: str, data: Dict[str, Any]) -> str:
    """Format a dictionary as an SSE event string.

    Args:
        event_type: The SSE event type (e.g., 'snapshot', 'closed')
        data: The event data as a dictionary

    Returns:
        Properly formatted SSE string with event type and data
    """
    json_data = json.dumps(data)
    return f"event: {event_type}\ndata: {json_data}\n\n"


SSE_KEEPALIVE = ": keepalive\n\n"
