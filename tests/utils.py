"""Various helpers used by test cases."""

import json
from typing import Any, Dict, Optional

IMAGE_DATA = b"\x89PNG\r\n\x1a\n"


def receiver_status(
    applications: Optional[list] = None, volume: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Create a RECEIVER_STATUS message."""
    status: Dict[str, Any] = {}
    if applications is not None:
        status["applications"] = applications
    if volume is not None:
        status["volume"] = volume
    return {"type": "RECEIVER_STATUS", "requestId": 0, "status": status}


def media_status(*statuses: Dict[str, Any]) -> Dict[str, Any]:
    """Create a MEDIA_STATUS message."""
    return {"type": "MEDIA_STATUS", "requestId": 0, "status": list(statuses)}


def to_lines(*messages: Dict[str, Any]) -> str:
    """Convert messages to newline delimited JSON."""
    return "\n".join(json.dumps(message) for message in messages) + "\n"
