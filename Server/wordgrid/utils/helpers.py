"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from a request (HTTP or WebSocket)."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),
        'username': None
    }


def require_json_field(data: Any, field: str) -> Optional[Any]:
    """Return data[field] when data is a dict holding it, else None."""
    if not isinstance(data, dict) or field not in data:
        return None
    return data[field]
