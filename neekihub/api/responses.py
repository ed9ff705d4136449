"""Response envelope helpers shared by all routes."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def success_response(data: Any, **meta: Any) -> Dict[str, Any]:
    """{"success": true, "data": ..., "meta": {..., "timestamp"}}"""
    meta.setdefault("timestamp", utc_timestamp())
    return {"success": True, "data": data, "meta": meta}


def error_response(message: str, field: Optional[str] = None) -> Dict[str, Any]:
    """{"success": false, "error": ...}, plus "field" for input errors."""
    body: Dict[str, Any] = {"success": False, "error": message}
    if field:
        body["field"] = field
    return body
