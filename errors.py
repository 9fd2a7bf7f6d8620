"""
API errors

Every error rendered to a client has a human-readable ``message``. Validation
failures also carry ``errors``, one entry per offending field.
"""

from typing import Any, Dict, List, Optional


class PortalError(Exception):
    """Base class for errors that map to an HTTP response."""

    http_status = 500

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_response(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body


class ValidationFailed(PortalError):
    """Request body failed schema validation."""

    http_status = 400


class NotFound(PortalError):
    """Referenced record does not exist."""

    http_status = 404

    def __init__(self, label: str):
        super().__init__(f"{label} not found")
        self.label = label


class InternalError(PortalError):
    """Unexpected failure. The message is always generic."""

    http_status = 500

    def __init__(self):
        super().__init__("Internal server error")


def format_validation_errors(raw_errors) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts into ``{field, message, type}`` entries.

    The leading ``body`` location FastAPI adds to request errors is dropped so
    the field path matches the JSON payload.
    """
    formatted = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        formatted.append({
            "field": ".".join(loc),
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "value_error"),
        })
    return formatted
