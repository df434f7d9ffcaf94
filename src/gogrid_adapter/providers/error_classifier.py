"""
Turns GoGrid error responses into ErrorDescriptor values.

GoGrid reports failures as::

    {"status": "failure", "list": [{"errorcode": "BadKey", "message": "..."}]}

but proxies in front of it can answer with HTML or XML, so the raw body is
always kept as the fallback message.
"""
import json
from dataclasses import dataclass
from typing import Any

import requests

from gogrid_adapter.core.utils import get_wire_logger, setup_logger
from gogrid_adapter.providers.provider_types import CloudErrorType, ErrorDescriptor

logger = setup_logger(name="providers.error_classifier")
wire = get_wire_logger("providers.error_classifier")

STATUS_CODES = {
    400: "IllegalArgument",
    401: "Unauthorized",
    403: "AuthenticationFailed",
    404: "NotFound",
    500: "UnexpectedError",
}


@dataclass(frozen=True)
class JsonParseResult:
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_parse_json(text: str) -> JsonParseResult:
    """Parse text as JSON, reporting failure as a value instead of raising"""
    try:
        return JsonParseResult(value=json.loads(text))
    except ValueError as e:
        return JsonParseResult(error=str(e))


def status_to_code(http_status_code: int) -> str:
    return STATUS_CODES.get(http_status_code, str(http_status_code))


def _first_error(document: Any) -> dict | None:
    if not isinstance(document, dict):
        return None
    errors = document.get("list")
    if not isinstance(errors, list) or not errors:
        return None
    first = errors[0]
    return first if isinstance(first, dict) else None


def classify(http_status_code: int, body: str | bytes | None) -> ErrorDescriptor:
    """
    Build an ErrorDescriptor from a status code and response body.

    Never raises: when the body cannot be read or parsed, the descriptor
    falls back to the status code table and whatever message was already
    established.
    """
    provider_code = status_to_code(http_status_code)
    message = ""

    try:
        if body is not None:
            text = body.decode("utf-8") if isinstance(body, bytes) else body
            wire.debug(text)
            message = text

            parsed = try_parse_json(text)
            # Unparseable bodies are usually HTML or XML error pages
            error = _first_error(parsed.value) if parsed.ok else None
            if error is not None:
                if error.get("message") is not None:
                    message = str(error["message"])
                if error.get("errorcode") is not None:
                    provider_code = str(error["errorcode"])
    except Exception as e:
        logger.error(f"Failed to parse error from GoGrid: {e}")

    return ErrorDescriptor(
        http_status_code=http_status_code,
        provider_code=provider_code,
        message=message,
        error_type=CloudErrorType.GENERAL,
    )


def classify_response(response: requests.Response) -> ErrorDescriptor:
    """Classify a failed requests.Response"""
    try:
        body = response.content
    except Exception as e:
        logger.error(f"Failed to read error body from GoGrid: {e}")
        body = None
    return classify(response.status_code, body or None)
