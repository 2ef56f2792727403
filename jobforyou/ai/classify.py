"""Failure classification for provider errors.

Everything here is a pure function of the error's status and text, so the
same error always gets the same verdict.
"""
from jobforyou.ai.errors import ProviderError, QuotaExhaustedError

QUOTA_STATUS_CODES = (429, 402)

INSUFFICIENT_BALANCE_MARKERS = (
    "insufficient balance",
    "insufficient credit",
    "insufficient funds",
    "credit balance is too low",
    "not enough credits",
)

# Error types that report exhaustion only through a RESOURCE_EXHAUSTED marker.
RESOURCE_EXHAUSTED_ERROR_TYPES = ("ResourceExhausted", "ClientError", "APIError")


def _as_status(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    return None


def get_status_code(exc):
    """Best-effort HTTP status of an SDK error, or None."""
    if isinstance(exc, ProviderError) and exc.status_code is not None:
        return exc.status_code
    for attr in ("status_code", "status", "code"):
        status = _as_status(getattr(exc, attr, None))
        if status is not None:
            return status
    response = getattr(exc, "response", None)
    if response is not None:
        return _as_status(getattr(response, "status_code", None))
    return None


def get_error_message(exc):
    """Message from a structured error body, falling back to str(exc)."""
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        inner = body.get("error", body)
        if isinstance(inner, dict) and isinstance(inner.get("message"), str):
            return inner["message"]
        if isinstance(inner, str):
            return inner
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)


def is_insufficient_balance(message):
    lowered = message.lower()
    return any(marker in lowered for marker in INSUFFICIENT_BALANCE_MARKERS)


def is_quota_exhausted(exc):
    """Return True when the error means "out of quota, try another provider"."""
    if isinstance(exc, QuotaExhaustedError):
        return True

    status = get_status_code(exc)
    if status in QUOTA_STATUS_CODES:
        return True

    message = get_error_message(exc)
    if status == 400 and is_insufficient_balance(message):
        return True

    text = str(exc)
    if "quota" in text or "quota" in message:
        return True
    if "rate limit" in text.lower():
        return True

    if type(exc).__name__ in RESOURCE_EXHAUSTED_ERROR_TYPES and "RESOURCE_EXHAUSTED" in text:
        return True
    return False


def wrap_provider_error(exc, provider):
    """Turn an SDK exception into a typed ProviderError for `provider`."""
    if isinstance(exc, ProviderError):
        return exc
    status = get_status_code(exc)
    message = f"{provider}: {get_error_message(exc)}"
    if is_quota_exhausted(exc):
        return QuotaExhaustedError(message, provider=provider, status_code=status)
    return ProviderError(message, provider=provider, status_code=status)
