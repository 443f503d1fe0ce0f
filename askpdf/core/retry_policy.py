"""
Transient upstream failure classification.

Shared by the generation and embedding call paths so both retry the same
network and provider-side failures.

Dependencies: httpx, google-genai
System role: Retry predicate for upstream provider calls
"""

import httpx
from google.genai import errors as genai_errors

from askpdf.core.exceptions import AskPdfException

TRANSIENT_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})


def is_transient_upstream_error(exc: BaseException) -> bool:
    """
    Whether an upstream failure is worth retrying.

    Args:
        exc: Exception raised by a provider call

    Returns:
        bool: True for network, timeout, throttling and provider-side 5xx failures
    """
    if isinstance(exc, AskPdfException):
        return getattr(exc, "retryable", False)
    if isinstance(exc, (ConnectionError, TimeoutError, httpx.TransportError)):
        return True
    if isinstance(exc, genai_errors.ServerError):
        return True
    if isinstance(exc, genai_errors.APIError):
        return exc.code in TRANSIENT_STATUS_CODES
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in TRANSIENT_STATUS_CODES
    return False
