"""
Test suite for transient upstream failure classification.

System role: Verification of the shared retry predicate
"""

import httpx
import pytest
from google.genai import errors as genai_errors

from askpdf.core.exceptions import GenerationError, GenerationTimeoutError
from askpdf.core.retry_policy import is_transient_upstream_error


def _api_error(error_cls, code: int):
    return error_cls(code, {"error": {"code": code, "message": "upstream", "status": "X"}})


class TestIsTransientUpstreamError:
    """Test suite for is_transient_upstream_error."""

    @pytest.mark.parametrize(
        "exc",
        [
            ConnectionError("reset"),
            TimeoutError("slow"),
            httpx.ConnectError("refused"),
            httpx.ReadTimeout("read timed out"),
            GenerationTimeoutError("timed out"),
        ],
    )
    def test_network_failures_are_transient(self, exc) -> None:
        assert is_transient_upstream_error(exc)

    def test_provider_server_error_is_transient(self) -> None:
        assert is_transient_upstream_error(_api_error(genai_errors.ServerError, 503))

    def test_throttling_is_transient(self) -> None:
        assert is_transient_upstream_error(_api_error(genai_errors.ClientError, 429))

    def test_rejected_request_is_permanent(self) -> None:
        assert not is_transient_upstream_error(_api_error(genai_errors.ClientError, 400))

    def test_status_error_uses_response_code(self) -> None:
        request = httpx.Request("POST", "https://example.invalid")
        unavailable = httpx.HTTPStatusError(
            "unavailable", request=request, response=httpx.Response(503, request=request)
        )
        forbidden = httpx.HTTPStatusError(
            "forbidden", request=request, response=httpx.Response(403, request=request)
        )

        assert is_transient_upstream_error(unavailable)
        assert not is_transient_upstream_error(forbidden)

    @pytest.mark.parametrize("exc", [ValueError("bad"), GenerationError("rejected")])
    def test_other_failures_are_permanent(self, exc) -> None:
        assert not is_transient_upstream_error(exc)
