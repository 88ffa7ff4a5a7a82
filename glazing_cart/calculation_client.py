"""
Client for the external calculation and quote service.

One blocking request per submission. No retries or backoff here: a failed
call raises CalculationServiceError and the caller decides what to do.
Responses arrive wrapped as {"responseMessage": ..., "response": <payload>};
the payload is returned unwrapped and otherwise uninterpreted.
"""

import json
import logging
import urllib.error
import urllib.request
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

CALCULATE_PATH = "/api/v1/calculations/calculate"
VERIFY_PATH = "/api/v1/calculations/verify"
QUOTES_PATH = "/api/v1/quotes"


class CalculationServiceError(RuntimeError):
    """The calculation/quote service could not be reached or rejected the request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CalculationClient:

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.base_url = (base_url or settings.CALCULATION_API_URL).rstrip("/")
        self.token = token if token is not None else settings.CALCULATION_API_TOKEN
        self.timeout = timeout or settings.CALCULATION_TIMEOUT_SECONDS

    def calculate(self, request: dict):
        """Run the engine on {"projectCart": [...], "settings": {...}}. Returns the calculation result."""
        logger.info("Submitting project cart with %d item(s)", len(request.get("projectCart", [])))
        return self._post(CALCULATE_PATH, request)

    def verify(self, request: dict, frontend_result: dict):
        """Ask the engine to check a locally computed result against its own."""
        return self._post(VERIFY_PATH, {**request, "frontendResult": frontend_result})

    def create_quote(self, body: dict):
        """Create a quote from a to_quote_request / to_standalone_quote_request body."""
        return self._post(QUOTES_PATH, body)

    def _post(self, path: str, payload: dict):
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        req = urllib.request.Request(
            self.base_url + path,
            data=json.dumps(payload).encode("utf-8"),
            headers=headers,
            method="POST",
        )

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                body = json.loads(response.read() or b"null")
        except urllib.error.HTTPError as e:
            logger.warning("Calculation service returned %s for %s", e.code, path)
            raise CalculationServiceError(
                f"Calculation service returned HTTP {e.code} for {path}", status_code=e.code
            ) from e
        except (urllib.error.URLError, TimeoutError) as e:
            logger.warning("Calculation service unreachable at %s: %s", self.base_url, e)
            raise CalculationServiceError(f"Calculation service unreachable: {e}") from e
        except json.JSONDecodeError as e:
            raise CalculationServiceError(f"Calculation service sent invalid JSON for {path}") from e

        return unwrap_response(body)


def unwrap_response(body):
    """Strip the {"response": ...} envelope if present."""
    if isinstance(body, dict) and "response" in body:
        return body["response"]
    return body
