"""Issue HTTP requests with environment variable substitution.

Any value in the form ``{{VARIABLE_NAME}}`` in the URL, header keys and
values, or a string body is resolved against the environment store before the
request is sent.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict

import requests

from .config import DEFAULT_TIMEOUT_MS
from .environment import EnvironmentStore
from .history import HistoryStore
from .logging_config import get_logger
from .models import HttpMethod, RequestItem

logger = get_logger(__name__)


class RequestServiceError(Exception):
    """Raised when a request cannot be completed."""

    pass


class RequestTimeoutError(RequestServiceError):
    """Raised when a request exceeds its timeout."""

    pass


@dataclass
class RequestResult:
    """What came back from the server."""

    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400


@dataclass
class RequestOptions:
    method: str = HttpMethod.GET.value
    headers: Dict[str, str] | None = None
    body: Any = None
    timeout_ms: int | None = None


class RequestService:
    """Sends requests through a ``requests.Session``."""

    def __init__(
        self,
        environment: EnvironmentStore | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        session: requests.Session | None = None,
        history: HistoryStore | None = None,
    ) -> None:
        self.environment = environment or EnvironmentStore()
        self.timeout_ms = timeout_ms
        self.session = session or requests.Session()
        self.history = history
        logger.debug("RequestService initialized (timeout=%dms)", timeout_ms)

    def process_environment_variables(self, text: str) -> str:
        return self.environment.resolve_variables(text)

    def process_request_options(self, options: RequestOptions) -> RequestOptions:
        """Return a copy of ``options`` with placeholders resolved."""
        headers = None
        if options.headers is not None:
            headers = {
                self.process_environment_variables(key): self.process_environment_variables(value)
                for key, value in options.headers.items()
            }

        body = options.body
        if isinstance(body, str):
            body = self.process_environment_variables(body)

        return RequestOptions(
            method=options.method,
            headers=headers,
            body=body,
            timeout_ms=options.timeout_ms,
        )

    def send_request(
        self,
        url: str,
        method: str = HttpMethod.GET.value,
        headers: Dict[str, str] | None = None,
        body: Any = None,
        timeout_ms: int | None = None,
    ) -> RequestResult:
        """Send one request.

        Args:
            url: Target URL, may contain placeholders.
            method: HTTP method.
            headers: Header mapping.
            body: String body, or a dict/list serialised as JSON.
            timeout_ms: Overrides the service timeout for this call.

        Returns:
            The response summary.

        Raises:
            RequestTimeoutError: If the timeout elapses.
            RequestServiceError: For any other transport failure.
        """
        processed_url = self.process_environment_variables(url)
        options = self.process_request_options(
            RequestOptions(method=method, headers=headers, body=body, timeout_ms=timeout_ms)
        )

        request_headers = dict(options.headers or {})
        data = options.body
        if data is not None and not isinstance(data, (str, bytes)):
            data = json.dumps(data)
            if "Content-Type" not in request_headers:
                request_headers["Content-Type"] = "application/json"

        timeout_ms = self.timeout_ms if options.timeout_ms is None else options.timeout_ms
        if timeout_ms <= 0:
            raise RequestServiceError(
                f"Timeout must be a positive number of milliseconds, got {timeout_ms}"
            )
        timeout = timeout_ms / 1000

        logger.info("Sending %s %s", options.method, processed_url)
        started = time.perf_counter()
        try:
            response = self.session.request(
                options.method,
                processed_url,
                headers=request_headers,
                data=data,
                timeout=timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error("Request timeout for URL: %s", processed_url)
            raise RequestTimeoutError(
                f"Request to {processed_url} timed out after {timeout:g}s"
            ) from e
        except requests.exceptions.ConnectionError as e:
            logger.error("Connection error for URL %s: %s", processed_url, e)
            raise RequestServiceError(f"Connection error for URL: {processed_url}") from e
        except requests.exceptions.RequestException as e:
            logger.error("Request error for URL %s: %s", processed_url, e)
            raise RequestServiceError(f"Request error for URL {processed_url}: {e}") from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("Received %s from %s in %.0fms", response.status_code, processed_url, elapsed_ms)

        return RequestResult(
            status=response.status_code,
            status_text=response.reason or "",
            headers=dict(response.headers),
            body=response.text,
            elapsed_ms=elapsed_ms,
        )

    def get(self, url: str, **options: Any) -> RequestResult:
        return self.send_request(url, HttpMethod.GET.value, **options)

    def post(self, url: str, body: Any = None, **options: Any) -> RequestResult:
        return self.send_request(url, HttpMethod.POST.value, body=body, **options)

    def put(self, url: str, body: Any = None, **options: Any) -> RequestResult:
        return self.send_request(url, HttpMethod.PUT.value, body=body, **options)

    def delete(self, url: str, **options: Any) -> RequestResult:
        return self.send_request(url, HttpMethod.DELETE.value, **options)

    def patch(self, url: str, body: Any = None, **options: Any) -> RequestResult:
        return self.send_request(url, HttpMethod.PATCH.value, body=body, **options)

    def send_request_item(self, item: RequestItem, timeout_ms: int | None = None) -> RequestResult:
        """Send a saved request and record the outcome in the history store.

        Failures are recorded too and then re-raised.
        """
        entry = {
            "method": item.method,
            "url": item.url,
            "headers": [{"key": key, "value": value} for key, value in item.headers.items()],
            "body": item.body,
        }

        try:
            result = self.send_request(
                item.url, item.method, headers=item.headers, body=item.body, timeout_ms=timeout_ms
            )
        except RequestServiceError as e:
            if self.history is not None:
                self.history.add_to_history(**entry, error=str(e))
            raise

        if self.history is not None:
            self.history.add_to_history(
                **entry,
                status=result.status,
                status_text=result.status_text,
                response_time=result.elapsed_ms,
                response_body=result.body,
                response_headers=result.headers,
            )
        return result
