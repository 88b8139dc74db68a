"""
Base API client for the Meteologix weather API.

Handles HTTP requests, session management and response decoding.
"""

import logging
import ssl
from typing import Any, Dict, Optional, Tuple

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.ssl_ import create_urllib3_context  # type: ignore

from ..core.config import Config
from ..core.constants import MIME_TYPE_JSON
from ..core.exceptions import APIError, DecodeError, NonJSONResponseError, TransportError
from ..core.logger import LoggerContext


class TLSAdapter(HTTPAdapter):
    """Transport adapter that refuses TLS versions below 1.2 and never retries."""

    def __init__(self, **kwargs: Any):
        kwargs.setdefault("max_retries", 0)
        super().__init__(**kwargs)

    def init_poolmanager(self, *args: Any, **kwargs: Any) -> None:
        context = create_urllib3_context()
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        kwargs["ssl_context"] = context
        super().init_poolmanager(*args, **kwargs)


class APIClient:
    """Base client for interacting with the Meteologix weather API."""

    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            config: Client configuration. If None, it is loaded from the
                    environment (and METEOLOGIX_CONFIG_FILE if set)
            session: Pre-configured requests session to use instead of a new one
            logger: Logger instance
        """
        self.config = config or Config()
        self.base_url = self.config.api_base_url
        self.timeout = self.config.timeout
        self.logger = logger or logging.getLogger(__name__)

        if session is None:
            session = requests.Session()
            # Credentials come from the config only, never from ~/.netrc
            session.trust_env = False
            adapter = TLSAdapter()
            session.mount("https://", adapter)
        self.session = session

        self._update_headers()

    def _update_headers(self) -> None:
        """Set the default headers sent with every request."""
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Content-Type": MIME_TYPE_JSON,
            "Accept": MIME_TYPE_JSON,
            "Accept-Language": self.config.accept_language,
        })

    def _request_auth(self, url: str) -> Tuple[Dict[str, str], Any]:
        """Return (extra headers, requests auth) for a URL; the base client sends none."""
        return {}, None

    def _make_request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make HTTP request and decode the JSON body.

        Args:
            method: HTTP method
            url: Absolute request URL
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            TransportError: On network, DNS, TLS or timeout failure
            NonJSONResponseError: If the response is not application/json
            APIError: If the HTTP status is 400 or above
            DecodeError: If the body is not valid JSON
        """
        headers, auth = self._request_auth(url)

        with LoggerContext(self.logger, f"{method} {url}"):
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    params=params,
                    headers=headers or None,
                    auth=auth,
                    timeout=self.timeout,
                )
            except requests.exceptions.RequestException as e:
                raise TransportError(f"{method} {url} failed: {e}") from e

            try:
                return self._decode_response(response)
            finally:
                self._close_response(response)

    def _decode_response(self, response: requests.Response) -> Any:
        content_type = response.headers.get("Content-Type", "")
        if not content_type.startswith(MIME_TYPE_JSON):
            raise NonJSONResponseError(content_type)

        try:
            payload = response.json()
        except ValueError as e:
            if response.status_code >= 400:
                raise DecodeError(
                    f"failed to decode error body of HTTP {response.status_code}: {e}"
                ) from e
            raise DecodeError(f"failed to decode JSON response: {e}") from e

        if response.status_code >= 400:
            if not isinstance(payload, dict):
                payload = {}
            reason = f"{response.status_code} {response.reason or ''}".strip()
            raise APIError.from_dict(payload, response.status_code, reason)

        return payload

    def _close_response(self, response: requests.Response) -> None:
        try:
            response.close()
        except Exception as e:
            self.logger.warning(f"Failed to close response body: {e}")

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make GET request against the weather API.

        Args:
            endpoint: API endpoint (without base URL)
            params: Query parameters

        Returns:
            Decoded JSON body
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        return self._make_request("GET", url, params=params)

    def get_url(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make GET request against an absolute URL (e.g. the geocoder).

        Args:
            url: Absolute URL
            params: Query parameters

        Returns:
            Decoded JSON body
        """
        return self._make_request("GET", url, params=params)

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
