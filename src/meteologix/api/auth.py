"""
Authentication for the Meteologix weather API.

Credentials are attached only to requests addressed to the configured
weather API; the geocoder is always queried anonymously.
"""

import logging
from typing import Any, Dict, Tuple
from urllib.parse import quote_plus

from requests.auth import HTTPBasicAuth  # type: ignore

from .client import APIClient


class AuthAPI(APIClient):
    """API client with API key or HTTP Basic authentication."""

    logger: logging.Logger

    @property
    def has_credentials(self) -> bool:
        """True if an API key or a username/password pair is configured."""
        return bool(self.config.api_key or (self.config.username and self.config.password))

    def _request_auth(self, url: str) -> Tuple[Dict[str, str], Any]:
        """
        Select the credentials for a request URL.

        The API key wins over HTTP Basic credentials. Username and password
        are URL-escaped before they are encoded.

        Args:
            url: Absolute request URL

        Returns:
            Tuple of extra headers and a requests auth object (or None)
        """
        if not url.startswith(self.base_url):
            return {}, None

        if self.config.api_key:
            return {"X-API-Key": self.config.api_key}, None

        if self.config.username and self.config.password:
            auth = HTTPBasicAuth(
                quote_plus(self.config.username),
                quote_plus(self.config.password),
            )
            return {}, auth

        return {}, None
