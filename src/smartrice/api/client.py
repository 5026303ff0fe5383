"""
Base API client for the SmartRice backend REST interface.

Handles HTTP requests, session management, and error handling.
"""

import logging
from typing import Dict, Any, List, Optional, Union

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

REST_PREFIX = "/rest/v1"


class APIClient:
    """Base client for the backend's table REST endpoints."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        access_token: Optional[str] = None,
        timeout: int = 30,
        max_retries: int = 3,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Project URL of the backend
            api_key: Public API key sent with every request
            access_token: User access token; row-level security applies to this user.
                          Defaults to the API key.
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        if not api_key:
            raise ValueError("An API key is required")

        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.access_token = access_token or api_key
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.verify_ssl = verify_ssl

        # Setup session with retry strategy
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self._update_headers()

    def _update_headers(self) -> None:
        """Update session headers with the API key and access token."""
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.access_token}",
        })

    def set_access_token(self, access_token: str) -> None:
        """Switch to another user's access token."""
        self.access_token = access_token
        self._update_headers()

    def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: REST endpoint (without base URL and REST prefix)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            requests.exceptions.RequestException: On request failure
        """
        url = f"{self.base_url}{REST_PREFIX}/{endpoint.lstrip('/')}"
        kwargs.setdefault("verify", self.verify_ssl)

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
            return response

        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """
        Make GET request.

        Args:
            endpoint: REST endpoint
            params: Query parameters

        Returns:
            Decoded JSON response
        """
        response = self._make_request("GET", endpoint, params=params)
        return response.json()

    def post(
        self,
        endpoint: str,
        data: Union[Dict[str, Any], List[Dict[str, Any]]],
        return_representation: bool = True
    ) -> Any:
        """
        Make POST request.

        Args:
            endpoint: REST endpoint
            data: Request body data
            return_representation: Ask the backend to echo the stored rows

        Returns:
            Decoded JSON response, or None when nothing is returned
        """
        headers = {"Prefer": "return=representation" if return_representation else "return=minimal"}
        response = self._make_request("POST", endpoint, json=data, headers=headers)
        if not response.content:
            return None
        return response.json()

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
