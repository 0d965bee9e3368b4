"""HTTP transport for the Podcast Index API."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import requests

from .auth import build_auth_headers
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    ExecutionError,
    FieldParseError,
    MalformedRequestError,
    ReadError,
    ServerError,
)
from .utils import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, REQUEST_TIMEOUT, QueryParams, encode_query, join_url

T = TypeVar("T")

SUCCESS_STATUS_CODES = frozenset({200, 302})


class PodcastIndexAPI:
    """Signs, sends and classifies GET requests against the Podcast Index API."""

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the transport.

        Args:
            api_key: Podcast Index API key
            api_secret: Podcast Index API secret
            user_agent: Identifies the calling product, e.g. ``SuperPodcastPlayer/1.3``
            base_url: Base URL of the API, override for proxies or local test servers
            session: HTTP session used for every request
            timeout: Default timeout in seconds for a single request

        """
        self.logger = logging.getLogger(__name__)
        self.api_key = api_key
        self.api_secret = api_secret
        self.user_agent = user_agent
        self.base_url = base_url
        self.session = session
        self.timeout = timeout

    def build_url(self, endpoint: str, params: QueryParams | None = None) -> str:
        """Build the absolute request URL with its sorted query string."""
        url = join_url(self.base_url, endpoint)
        query = encode_query(params)
        return f"{url}?{query}" if query else url

    def get(
        self,
        endpoint: str,
        params: QueryParams | None,
        decode: Callable[[Any], T],
        timeout: float | None = None,
    ) -> T:
        """Make a GET request and decode the JSON response.

        Args:
            endpoint: Endpoint path relative to the base URL, e.g. ``search/byterm``
            params: Query parameters as ordered (key, value) pairs or a mapping
            decode: Converts the parsed JSON body into the result
            timeout: Timeout in seconds for this request, defaults to the transport timeout

        Returns:
            Whatever ``decode`` returns for the response body

        Raises:
            ConfigurationError: If no HTTP session is configured
            ExecutionError: If the request could not be executed
            AuthenticationError: On HTTP 401
            MalformedRequestError: On HTTP 400
            ServerError: On any other non-success status
            ReadError: If the body of a response cannot be read
            DecodeError: If a successful response cannot be decoded

        """
        if self.session is None:
            raise ConfigurationError("no HTTP session configured, please set a valid requests.Session")

        request_url = self.build_url(endpoint, params)
        headers = build_auth_headers(self.user_agent, self.api_key, self.api_secret)
        self.logger.debug("GET %s", request_url)

        try:
            response = self.session.get(
                request_url,
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
                stream=True,
            )
        except requests.RequestException as e:
            error = ExecutionError(request_url, e)
            self.logger.error(str(error))
            raise error from e

        try:
            return self._handle_response(response, request_url, decode)
        finally:
            response.close()

    def _handle_response(self, response: requests.Response, request_url: str, decode: Callable[[Any], T]) -> T:
        url = response.url or request_url
        status_code = response.status_code

        if status_code == 401:
            error: Exception = AuthenticationError(url)
            self.logger.error(str(error))
            raise error
        if status_code == 400:
            error = MalformedRequestError(url, status_code)
            self.logger.error(str(error))
            raise error
        if status_code not in SUCCESS_STATUS_CODES:
            try:
                body = response.text
            except requests.RequestException as e:
                error = ReadError(url, status_code, e)
                self.logger.error(str(error))
                raise error from e
            error = ServerError(url, status_code, body)
            self.logger.error(str(error))
            raise error

        try:
            payload = response.json()
        except ValueError as e:
            # requests' JSONDecodeError is also a RequestException, so this must come first
            error = DecodeError(url, e)
            self.logger.error(str(error))
            raise error from e
        except requests.RequestException as e:
            error = ReadError(url, status_code, e)
            self.logger.error(str(error))
            raise error from e

        try:
            return decode(payload)
        except FieldParseError as e:
            error = DecodeError(url, e)
            self.logger.error(str(error))
            raise error from e
