"""GraphQL executor for running the introspection query against an endpoint.

Handles HTTP communication, error handling, and response parsing.
"""

import logging
from typing import Any, Mapping

import httpx

from .errors import GraphQLError, InvalidResponseError
from .model import IntrospectionResult, load_introspection
from .query import INTROSPECTION_QUERY

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class GraphQLExecutor:
    """Executes GraphQL queries against an endpoint.

    Examples:
        with GraphQLExecutor(url, headers={"Authorization": "Bearer ..."}) as executor:
            data = executor.execute(INTROSPECTION_QUERY)

        # Bring your own client (e.g. with a mock transport); it is not closed
        executor = GraphQLExecutor(url, client=httpx.Client(transport=transport))
    """

    def __init__(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        *,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        """Initialize the executor.

        Args:
            url: GraphQL endpoint URL
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds
            client: Optional pre-configured HTTP client
        """
        self.url = url
        self.timeout = timeout
        self.headers = dict(headers or {})
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def _request_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }
        headers.update(self.headers)
        return headers

    def close(self):
        """Close the HTTP client if this executor created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GraphQLExecutor":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a raw GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            The 'data' portion of the response

        Raises:
            GraphQLError: If the response contains errors
            InvalidResponseError: If the body is not a JSON object
            httpx.HTTPError: On network failures and non-2xx responses
        """
        client = self._get_client()

        payload = {"query": query, "variables": variables or {}}
        logger.debug("POST %s", self.url)
        response = client.post(self.url, json=payload, headers=self._request_headers())
        response.raise_for_status()

        try:
            result = response.json()
        except ValueError as e:
            raise InvalidResponseError(f"Response from {self.url} is not JSON") from e
        if not isinstance(result, dict):
            raise InvalidResponseError(f"Response from {self.url} is not a JSON object")

        if result.get("errors"):
            error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
            raise GraphQLError(f"GraphQL errors: {error_messages}", result["errors"])

        return result.get("data") or {}

    def introspect(self) -> IntrospectionResult:
        """Run the introspection query and validate the result."""
        data = self.execute(INTROSPECTION_QUERY)
        result = load_introspection(data)
        logger.info("Introspected %d types from %s", len(result.types), self.url)
        return result


def fetch_introspection(
    url: str,
    headers: Mapping[str, str] | None = None,
    *,
    timeout: float = 30.0,
    client: httpx.Client | None = None,
) -> IntrospectionResult:
    """Fetch the introspection result of the GraphQL endpoint at `url`."""
    with GraphQLExecutor(url, headers, timeout=timeout, client=client) as executor:
        return executor.introspect()
