"""Shared request construction for Strapi API access.

Builds authenticated headers and resolves endpoint names against an
instance's ``/api`` root.
"""


class BaseRequester:
    """Header and URL construction shared by requesters.

    Not intended to be used directly - use StrapiRequester instead.
    """

    def __init__(self, base_url: str, api_token: str) -> None:
        """Initialize the requester.

        Args:
            base_url: Instance root URL (e.g. "http://localhost:1337")
            api_token: Bearer token sent with every request
        """
        self.base_url = base_url.rstrip("/")
        self._api_token = api_token

    def _get_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers with authentication.

        Args:
            extra_headers: Additional headers, overriding the defaults

        Returns:
            Complete headers dictionary
        """
        headers = {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
        }

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _build_url(self, endpoint: str) -> str:
        """Build full URL for an endpoint.

        Absolute URLs are returned unchanged.

        Args:
            endpoint: Endpoint path (e.g. "articles" or "/api/articles")

        Returns:
            Complete URL
        """
        if "://" in endpoint:
            return endpoint

        endpoint = endpoint.strip("/")
        if not endpoint.startswith("api/"):
            endpoint = f"api/{endpoint}"

        return f"{self.base_url}/{endpoint}"
