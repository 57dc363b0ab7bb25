"""HTTP transport for the remote user directory API."""

from enum import Enum
from typing import Any, Optional, Union
import httpx
from rich.console import Console

from user_directory.config import ClientConfig

console = Console(stderr=True)


class HttpMethod(str, Enum):
    """HTTP verbs supported by the transport."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: Union["HttpMethod", str]) -> Optional["HttpMethod"]:
        """Resolve a verb name case-insensitively, or None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            return None


def synthetic_response(status_code: int, body: str, upstream_status: Optional[int] = None) -> httpx.Response:
    """Build a response standing in for a failed request."""
    return httpx.Response(
        status_code,
        text=body,
        extensions={"synthetic": True, "upstream_status": upstream_status}
    )


def is_synthetic(response: httpx.Response) -> bool:
    """Check whether a response was fabricated by the transport."""
    return bool(response.extensions.get("synthetic"))


class UserDirectoryAPIClient:
    """HTTP client for the user directory API that never raises."""

    def __init__(self, config: Optional[ClientConfig] = None, client: Optional[httpx.Client] = None):
        self.config = config or ClientConfig()
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(self.config.timeout),
            follow_redirects=True
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the underlying client if this adapter created it."""
        if self._owns_client:
            self.client.close()

    def request(
        self,
        path: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        *,
        params: Optional[dict] = None,
        json: Optional[Any] = None
    ) -> httpx.Response:
        """Perform the request, converting every failure into a response."""
        verb = HttpMethod.parse(method)
        if verb is None:
            console.print(f"[red]Unsupported HTTP method: {method}[/red]")
            return synthetic_response(500, "Unknown error")

        if self.config.verbose:
            console.print(f"[blue]{verb.value} {path}[/blue]")

        try:
            response = self.client.request(verb.value, path, params=params, json=json)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status >= 500:
                return synthetic_response(500, f"Server error: {e}", upstream_status=status)
            if status >= 400:
                return synthetic_response(400, f"Client error: {e}", upstream_status=status)
            return synthetic_response(500, f"Request error: {e}", upstream_status=status)
        except (httpx.ConnectError, httpx.ConnectTimeout) as e:
            console.print(f"[red]Connection error: {e}[/red]")
            return synthetic_response(502, f"Connection error: {e}")
        except httpx.HTTPError as e:
            console.print(f"[red]Request error: {e}[/red]")
            return synthetic_response(500, f"Request error: {e}")
        except Exception as e:
            console.print(f"[red]Unknown error: {e}[/red]")
            return synthetic_response(500, f"Unknown error: {e}")
