"""User directory service built on the HTTP transport."""

import re
from typing import Any, List, Optional
import httpx
from pydantic import EmailStr, TypeAdapter, ValidationError
from rich.console import Console

from user_directory.config import ClientConfig
from user_directory.models.result import ErrorKind, ServiceError, UserListResult, UserResult
from user_directory.models.user import User
from user_directory.services.api import HttpMethod, UserDirectoryAPIClient, is_synthetic
from user_directory.services.mapper import map_many, map_one

console = Console(stderr=True)

_email_adapter = TypeAdapter(EmailStr)

_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_int(value: Any) -> Optional[int]:
    """Parse an integer from an int, integral float or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        value = value.strip()
        return int(value) if _INT_PATTERN.fullmatch(value) else None
    return None


class UserService:
    """Service for reading and creating directory users.

    Public operations never raise: transport failures, error statuses and
    malformed payloads all come back as None, an empty list or a result
    carrying a ServiceError.
    """

    ERROR_MESSAGE = "Sorry an error occurred"

    DEFAULT_PAGE = 1
    DEFAULT_PER_PAGE = 5
    MAX_PER_PAGE = 10

    def __init__(self, api: Optional[UserDirectoryAPIClient] = None, config: Optional[ClientConfig] = None):
        if api is not None and config is not None:
            raise ValueError("Pass either an api client or a config, not both")
        self._owns_api = api is None
        self.api = api or UserDirectoryAPIClient(config)

    @classmethod
    def from_client(cls, client: httpx.Client, config: Optional[ClientConfig] = None) -> "UserService":
        """Create a service on top of an existing httpx client.

        Timeout and base URL come from the given client; only the verbose
        flag of config is used.
        """
        return cls(UserDirectoryAPIClient(config, client=client))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_api:
            self.api.close()

    @property
    def verbose(self) -> bool:
        return self.api.config.verbose

    # Input normalization

    @classmethod
    def normalize_page(cls, value: Any) -> int:
        """Return a page number of at least 1, defaulting to 1."""
        page = _parse_int(value)
        if page is None or page < 1:
            console.print(f"[yellow]Invalid page {value!r}, using {cls.DEFAULT_PAGE}[/yellow]")
            return cls.DEFAULT_PAGE
        return page

    @classmethod
    def normalize_per_page(cls, value: Any) -> int:
        """Return a page size within 1..MAX_PER_PAGE, defaulting to 5."""
        per_page = _parse_int(value)
        if per_page is None or not (1 <= per_page <= cls.MAX_PER_PAGE):
            console.print(f"[yellow]Invalid per_page {value!r}, using {cls.DEFAULT_PER_PAGE}[/yellow]")
            return cls.DEFAULT_PER_PAGE
        return per_page

    @staticmethod
    def normalize_email(value: Any) -> str:
        """Return the address unchanged if well formed, otherwise an empty string."""
        if not isinstance(value, str) or not value.strip():
            return ""

        email = value.strip()
        try:
            _email_adapter.validate_python(email)
        except ValidationError:
            console.print(f"[yellow]Ignoring invalid email address {email!r}[/yellow]")
            return ""
        return email

    # Structured operations

    def fetch_user(self, user_id: int) -> UserResult:
        """Look up a single user by ID."""
        response = self.api.request(f"users/{user_id}", HttpMethod.GET)

        if response.status_code != 200:
            return UserResult(error=self._error_from_response(response))

        payload = self._decode(response)
        if not isinstance(payload, dict) or "data" not in payload:
            return UserResult(error=self._malformed(response, "Response has no 'data' object"))

        user = map_one(payload["data"])
        if user is None:
            return UserResult(error=self._malformed(response, "User data is missing required fields"))

        if self.verbose:
            console.print(f"[green]Found user {user.id}: {user.full_name}[/green]")
        return UserResult(user=user)

    def list_users(self, page: Any = DEFAULT_PAGE, per_page: Any = DEFAULT_PER_PAGE) -> UserListResult:
        """Fetch one page of users."""
        page = self.normalize_page(page)
        per_page = self.normalize_per_page(per_page)

        response = self.api.request(
            "users",
            HttpMethod.GET,
            params={"page": page, "per_page": per_page}
        )

        if response.status_code != 200:
            return UserListResult(error=self._error_from_response(response))

        payload = self._decode(response)
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            return UserListResult(error=self._malformed(response, "Response has no 'data' list"))

        users = map_many(payload["data"])
        if self.verbose:
            console.print(f"[green]Found {len(users)} users on page {page}[/green]")
        return UserListResult(users=users)

    def register_user(self, first_name: str, last_name: str, email: str = "", job: str = "") -> UserResult:
        """Create a user and return the created record."""
        response = self.api.request(
            "users",
            HttpMethod.POST,
            json={
                "first_name": first_name,
                "last_name": last_name,
                "email": self.normalize_email(email),
                "job": job
            }
        )

        if response.status_code != 201:
            return UserResult(error=self._error_from_response(response))

        user = map_one(self._decode(response))
        if user is None:
            return UserResult(error=self._malformed(response, "Created user is missing required fields"))

        if self.verbose:
            console.print(f"[green]Created user {user.id}: {user.full_name}[/green]")
        return UserResult(user=user)

    # Simple operations

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID, or None if it could not be retrieved."""
        return self.fetch_user(user_id).user

    def get_paginated_users(self, page: Any = DEFAULT_PAGE, per_page: Any = DEFAULT_PER_PAGE) -> List[User]:
        """Get a page of users; empty when the request fails."""
        result = self.list_users(page, per_page)
        if not result.ok:
            console.print(f"[yellow]{self.ERROR_MESSAGE}: {result.error.message}[/yellow]")
        return result.users

    def create_user(self, first_name: str, last_name: str, email: str = "", job: str = "") -> Optional[User]:
        """Create a user, returning None if creation failed."""
        return self.register_user(first_name, last_name, email=email, job=job).user

    # Helpers

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_from_response(response: httpx.Response) -> ServiceError:
        """Classify a non-success response."""
        status = response.status_code
        if is_synthetic(response):
            upstream = response.extensions.get("upstream_status")
            if upstream is None:
                return ServiceError(kind=ErrorKind.TRANSPORT, status_code=status, message=response.text)
            status = upstream

        kind = ErrorKind.NOT_FOUND if status == 404 else ErrorKind.HTTP_STATUS
        console.print(f"[yellow]Request failed with status {status}[/yellow]")
        return ServiceError(kind=kind, status_code=status, message=response.text)

    @staticmethod
    def _malformed(response: httpx.Response, reason: str) -> ServiceError:
        console.print(f"[yellow]{reason}[/yellow]")
        return ServiceError(kind=ErrorKind.MALFORMED_PAYLOAD, status_code=response.status_code, message=reason)
