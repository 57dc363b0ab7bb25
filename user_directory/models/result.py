"""Result models returned by the user service."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from user_directory.models.user import User


class ErrorKind(str, Enum):
    """Category of a soft failure."""

    TRANSPORT = "transport"
    NOT_FOUND = "not_found"
    HTTP_STATUS = "http_status"
    MALFORMED_PAYLOAD = "malformed_payload"


class ServiceError(BaseModel):
    """Structured description of why an operation produced no data."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    status_code: int
    message: str = ""


class UserResult(BaseModel):
    """Outcome of an operation that yields at most one user."""

    model_config = ConfigDict(frozen=True)

    user: Optional[User] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class UserListResult(BaseModel):
    """Outcome of an operation that yields a list of users."""

    model_config = ConfigDict(frozen=True)

    users: List[User] = []
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
