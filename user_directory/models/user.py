"""User data models."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """Directory user model."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    first_name: str
    last_name: str
    email: str = ""
    job: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _reject_bool_id(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("id must be an integer, not a boolean")
        return value

    @classmethod
    def from_api_response(cls, data: dict) -> "User":
        """Create User from API response."""
        return cls(
            id=data["id"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data.get("email") or "",
            job=data.get("job") or ""
        )

    @property
    def full_name(self) -> str:
        """Get first and last names joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the canonical mapping, including full_name."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "email": self.email,
            "job": self.job,
        }
