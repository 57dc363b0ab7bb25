"""Conversion of raw API payloads into User models."""

from typing import Any, List, Optional
from pydantic import ValidationError
from rich.console import Console

from user_directory.models.user import User

console = Console(stderr=True)

REQUIRED_FIELDS = ("id", "first_name", "last_name")


def map_one(raw: Any) -> Optional[User]:
    """Map a single raw object to a User, or None if it is malformed."""
    if not isinstance(raw, dict):
        return None

    if any(raw.get(field) is None for field in REQUIRED_FIELDS):
        return None

    try:
        return User.from_api_response(raw)
    except ValidationError as e:
        console.print(f"[yellow]Skipping malformed user {raw.get('id')!r}: {e.error_count()} invalid field(s)[/yellow]")
        return None


def map_many(raw_list: Any) -> List[User]:
    """Map a list of raw objects, dropping malformed items and keeping order."""
    if not isinstance(raw_list, list):
        return []

    users = []
    for item in raw_list:
        user = map_one(item)
        if user is not None:
            users.append(user)

    dropped = len(raw_list) - len(users)
    if dropped:
        console.print(f"[yellow]Dropped {dropped} malformed user(s) from response[/yellow]")

    return users
