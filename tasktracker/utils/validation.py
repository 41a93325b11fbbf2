import re
from typing import Optional

from tasktracker.errors import Error

# Coarse shape check only: something@something.something anywhere in the value.
EMAIL_RE = re.compile(r"\S+@\S+\.\S+")


def is_email_valid(email: str) -> bool:
    return EMAIL_RE.search(email) is not None


def validate_user_payload(name: Optional[str], email: Optional[str]) -> Optional[Error]:
    """Return a BadRequest error for an unusable user payload, else None."""
    if not name or not email:
        return Error.bad_request("Invalid input: Name and email are required")
    if not is_email_valid(email):
        return Error.bad_request("Invalid input: Email is not valid")
    return None


def validate_task_payload(title: Optional[str]) -> Optional[Error]:
    """Return a BadRequest error when the title is missing, else None.

    The description is free-form and may be empty.
    """
    if not title:
        return Error.bad_request("Invalid input: Title is required")
    return None
