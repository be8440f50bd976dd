"""
workforce/models.py
Role enumeration and the authenticated Session record.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Authority levels issued by the backend, value equal to the wire string."""

    ADMIN    = "ADMIN"
    MANAGER  = "MANAGER"
    EMPLOYEE = "EMPLOYEE"

    @classmethod
    def parse(cls, value) -> "Role":
        """
        Return the Role for a wire string or Role.

        Raises ValueError for anything outside the three known roles, including
        None and lowercase spellings; the backend always sends upper case.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unrecognised role: {value!r}") from None


TASK_STATUSES = ["TODO", "IN_PROGRESS", "COMPLETED", "CANCELLED"]
ATTENDANCE_STATUSES = ["PRESENT", "ABSENT", "LATE", "HALF_DAY"]


@dataclass(frozen=True)
class Session:
    """
    The authenticated identity held by the client.

    Immutable: a new token or role means a new login and a new Session.
    Only token and role drive authorization; name, email and user_id are for
    display and for pre-filling forms.
    """

    token:   str
    role:    Role
    name:    str = ""
    email:   str = ""
    user_id: int | None = None

    @classmethod
    def from_record(cls, record: Mapping) -> "Session":
        """
        Build a Session from a backend auth response.

        Expected shape: {token, role, name, email, userId}.  Raises ValueError
        when the record is not a mapping, the token is missing or blank, or the
        role is not recognised.
        """
        if not isinstance(record, Mapping):
            raise ValueError("Session record must be an object.")

        token = record.get("token")
        if not isinstance(token, str) or not token.strip():
            raise ValueError("Session record has no token.")

        user_id = record.get("userId")
        if user_id is not None:
            try:
                user_id = int(user_id)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid userId: {user_id!r}") from None

        return cls(
            token=token,
            role=Role.parse(record.get("role")),
            name=str(record.get("name") or ""),
            email=str(record.get("email") or ""),
            user_id=user_id,
        )

    def to_record(self) -> dict:
        """Return the wire-shaped dict this session was built from."""
        return {
            "token":  self.token,
            "role":   self.role.value,
            "name":   self.name,
            "email":  self.email,
            "userId": self.user_id,
        }
