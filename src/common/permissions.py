"""
Permission guards.

Access is derived from Django's user flags — no separate permission table.
"""

from src.common.exceptions import PermissionDeniedError


def require_staff(user) -> None:
    """Raise PermissionDeniedError if user is not a staff member."""
    if not getattr(user, "is_staff", False):
        raise PermissionDeniedError("Staff access required.")
