import logging
from dataclasses import dataclass
from typing import Optional

from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)

ATTENDANCE_ROLES = ("admin", "teacher")
ATTENDANCE_DENIED_MESSAGE = "Access denied. Only admins and teachers can manage attendance."


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of a role check, computed once per request."""

    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls):
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason):
        return cls(allowed=False, reason=reason)

    def __bool__(self):
        return self.allowed


def user_role(user):
    """Role claim of the caller, or None for anonymous users."""
    if user is None or not user.is_authenticated:
        return None
    return getattr(user, "role", None)


def check_role(user, allowed_roles, message):
    role = user_role(user)
    if role in allowed_roles:
        return AccessDecision.allow()
    logger.info("Access denied for role=%r (allowed: %s)", role, ", ".join(allowed_roles))
    return AccessDecision.deny(message)


def check_attendance_access(user):
    return check_role(user, ATTENDANCE_ROLES, ATTENDANCE_DENIED_MESSAGE)


class IsAdminOrTeacher(BasePermission):
    message = ATTENDANCE_DENIED_MESSAGE

    def has_permission(self, request, view):
        decision = check_attendance_access(request.user)
        if not decision:
            self.message = decision.reason
        return decision.allowed
