from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from accounts.models import User
from core.permissions import (
    ATTENDANCE_DENIED_MESSAGE,
    AccessDecision,
    check_attendance_access,
)


class AccessDecisionTests(TestCase):
    def test_admin_and_teacher_are_allowed(self):
        for role in ("admin", "teacher"):
            user = User.objects.create_user(username=role, password="testpass123", role=role)
            decision = check_attendance_access(user)
            self.assertEqual(decision, AccessDecision.allow())
            self.assertTrue(decision)

    def test_other_roles_are_denied_with_reason(self):
        for role in ("student", "parent"):
            user = User.objects.create_user(username=role, password="testpass123", role=role)
            decision = check_attendance_access(user)
            self.assertFalse(decision)
            self.assertEqual(decision.reason, ATTENDANCE_DENIED_MESSAGE)

    def test_anonymous_is_denied(self):
        self.assertFalse(check_attendance_access(AnonymousUser()))

    def test_denials_are_logged(self):
        user = User.objects.create_user(username="parent", password="testpass123", role="parent")
        with self.assertLogs("core.permissions", level="INFO") as logs:
            check_attendance_access(user)
        self.assertIn("role='parent'", logs.output[0])
