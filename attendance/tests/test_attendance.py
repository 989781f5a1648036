# attendance/tests/test_attendance.py
import re
from datetime import date
from unittest import mock

from django.db import DatabaseError, connection
from django.test import TestCase
from django.test.utils import CaptureQueriesContext
from django.urls import reverse

from accounts.models import User
from attendance.models import Attendance
from students.models import Student
from technologies.models import Semester, Technology

DENIED = "Access denied. Only admins and teachers can manage attendance."
GRID_TABLES = ("technologies_technology", "students_student", "attendance_attendance")


def cell_state(html, student_id, day):
    match = re.search(
        r'data-student-id="%s"\s+data-date="%s"\s+data-state="(\w+)"' % (re.escape(student_id), day.isoformat()),
        html,
    )
    return match.group(1) if match else None


class AttendanceGridTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.semester = Semester.objects.create(name="Semester 1")
        cls.web = Technology.objects.create(name="Web Development", semester=cls.semester)
        cls.data = Technology.objects.create(name="Data Science", semester=cls.semester)
        cls.empty = Technology.objects.create(name="Networking", semester=cls.semester)

        cls.jane = Student.objects.create(id="S1", name="Jane", surname="Doe", technology=cls.web)
        cls.adam = Student.objects.create(id="S2", name="Adam", surname="Smith", technology=cls.web)
        cls.other = Student.objects.create(id="S3", name="Zoe", surname="King", technology=cls.data)

        cls.teacher = User.objects.create_user(username="teacher", password="testpass123", role="teacher")
        cls.admin = User.objects.create_user(username="admin", password="testpass123", role="admin")
        cls.student_user = User.objects.create_user(username="student", password="testpass123", role="student")
        cls.parent = User.objects.create_user(username="parent", password="testpass123", role="parent")

    def setUp(self):
        self.client.force_login(self.teacher)

    def get_grid(self, **params):
        return self.client.get(reverse("attendance:grid"), params)

    def test_roles_outside_admin_and_teacher_are_denied_without_reads(self):
        for user in (self.student_user, self.parent):
            self.client.force_login(user)
            with CaptureQueriesContext(connection) as ctx:
                resp = self.get_grid(month="2024-02", technologyId=self.web.id)

            self.assertEqual(resp.status_code, 403)
            self.assertContains(resp, DENIED, status_code=403)
            touched = [q["sql"] for q in ctx.captured_queries if any(t in q["sql"] for t in GRID_TABLES)]
            self.assertEqual(touched, [])

    def test_anonymous_user_is_sent_to_login(self):
        self.client.logout()
        resp = self.get_grid()
        self.assertEqual(resp.status_code, 302)
        self.assertIn(reverse("accounts:login"), resp["Location"])

    def test_admin_can_view_grid(self):
        self.client.force_login(self.admin)
        resp = self.get_grid()
        self.assertEqual(resp.status_code, 200)

    def test_no_technology_selected_prompts_for_selection(self):
        resp = self.get_grid(month="2024-02")
        self.assertContains(resp, "Please select a technology to view attendance")
        self.assertNotContains(resp, "<table")
        self.assertIsNone(resp.context["grid"].filters.technology_id)

    def test_unparseable_technology_id_is_treated_as_no_selection(self):
        resp = self.get_grid(month="2024-02", technologyId="abc")
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "Please select a technology to view attendance")

    def test_out_of_range_technology_id_is_treated_as_no_selection(self):
        resp = self.get_grid(month="2024-02", technologyId="99999999999999999999")
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "Please select a technology to view attendance")
        self.assertIsNone(resp.context["grid"].filters.technology_id)

    def test_technology_selector_lists_all_technologies_with_semester(self):
        resp = self.get_grid()
        names = [t.name for t in resp.context["grid"].technologies]
        self.assertEqual(names, ["Data Science", "Networking", "Web Development"])
        self.assertContains(resp, "Web Development (Semester 1)")

    def test_month_defaults_to_current_month(self):
        resp = self.get_grid(technologyId=self.web.id)
        self.assertEqual(resp.context["filters"].month, date.today().replace(day=1))
        self.assertContains(resp, 'value="%s"' % date.today().strftime("%Y-%m"))

    def test_technology_without_students_shows_empty_state(self):
        Attendance.objects.create(student=self.other, date=date(2024, 2, 3), present=True)
        resp = self.get_grid(month="2024-02", technologyId=self.empty.id)
        self.assertContains(resp, "No students found for the selected technology")
        self.assertNotContains(resp, "<table")

    def test_rows_and_day_columns_follow_students_and_month_length(self):
        for month, days in (("2024-02", 29), ("2024-04", 30), ("2024-01", 31), ("2023-02", 28)):
            resp = self.get_grid(month=month, technologyId=self.web.id)
            html = resp.content.decode()
            self.assertEqual(html.count("data-day="), days, month)
            self.assertEqual(html.count("data-student-row="), 2, month)

    def test_students_are_ordered_by_name(self):
        resp = self.get_grid(month="2024-02", technologyId=self.web.id)
        self.assertEqual([row.student.id for row in resp.context["grid"].rows], ["S2", "S1"])

    def test_single_present_record_renders_in_its_column(self):
        Attendance.objects.create(student=self.jane, date=date(2024, 2, 10), present=True)
        Attendance.objects.create(student=self.other, date=date(2024, 2, 11), present=False)

        resp = self.get_grid(month="2024-02", technologyId=self.web.id)
        html = resp.content.decode()

        self.assertContains(resp, "Jane Doe")
        self.assertEqual(cell_state(html, "S1", date(2024, 2, 10)), "present")
        jane_states = [cell_state(html, "S1", date(2024, 2, d)) for d in range(1, 30)]
        self.assertEqual(jane_states.count("unset"), 28)
        self.assertEqual(jane_states.count("present"), 1)

    def test_records_outside_the_month_are_ignored(self):
        Attendance.objects.create(student=self.jane, date=date(2024, 1, 31), present=True)
        Attendance.objects.create(student=self.jane, date=date(2024, 3, 1), present=False)

        resp = self.get_grid(month="2024-02", technologyId=self.web.id)
        states = {c.present for row in resp.context["grid"].rows for c in row.cells}
        self.assertEqual(states, {None})

    def test_mark_then_reload_then_toggle(self):
        url = reverse("attendance:mark")
        day = date(2024, 2, 5)

        resp = self.get_grid(month="2024-02", technologyId=self.web.id)
        self.assertEqual(cell_state(resp.content.decode(), "S1", day), "unset")

        resp = self.client.post(url, {"student_id": "S1", "date": "2024-02-05", "present": True}, content_type="application/json")
        self.assertEqual(resp.status_code, 200)
        resp = self.get_grid(month="2024-02", technologyId=self.web.id)
        self.assertEqual(cell_state(resp.content.decode(), "S1", day), "present")

        resp = self.client.post(url, {"student_id": "S1", "date": "2024-02-05", "present": False}, content_type="application/json")
        self.assertEqual(resp.status_code, 200)
        resp = self.get_grid(month="2024-02", technologyId=self.web.id)
        self.assertEqual(cell_state(resp.content.decode(), "S1", day), "absent")


class MarkAttendanceApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        semester = Semester.objects.create(name="Semester 1")
        technology = Technology.objects.create(name="Web Development", semester=semester)
        cls.student = Student.objects.create(id="S1", name="Jane", surname="Doe", technology=technology)
        cls.teacher = User.objects.create_user(username="teacher", password="testpass123", role="teacher")
        cls.parent = User.objects.create_user(username="parent", password="testpass123", role="parent")

    def setUp(self):
        self.client.force_login(self.teacher)
        self.url = reverse("attendance:mark")

    def post(self, payload):
        return self.client.post(self.url, payload, content_type="application/json")

    def test_mark_creates_attendance_and_returns_cell(self):
        resp = self.post({"student_id": "S1", "date": "2024-02-10", "present": True})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data["ok"])
        self.assertTrue(data["created"])
        self.assertTrue(data["present"])
        self.assertIn('data-state="present"', data["html"])
        self.assertIn("Present (click to mark absent)", data["html"])

        att = Attendance.objects.get(student=self.student, date=date(2024, 2, 10))
        self.assertTrue(att.present)

    def test_repeated_mark_is_idempotent(self):
        for _ in range(2):
            resp = self.post({"student_id": "S1", "date": "2024-02-10", "present": True})
            self.assertEqual(resp.status_code, 200)

        self.assertFalse(resp.json()["created"])
        records = Attendance.objects.filter(student=self.student, date=date(2024, 2, 10))
        self.assertEqual(records.count(), 1)
        self.assertTrue(records.get().present)

    def test_toggle_updates_existing_record(self):
        Attendance.objects.create(student=self.student, date=date(2024, 2, 10), present=True)
        resp = self.post({"student_id": "S1", "date": "2024-02-10", "present": False})
        self.assertEqual(resp.status_code, 200)
        self.assertIn('data-state="absent"', resp.json()["html"])
        self.assertEqual(Attendance.objects.filter(student=self.student).count(), 1)
        self.assertFalse(Attendance.objects.get(student=self.student).present)

    def test_unknown_student_is_rejected(self):
        resp = self.post({"student_id": "missing", "date": "2024-02-10", "present": True})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("student_id", resp.json())
        self.assertFalse(Attendance.objects.exists())

    def test_invalid_date_is_rejected(self):
        resp = self.post({"student_id": "S1", "date": "2024-02-30", "present": True})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("date", resp.json())

    def test_write_failure_is_logged_and_reported(self):
        with mock.patch("attendance.api.upsert_attendance", side_effect=DatabaseError("database is locked")):
            with self.assertLogs("attendance.api", level="ERROR") as logs:
                resp = self.post({"student_id": "S1", "date": "2024-02-10", "present": True})

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"ok": False})
        self.assertIn("Failed to update attendance for S1 on 2024-02-10", logs.output[0])
        self.assertFalse(Attendance.objects.exists())

    def test_parent_cannot_mark(self):
        self.client.force_login(self.parent)
        resp = self.post({"student_id": "S1", "date": "2024-02-10", "present": True})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["detail"], DENIED)
        self.assertFalse(Attendance.objects.exists())

    def test_anonymous_cannot_mark(self):
        self.client.logout()
        resp = self.post({"student_id": "S1", "date": "2024-02-10", "present": True})
        self.assertEqual(resp.status_code, 403)
        self.assertFalse(Attendance.objects.exists())
