# attendance/services.py
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta
from django.db import transaction

from students.models import Student
from technologies.models import Technology
from .cells import AttendanceCell
from .forms import AttendanceFilterForm
from .models import Attendance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceFilters:
    """Filter state of the grid; everything the page needs is in the URL."""

    month: date  # always the first day of the month
    technology_id: Optional[int] = None

    @classmethod
    def from_query(cls, query, today=None):
        today = today or date.today()
        form = AttendanceFilterForm(query)
        form.is_valid()
        for name, errors in form.errors.items():
            logger.debug("Ignoring malformed %s=%r: %s", name, query.get(name), "; ".join(errors))

        month = form.cleaned_data.get("month") or today
        return cls(
            month=month.replace(day=1),
            technology_id=form.cleaned_data.get("technologyId"),
        )

    @property
    def month_value(self):
        return self.month.strftime("%Y-%m")


@dataclass
class GridRow:
    student: Student
    cells: List[AttendanceCell]


@dataclass
class AttendanceGrid:
    filters: AttendanceFilters
    technologies: list
    students: list
    days: List[int]
    rows: List[GridRow] = field(default_factory=list)

    @property
    def has_selection(self):
        return self.filters.technology_id is not None

    @property
    def has_table(self):
        return self.has_selection and bool(self.students)


def month_bounds(month):
    """First and last calendar day of the month containing ``month``."""
    first_day = month.replace(day=1)
    last_day = first_day + relativedelta(day=31)
    return first_day, last_day


def attendance_key(student_id, day):
    return f"{student_id}-{day}"


def build_attendance_map(records):
    """
    Map ``"{student_id}-{day}"`` to ``present``.
    A missing key means the cell has no record yet.
    """
    return {
        attendance_key(r["student_id"], r["date"].day): r["present"]
        for r in records
    }


def list_technologies():
    return list(Technology.objects.for_selector())


def list_students(technology_id):
    if technology_id is None:
        return []
    return list(Student.objects.in_technology(technology_id).only("id", "name", "surname"))


def list_attendance(student_ids, first_day, last_day):
    return list(
        Attendance.objects.filter(
            student_id__in=student_ids,
            date__gte=first_day,
            date__lte=last_day,
        ).values("student_id", "date", "present")
    )


def build_attendance_grid(filters):
    technologies = list_technologies()
    students = list_students(filters.technology_id)

    first_day, last_day = month_bounds(filters.month)
    records = []
    if filters.technology_id is not None:
        records = list_attendance([s.id for s in students], first_day, last_day)
    attendance_map = build_attendance_map(records)

    days = list(range(1, last_day.day + 1))
    rows = [
        GridRow(
            student=student,
            cells=[
                AttendanceCell(
                    student_id=student.id,
                    date=first_day.replace(day=day),
                    present=attendance_map.get(attendance_key(student.id, day)),
                )
                for day in days
            ],
        )
        for student in students
    ]
    return AttendanceGrid(
        filters=filters,
        technologies=technologies,
        students=students,
        days=days,
        rows=rows,
    )


@transaction.atomic
def upsert_attendance(student_id, day, present):
    """
    Store exactly one record for (student_id, day). Repeating the call with
    the same arguments leaves the same state; concurrent writers race and
    the last write wins.
    """
    return Attendance.objects.update_or_create(
        student_id=student_id,
        date=day,
        defaults={"present": present},
    )
